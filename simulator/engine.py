from dataclasses import dataclass

from simulator.errors import TapeUnderflowError
from simulator.machine import Direction
from simulator.step_counter import FOLD_THRESHOLD, StepCounter
from simulator.tape import Tape

INITIAL_HEAD = 2


@dataclass(frozen=True)
class Snapshot:
    state: str
    head: int
    steps: int
    halted: bool


class Simulation:
    """
    Runs one machine on a fresh tape. The table is only read; tape, head and
    counters belong to this run.
    """

    def __init__(self, machine, reporter=None, verbose=False,
                 fold_threshold=FOLD_THRESHOLD, initial_head=INITIAL_HEAD):
        self.machine = machine
        self.reporter = reporter
        self.verbose = verbose
        self.tape = Tape()
        self.head = initial_head
        self.state = machine.start
        self.counter = StepCounter(fold_threshold)

    @property
    def halted(self):
        return self.machine.is_terminal(self.state)

    @property
    def state_name(self):
        return self.machine.names[self.state]

    def snapshot(self):
        return Snapshot(
            state=self.state_name,
            head=self.head,
            steps=self.counter.total,
            halted=self.halted,
        )

    def step(self):
        """Execute one transition. Returns True once a terminal state is reached."""
        if self.halted:
            return True

        self.tape.ensure(self.head)
        rule = self.machine.states[self.state].rule_for(self.tape.read(self.head))
        self.tape.write(self.head, rule.write)
        self.state = rule.next

        # The move of a halting transition is never applied
        if self.halted:
            return True

        if rule.move is Direction.LEFT:
            if self.head == 0:
                raise TapeUnderflowError(self.counter.total, self.state_name)
            self.head -= 1
        elif rule.move is Direction.RIGHT:
            self.head += 1
        return False

    def report(self, steps):
        if self.reporter is not None:
            self.reporter.report(steps, self.state_name)

    def run(self):
        """Run until a terminal state and return the exact number of steps."""
        self.report(0)
        while True:
            if self.counter.tick() or self.verbose:
                self.report(self.counter.fold())
            if self.step():
                break

        total = self.counter.total
        self.report(total)
        return total
