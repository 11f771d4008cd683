from simulator.errors import (
    DuplicateStartError,
    DuplicateStateError,
    MissingStartError,
    UnknownStateError,
)
from simulator.grammar import parse_description
from simulator.machine import (
    RESERVED_STATES,
    Direction,
    State,
    Symbol,
    Transition,
    TuringMachine,
)


def absorbing_state(index):
    """A state that loops on itself, writes back what it read and never moves."""
    return State(
        on_a=Transition(next=index, move=Direction.NONE, write=Symbol.A),
        on_b=Transition(next=index, move=Direction.NONE, write=Symbol.B),
    )


def resolve_transition(info, name_map, referenced_by):
    if info.next not in name_map:
        raise UnknownStateError(info.next, referenced_by)
    return Transition(next=name_map[info.next], move=info.move, write=info.write)


def build_machine(description, reserved=RESERVED_STATES):
    """
    Turn parsed state blocks into a dense `TuringMachine`.

    Reserved names take indices 0..len(reserved)-1, user states follow in
    parse order. Targets are resolved only after every block has a number,
    so a block may refer to states declared after it.
    """
    name_map = {name: index for index, name in enumerate(reserved)}
    states = [absorbing_state(index) for index in range(len(reserved))]
    start_state = None
    start_name = None

    # Pass one: number the states and find the start
    for info in description.states:
        if info.name in name_map:
            raise DuplicateStateError(f"State '{info.name}' is declared more than once")
        name_map[info.name] = len(name_map)
        if info.start:
            if start_state is not None:
                raise DuplicateStartError(
                    f"Both '{start_name}' and '{info.name}' are marked START"
                )
            start_state = name_map[info.name]
            start_name = info.name

    # Pass two: resolve targets
    for info in description.states:
        states.append(State(
            on_a=resolve_transition(info.on_a, name_map, info.name),
            on_b=resolve_transition(info.on_b, name_map, info.name),
        ))

    if start_state is None:
        raise MissingStartError("No state is marked START")

    return TuringMachine(
        states=tuple(states),
        start=start_state,
        names=tuple(name_map),
        reserved=len(reserved),
    )


def load_machine(text, reserved=RESERVED_STATES):
    """Parse and resolve description text in one call."""
    return build_machine(parse_description(text), reserved=reserved)
