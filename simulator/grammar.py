"""
Recursive-descent parser for the two-symbol machine description format:

    STATES: 2
    START A:
    a->B;R;b
    b->B;L;b

    B:
    a->A;L;b
    b->HALT;R;b

Spaces and tabs between tokens are ignored, newlines end statements. The
first transition line of a block is the rule for reading `a`, the second the
rule for reading `b`. Target names are kept as text; see `resolver` for
turning them into indices.
"""

import re

from simulator.errors import DescriptionSyntaxError, StateCountError
from simulator.machine import Description, Direction, StateInfo, Symbol, TransitionInfo

WHITESPACE = re.compile(r"[ \t]*")
BLANK_LINES = re.compile(r"[ \t\n]*")
HEADER = re.compile(r"states:", re.IGNORECASE)
NUMBER = re.compile(r"0|[1-9][0-9]*")
START = re.compile(r"start[ \t]+", re.IGNORECASE)
STATE_NAME = re.compile(r"[A-Za-z0-9_.]+")
ALPHABET = re.compile(r"[ab]")
DIRECTION = re.compile(r"[RL-]")


class DescriptionParser:
    def __init__(self, text):
        self.text = text
        self.pos = 0

    # === Position helpers ===
    def location(self, pos=None):
        pos = self.pos if pos is None else pos
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return line, column

    def at_end(self):
        return self.pos >= len(self.text)

    def error(self, expected):
        if self.at_end():
            found = "end of input"
        else:
            found = repr(self.text[self.pos])
        line, column = self.location()
        return DescriptionSyntaxError(f"expected {expected}, found {found}", line, column)

    def skip(self, pattern=WHITESPACE):
        self.pos = pattern.match(self.text, self.pos).end()

    def token(self, pattern, expected):
        self.skip()
        match = pattern.match(self.text, self.pos)
        if match is None:
            raise self.error(expected)
        self.pos = match.end()
        return match.group()

    def literal(self, value):
        self.skip()
        if not self.text.startswith(value, self.pos):
            raise self.error(repr(value))
        self.pos += len(value)

    def end_of_line(self):
        """Consume a newline. End of input also terminates the last line."""
        self.skip()
        if self.at_end():
            return
        if self.text[self.pos] != "\n":
            raise self.error("newline")
        self.pos += 1

    # === Grammar rules ===
    def header(self):
        self.token(HEADER, "'STATES:' header")
        count = int(self.token(NUMBER, "state count"))
        self.end_of_line()
        self.skip(BLANK_LINES)
        return count

    def transition(self):
        self.token(ALPHABET, "tape symbol 'a' or 'b'")
        self.literal("->")
        target = self.token(STATE_NAME, "target state name")
        self.literal(";")
        move = Direction(self.token(DIRECTION, "direction 'R', 'L' or '-'"))
        self.literal(";")
        write = Symbol.from_char(self.token(ALPHABET, "tape symbol 'a' or 'b'"))
        self.end_of_line()
        return TransitionInfo(next=target, move=move, write=write)

    def state(self):
        self.skip()
        start = START.match(self.text, self.pos)
        if start is not None:
            self.pos = start.end()
        name = self.token(STATE_NAME, "state name")
        self.literal(":")
        self.end_of_line()
        on_a = self.transition()
        on_b = self.transition()
        self.skip(BLANK_LINES)
        return StateInfo(name=name, start=start is not None, on_a=on_a, on_b=on_b)

    def description(self):
        count = self.header()
        states = []
        for _ in range(count):
            if self.at_end():
                raise StateCountError(
                    f"Header declares {count} states but only {len(states)} blocks follow"
                )
            states.append(self.state())

        if not self.at_end():
            line, _ = self.location()
            raise StateCountError(
                f"Header declares {count} states but more text follows on line {line}"
            )
        return Description(count=count, states=tuple(states))


def parse_description(text):
    """Parse description text into a `Description` with unresolved targets."""
    return DescriptionParser(text).description()
