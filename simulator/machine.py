from dataclasses import dataclass
from enum import Enum, IntEnum

# Terminal states, in index order. Every description can target these
# without declaring them.
RESERVED_STATES = ("HALT", "ERROR", "REJECT", "OUT", "ACCEPT")


class Symbol(IntEnum):
    A = 0  # blank
    B = 1

    @classmethod
    def from_char(cls, char):
        return cls[char.upper()]

    def to_char(self):
        return self.name.lower()


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"
    NONE = "-"


# === Parse records (names not yet resolved) ===
@dataclass(frozen=True)
class TransitionInfo:
    next: str
    move: Direction
    write: Symbol


@dataclass(frozen=True)
class StateInfo:
    name: str
    start: bool
    on_a: TransitionInfo
    on_b: TransitionInfo


@dataclass(frozen=True)
class Description:
    """Header count plus the state blocks in the order they were parsed."""
    count: int
    states: tuple


# === Resolved table ===
@dataclass(frozen=True)
class Transition:
    next: int
    move: Direction
    write: Symbol


@dataclass(frozen=True)
class State:
    on_a: Transition
    on_b: Transition

    def rule_for(self, symbol):
        return self.on_b if symbol == Symbol.B else self.on_a


@dataclass(frozen=True)
class TuringMachine:
    """
    Dense transition table. Indices below `reserved` are terminal; user
    states follow in parse order. `names[i]` is the name of state `i`.
    """
    states: tuple
    start: int
    names: tuple
    reserved: int = len(RESERVED_STATES)

    def is_terminal(self, index):
        return index < self.reserved

    def index_of(self, name):
        return self.names.index(name)

    def __len__(self):
        return len(self.states)
