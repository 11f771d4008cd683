import numpy as np

from simulator.machine import Symbol


class Tape:
    """Right-growing tape of `Symbol` values, blank-filled with `Symbol.A`."""

    def __init__(self):
        self.cells = np.full(0, Symbol.A, dtype=np.uint8)

    def __len__(self):
        return len(self.cells)

    def ensure(self, index):
        """Grow to at least twice `index` if `index` is past the end."""
        if index < len(self.cells):
            return
        grown = np.full(max(index * 2, index + 1), Symbol.A, dtype=np.uint8)
        grown[:len(self.cells)] = self.cells
        self.cells = grown

    def read(self, index):
        return Symbol(int(self.cells[index]))

    def write(self, index, symbol):
        self.cells[index] = symbol

    def count(self, symbol=Symbol.B):
        return int(np.count_nonzero(self.cells == symbol))

    def render(self, head, window=10):
        """Return the cells around the head and a caret line marking it."""
        tape_str = ""
        head_str = ""
        for pos in range(max(0, head - window), head + window + 1):
            symbol = Symbol(int(self.cells[pos])) if pos < len(self.cells) else Symbol.A
            tape_str += f"{symbol.to_char()} "
            head_str += "^ " if pos == head else "  "
        return tape_str.rstrip(), head_str.rstrip()
