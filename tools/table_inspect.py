import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table

from simulator.machine import Symbol
from simulator.resolver import load_machine

console = Console()

def format_transition(machine, transition):
    """Compact `<write><move><next>` notation, e.g. `bRq1`."""
    return f"{transition.write.to_char()}{transition.move.value}{machine.names[transition.next]}"

def user_states(machine):
    for index in range(machine.reserved, len(machine)):
        yield index, machine.names[index], machine.states[index]

def build_table(machine):
    """Transition table of the user states as a rich Table."""
    table = Table(title="Transition Table", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("State")
    for symbol in Symbol:
        table.add_column(symbol.to_char(), justify="center")

    for index, name, state in user_states(machine):
        label = f"{name} (start)" if index == machine.start else name
        table.add_row(
            str(index),
            label,
            format_transition(machine, state.on_a),
            format_transition(machine, state.on_b),
        )
    return table

def latex_table(machine):
    lines = [r"\begin{array}{c|" + "c" * len(Symbol) + "}"]
    lines.append("State/Symbol & " + " & ".join(f"\\text{{{symbol.to_char()}}}" for symbol in Symbol) + r" \\ \hline")
    for _, name, state in user_states(machine):
        row = [name, format_transition(machine, state.on_a), format_transition(machine, state.on_b)]
        lines.append(" & ".join(f"\\text{{{cell}}}" for cell in row) + r" \\")
    lines.append(r"\end{array}")
    return "\n".join(lines)

def print_table(machine, latex=False, out=None):
    out = out or console
    out.print(build_table(machine))
    if latex:
        out.print("\n=== LaTeX Table ===", markup=False)
        out.print(latex_table(machine), markup=False, highlight=False)

def main():
    parser = argparse.ArgumentParser(description="Print the resolved transition table of a machine description")
    parser.add_argument("tm2", help="Path to the machine description")
    parser.add_argument("--latex", action="store_true", help="Also print the table as a LaTeX array")
    args = parser.parse_args()

    machine = load_machine(Path(args.tm2).read_text(encoding="utf-8"))
    print_table(machine, latex=args.latex)

if __name__ == "__main__":
    main()
