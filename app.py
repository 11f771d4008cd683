# app.py

import argparse
import sys

from rich.console import Console
from rich.markup import escape

from config.config_loader import runtime_config
from logger.logger import RunLogger
from simulator.engine import Simulation
from simulator.errors import BrusqueError, TapeUnderflowError
from simulator.reporter import TraceReporter
from simulator.resolver import load_machine
from tools.table_inspect import print_table

console = Console()
err_console = Console(stderr=True)

# === Utilities ===
def fail(message):
    err_console.print(f"[red]Error: {escape(message)}[/red]", highlight=False, soft_wrap=True)
    sys.exit(1)

def read_description(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read()

def show_tape(simulation, window):
    tape_str, head_str = simulation.tape.render(simulation.head, window)
    console.print(tape_str, markup=False, highlight=False, soft_wrap=True)
    console.print(head_str, markup=False, highlight=False, soft_wrap=True)
    console.print(f"State: {simulation.state_name}, Head: {simulation.head}, "
                  f"Ones: {simulation.tape.count()}", markup=False, highlight=False)

def simulate(machine, config, verbose=False):
    reporter = TraceReporter(console, width=config["step_width"])
    simulation = Simulation(
        machine,
        reporter=reporter,
        verbose=verbose,
        fold_threshold=config["fold_threshold"],
        initial_head=config["initial_head"],
    )
    simulation.run()
    return simulation

# === CLI ===
def build_parser():
    parser = argparse.ArgumentParser(prog="brusque", description="Run a two-symbol Turing machine description")
    parser.add_argument("tm2", help="Path to the machine description")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print all states")
    parser.add_argument("--table", action="store_true", help="Print the resolved transition table and exit")
    parser.add_argument("--tape", action="store_true", help="Print the tape around the head after halting")
    parser.add_argument("--log", action="store_true", help="Append a JSONL run record")
    parser.add_argument("--config", help="Runtime config file (default: config/runtime_config.json if present)")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = runtime_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        fail(f"bad configuration: {e}")

    try:
        text = read_description(args.tm2)
    except (OSError, UnicodeDecodeError) as e:
        fail(f"cannot read {args.tm2}: {e}")

    try:
        machine = load_machine(text)
    except BrusqueError as e:
        fail(f"{args.tm2}: {e}")

    if args.table:
        print_table(machine, out=console)
        return

    try:
        simulation = simulate(machine, config, verbose=args.verbose)
    except TapeUnderflowError as e:
        fail(str(e))

    if args.tape:
        show_tape(simulation, config["tape_window"])

    if args.log or config["log_runs"]:
        RunLogger(config["output_directory"], config["log_file_prefix"]).log_run(
            args.tm2, simulation, verbose=args.verbose
        )

if __name__ == "__main__":
    main()
