from rich.console import Console

STEP_WIDTH = 24


class TraceReporter:
    """Prints `<right-aligned step total> <state name>` lines."""

    def __init__(self, console=None, width=STEP_WIDTH):
        self.console = console or Console(highlight=False)
        self.width = width

    def format(self, steps, state):
        return f"{steps:>{self.width}} {state}"

    def report(self, steps, state):
        self.console.print(self.format(steps, state), markup=False, highlight=False, soft_wrap=True)
