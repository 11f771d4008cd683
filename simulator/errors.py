class BrusqueError(Exception):
    """Base class for every error raised while loading or running a machine."""


class DescriptionSyntaxError(BrusqueError):
    def __init__(self, message, line, column):
        super().__init__(f"line {line}, column {column}: {message}")
        self.message = message
        self.line = line
        self.column = column


class ResolutionError(BrusqueError):
    """The description parsed but does not describe a valid machine."""


class StateCountError(ResolutionError):
    pass


class DuplicateStartError(ResolutionError):
    pass


class MissingStartError(ResolutionError):
    pass


class DuplicateStateError(ResolutionError):
    pass


class UnknownStateError(ResolutionError):
    def __init__(self, name, referenced_by):
        super().__init__(f"State '{referenced_by}' refers to undeclared state '{name}'")
        self.name = name
        self.referenced_by = referenced_by


class TapeUnderflowError(BrusqueError):
    def __init__(self, step, state):
        super().__init__(f"Head moved left of cell 0 at step {step} in state '{state}'")
        self.step = step
        self.state = state
