"""Exceptions raised by the symcalc engine."""


class SymCalcError(Exception):
    """Base class for every error raised by symcalc"""


class UnboundVariableError(SymCalcError, LookupError):
    """A variable was evaluated without a value in the bindings"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No value provided for variable '{name}' in evaluate")


class AmbiguousVariableError(SymCalcError, ValueError):
    """A derivative was requested without a variable for a multi-variable expression"""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Expected a variable to differentiate by for a {count}-dimensional function"
        )
