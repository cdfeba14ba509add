"""
Error Types

Every failure the package reports at the point of an offending call.
Each class also derives from the builtin a caller would naturally catch
(``ValueError`` or ``IndexError``).
"""


class RingingError(Exception):
    """Base class for all ringing errors."""


class InvalidBellNameError(RingingError, ValueError):
    """A character outside the bell-name alphabet."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown bell name {name!r}")


class OddStageCrossError(RingingError, ValueError):
    """A cross notation requested on an odd stage."""

    def __init__(self, stage: int):
        self.stage = stage
        super().__init__(f"Cross notation needs an even stage, got {stage}")


class MismatchedStageError(RingingError, ValueError):
    """Two values of different stages were combined or compared."""

    def __init__(self, lhs: int, rhs: int, action: str = "combine"):
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(f"Can't {action} values of different stages ({lhs} and {rhs})")


class EmptyInputError(RingingError, ValueError):
    """An operation that needs at least one notation got none."""


class IndexOutOfRangeError(RingingError, IndexError):
    """A number too large (or negative) for the place-set or the bell-name alphabet."""

    def __init__(self, value: int, limit: int, what: str = "index"):
        self.value = value
        self.limit = limit
        super().__init__(f"{what} {value} out of range [0, {limit})")


class UnknownStageError(RingingError, ValueError):
    """A string that is not one of the stage display names."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown stage name {name!r}")
