"""
Core value types: Stage, Place, Bell, Parity and Stroke.

Stage, Place and Bell each wrap a single non-negative int. They are
separate types, so a Place never compares equal to a Bell or a Stage with
the same number, and ordering across types raises TypeError.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .bell_names import number_to_name, name_to_number
from .constants import STAGE_NAMES
from .errors import UnknownStageError


@dataclass(frozen=True, order=True)
class _Number:
    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"Can't make a {type(self).__name__} from negative number {self.value}")

    def __int__(self) -> int:
        return self.value

    def as_char(self) -> str:
        """Single-character bell name for this number."""
        return number_to_name(self.value)


class Place(_Number):
    """A position in a row, 0 being lead."""

    def __repr__(self) -> str:
        return f"Place({self.value})"


class Bell(_Number):
    """A physical bell, 0 being the treble."""

    @classmethod
    def from_char(cls, c: str) -> Bell:
        return cls(name_to_number(c))

    def __repr__(self) -> str:
        return f"Bell({self.value})"


class Stage(_Number):
    """Number of bells in play."""

    @classmethod
    def from_name(cls, name: str) -> Stage:
        """Parse a display name such as 'Minor'; anything else raises UnknownStageError."""
        try:
            return cls(STAGE_NAMES.index(name))
        except ValueError:
            raise UnknownStageError(name) from None

    @property
    def name(self) -> str:
        if self.value < len(STAGE_NAMES):
            return STAGE_NAMES[self.value]
        return f"<stage {self.value}>"

    def is_even(self) -> bool:
        return self.value % 2 == 0

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Stage({self.value})"


Stage.ZERO = Stage(0)
Stage.ONE = Stage(1)
Stage.TWO = Stage(2)
Stage.SINGLES = Stage(3)
Stage.MINIMUS = Stage(4)
Stage.DOUBLES = Stage(5)
Stage.MINOR = Stage(6)
Stage.TRIPLES = Stage(7)
Stage.MAJOR = Stage(8)
Stage.CATERS = Stage(9)
Stage.ROYAL = Stage(10)
Stage.CINQUES = Stage(11)
Stage.MAXIMUS = Stage(12)
Stage.SEXTUPLES = Stage(13)
Stage.FOURTEEN = Stage(14)
Stage.SEPTUPLES = Stage(15)
Stage.SIXTEEN = Stage(16)
Stage.OCTUPLES = Stage(17)
Stage.EIGHTEEN = Stage(18)
Stage.NONUPLES = Stage(19)
Stage.TWENTY = Stage(20)
Stage.DECUPLES = Stage(21)
Stage.TWENTY_TWO = Stage(22)


# =============================================================================
# Two-valued algebras
# =============================================================================

class Parity(Enum):
    """Parity of a permutation; multiplication is XOR."""
    EVEN = 0
    ODD = 1

    def __mul__(self, other: Parity) -> Parity:
        if not isinstance(other, Parity):
            return NotImplemented
        return Parity(self.value ^ other.value)

    def __invert__(self) -> Parity:
        return Parity(self.value ^ 1)


class Stroke(Enum):
    """Handstroke or backstroke."""
    BACK = 0
    HAND = 1

    @classmethod
    def from_index(cls, index: int) -> Stroke:
        """Stroke of the row at ``index``; even rows are backstrokes."""
        return cls(index % 2)

    def __invert__(self) -> Stroke:
        return Stroke(self.value ^ 1)
