"""
Ringing - Place notation for English change ringing

Parses and writes place notation, derives the permutation each row makes,
and composes a whole touch into its net permutation (lead head).
"""

__version__ = "0.1.0"

from .bell_names import is_bell_name, name_to_number, number_to_name
from .errors import (
    RingingError,
    InvalidBellNameError,
    OddStageCrossError,
    MismatchedStageError,
    EmptyInputError,
    IndexOutOfRangeError,
    UnknownStageError,
)
from .mask import PlaceMask
from .types import Bell, Parity, Place, Stage, Stroke
from .permutation import Permutation, PermutationAccumulator
from .place_notation import PlaceNotation
from .touch import Touch

__all__ = [
    "is_bell_name",
    "name_to_number",
    "number_to_name",
    "RingingError",
    "InvalidBellNameError",
    "OddStageCrossError",
    "MismatchedStageError",
    "EmptyInputError",
    "IndexOutOfRangeError",
    "UnknownStageError",
    "PlaceMask",
    "Bell",
    "Parity",
    "Place",
    "Stage",
    "Stroke",
    "Permutation",
    "PermutationAccumulator",
    "PlaceNotation",
    "Touch",
]
