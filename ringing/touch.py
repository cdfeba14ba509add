"""
Touch Module

A touch: an ordered run of place notations together with the permutation
it leaves behind and how many rows it contains.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple, Union
import logging

from .errors import EmptyInputError
from .permutation import Permutation
from .place_notation import PlaceNotation
from .types import Stage


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Touch:
    """
    Result of ringing a sequence of notations from rounds.

    Attributes:
        notations: The expanded notations, one per row
        leftover_change: Net permutation after the last row (the lead head
            when the notations are one lead of a method)
        length: Number of rows
    """
    notations: Tuple[PlaceNotation, ...]
    leftover_change: Permutation
    length: int

    @property
    def stage(self) -> Stage:
        return self.notations[0].stage

    @classmethod
    def from_notations(cls, notations: Sequence[PlaceNotation]) -> Touch:
        """
        Aggregate a flat, already expanded sequence of notations.

        Raises:
            EmptyInputError: no notations
            MismatchedStageError: notations of different stages
        """
        if not notations:
            raise EmptyInputError("Can't build a touch from an empty notation list")

        leftover = PlaceNotation.overall_transposition(notations)
        touch = cls(tuple(notations), leftover, len(notations))
        logger.debug(f"Touch on {touch.stage}: {touch.length} rows, leftover {leftover!r}")
        return touch

    @classmethod
    def from_string(cls, text: str, stage: Union[Stage, int]) -> Touch:
        """Parse a notation string (commas expanded) and aggregate it."""
        return cls.from_notations(PlaceNotation.from_multiple_string(text, stage))

    def to_string_full(self) -> str:
        return PlaceNotation.notations_to_string_full(self.notations)

    def to_string_compact(self) -> str:
        return PlaceNotation.notations_to_string_short(self.notations)
