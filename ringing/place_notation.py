"""
Place Notation Module

Parses, serialises and evaluates place notation: one row of change ringing
written as the set of places that stay fixed, everything else swapping in
adjacent pairs.

================================================================================
SINGLE NOTATIONS
================================================================================

A token is either a cross ('x', 'X', '-' or the empty string) or a string
of bell names naming the places made. Implicit places are filled in at
parse time:

    - if the lowest place made is odd (0-based), lead (place 0) is made too
    - if the number of places above the highest place made is odd, the
      last place is made too

so '4' on Triples is 147, '2' on Triples is 127 and '1' on Royal is 10.
After this expansion the unheld places always come in adjacent pairs.

================================================================================
SEQUENCES
================================================================================

Tokens are separated by '.' or ' '; crosses need no separator. A ','
marks a symmetry pivot: with p notations before the comma and n in total,
the expansion is

    [0, p) forwards, [0, p-1) backwards, [p, n) forwards, [p, n-1) backwards

so 'x2,1' on Minor expands to x12x16. Compact serialisation reverses this
when the expanded sequence has a palindromic split.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union
import logging

import numpy as np

from .bell_names import name_to_number, number_to_name
from .constants import COMMA, CROSS_CHARS, CROSS_NOTATIONS, MAX_STAGE, SEPARATORS
from .errors import (
    EmptyInputError,
    IndexOutOfRangeError,
    MismatchedStageError,
    OddStageCrossError,
)
from .mask import PlaceMask
from .permutation import ROW_DTYPE, Permutation, PermutationAccumulator
from .types import Bell, Place, Stage


logger = logging.getLogger(__name__)

StageLike = Union[Stage, int]


@dataclass(frozen=True, order=True)
class PlaceNotation:
    """
    One row of place notation.

    Attributes:
        places: Places made, implicit places included
        stage: Number of bells

    Constructing one directly from a mask skips the even-run check that
    the parser guarantees; ``iter_indices`` on a mask that leaves an odd
    run of unheld places does not produce a permutation.
    """
    places: PlaceMask
    stage: Stage

    def __post_init__(self):
        if not isinstance(self.stage, Stage):
            object.__setattr__(self, "stage", Stage(int(self.stage)))
        if not 1 <= self.stage.value <= MAX_STAGE:
            raise IndexOutOfRangeError(self.stage.value, MAX_STAGE + 1, what="Stage")

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @staticmethod
    def is_cross_notation(c: str) -> bool:
        return c in CROSS_CHARS

    @classmethod
    def cross(cls, stage: StageLike) -> PlaceNotation:
        n = int(stage)
        if n % 2:
            raise OddStageCrossError(n)
        return cls(PlaceMask.empty(), stage)

    @classmethod
    def from_str(cls, notation: str, stage: StageLike) -> PlaceNotation:
        """
        Parse a single notation token.

        Args:
            notation: Cross token or bell names of the places made
            stage: Number of bells

        Returns:
            PlaceNotation with implicit places added

        Raises:
            OddStageCrossError: cross on an odd stage
            InvalidBellNameError: a character that isn't a bell name
            IndexOutOfRangeError: a place at or beyond the stage
        """
        if notation in CROSS_NOTATIONS:
            return cls.cross(stage)

        n = int(stage)
        places = PlaceMask.empty()
        for c in notation:
            place = name_to_number(c)
            if place >= n:
                raise IndexOutOfRangeError(place, n, what=f"Place {c!r}")
            places = places.add(place)

        lowest = (places.bits & -places.bits).bit_length() - 1
        if lowest & 1:
            places = places.add(0)

        highest = places.bits.bit_length() - 1
        if (n - 1 - highest) & 1:
            places = places.add(n - 1)

        return cls(places, stage)

    @classmethod
    def from_multiple_string(cls, text: str, stage: StageLike) -> List[PlaceNotation]:
        """
        Parse a whole sequence, expanding a comma if there is one.

        Example:
            >>> pns = PlaceNotation.from_multiple_string("x2,1", Stage.MINOR)
            >>> PlaceNotation.notations_to_string_full(pns)
            'x12x16'
        """
        tokens, comma_index = _split_tokens(text)
        notations = [cls.from_str(token, stage) for token in tokens]

        if comma_index is None:
            return notations

        expanded = _reflect(notations, comma_index)
        logger.debug(f"Expanded {text!r} about comma at {comma_index}: "
                     f"{len(notations)} -> {len(expanded)} notations")
        return expanded

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _live_bits(self) -> int:
        return self.places.bits & ((1 << self.stage.value) - 1)

    def is_cross(self) -> bool:
        return self._live_bits() == 0

    def places_made(self) -> Iterator[Place]:
        for i in PlaceMask(self._live_bits()).indices():
            yield Place(i)

    def reversed(self) -> PlaceNotation:
        """Mirror image, e.g. 14 -> 58 on Major."""
        n = self.stage.value
        return PlaceNotation(
            PlaceMask.from_indices(n - 1 - p.value for p in self.places_made()),
            self.stage,
        )

    def shares_places_with(self, other: PlaceNotation) -> bool:
        if other.stage != self.stage:
            raise MismatchedStageError(self.stage.value, other.stage.value,
                                       action="compare places of")
        return self._live_bits() & other._live_bits() != 0

    # -------------------------------------------------------------------------
    # Permutation derivation
    # -------------------------------------------------------------------------

    def iter_indices(self) -> Iterator[int]:
        """
        Yield, for each position in turn, which position's bell moves there.

        Held places stay put; every other bell swaps with its neighbour.
        """
        bits = self.places.bits
        hunting_up = False
        for i in range(self.stage.value):
            if bits >> i & 1:
                yield i
                hunting_up = False
            else:
                if hunting_up:
                    yield i - 1
                elif bits >> (i + 1) & 1:
                    yield i
                else:
                    yield i + 1
                hunting_up = not hunting_up

    def iter(self) -> Iterator[Bell]:
        for i in self.iter_indices():
            yield Bell(i)

    def transposition(self) -> Permutation:
        n = self.stage.value
        return Permutation._from_array(np.fromiter(self.iter_indices(), dtype=ROW_DTYPE, count=n))

    # -------------------------------------------------------------------------
    # Serialisation
    # -------------------------------------------------------------------------

    def to_string_full(self) -> str:
        """Every place made, implicit ones included; 'x' for a cross."""
        names = "".join(p.as_char() for p in self.places_made())
        return names or "x"

    def to_string_compact(self) -> str:
        """Shortest token that parses back to this notation."""
        n = self.stage.value
        internal = [p for p in self.places_made() if 0 < p.value < n - 1]
        if internal:
            return "".join(p.as_char() for p in internal)
        if self.places.get(0):
            return number_to_name(0)
        if self.places.get(n - 1):
            return number_to_name(n - 1)
        return "x"

    def __str__(self) -> str:
        return self.to_string_full()

    # -------------------------------------------------------------------------
    # Sequences
    # -------------------------------------------------------------------------

    @staticmethod
    def notations_to_string_full(notations: Sequence[PlaceNotation]) -> str:
        return _join(notations, compact=False)

    @staticmethod
    def notations_to_string_short(notations: Sequence[PlaceNotation]) -> str:
        """Compact form, folding the sequence about a comma where possible."""
        comma_index = _find_comma_index(notations)
        if comma_index is None:
            return _join(notations, compact=True)

        n = len(notations)
        logger.debug(f"Compressing {n} notations about comma at {comma_index}")
        before = notations[:comma_index // 2 + 1]
        after = notations[comma_index:comma_index + (n - comma_index) // 2 + 1]
        return _join(before, compact=True) + COMMA + _join(after, compact=True)

    @staticmethod
    def overall_transposition(notations: Sequence[PlaceNotation]) -> Permutation:
        """
        Net permutation of a sequence of notations applied in order.

        Raises:
            EmptyInputError: no notations, so no stage to start from
            MismatchedStageError: notations of different stages
        """
        if not notations:
            raise EmptyInputError("Can't find the overall transposition of an empty notation list")

        stage = notations[0].stage
        accumulator = PermutationAccumulator(stage)
        for pn in notations:
            if pn.stage != stage:
                raise MismatchedStageError(stage.value, pn.stage.value, action="accumulate")
            accumulator.accumulate(pn.iter_indices())
        return accumulator.total()


# =============================================================================
# Helpers
# =============================================================================

def _split_tokens(text: str) -> Tuple[List[str], Optional[int]]:
    """
    Split a sequence into tokens.

    Returns:
        (tokens, comma_index) where comma_index is the number of tokens
        before the last comma, or None if there is no comma
    """
    tokens: List[str] = []
    buffer: List[str] = []
    comma_index: Optional[int] = None

    def flush():
        if buffer:
            tokens.append("".join(buffer))
            buffer.clear()

    for c in text:
        if c in SEPARATORS:
            flush()
        elif c == COMMA:
            flush()
            comma_index = len(tokens)
        elif c in CROSS_CHARS:
            flush()
            tokens.append(c)
        else:
            buffer.append(c)
    flush()

    return tokens, comma_index


def _reflect(notations: List[PlaceNotation], pivot: int) -> List[PlaceNotation]:
    n = len(notations)
    out = notations[:pivot]
    out.extend(notations[i] for i in range(pivot - 2, -1, -1))
    out.extend(notations[pivot:])
    out.extend(notations[i] for i in range(n - 2, pivot - 1, -1))
    return out


def _find_comma_index(notations: Sequence[PlaceNotation]) -> Optional[int]:
    """
    Where to put a comma when compacting, if anywhere.

    Only even-length sequences longer than two are folded. A split at the
    end is tried first, then odd splits from the front.
    """
    n = len(notations)
    if n % 2 or n <= 2:
        return None

    def is_symmetrical(i: int) -> bool:
        for j in range(i // 2):
            if notations[j] != notations[i - j - 1]:
                return False
        for j in range((n - i) // 2):
            if notations[i + j] != notations[n - j - 1]:
                return False
        return True

    if is_symmetrical(n - 1):
        return n - 1
    for i in range(1, n - 1, 2):
        if is_symmetrical(i):
            return i
    return None


def _join(notations: Sequence[PlaceNotation], compact: bool) -> str:
    parts: List[str] = []
    last_was_cross = True
    for pn in notations:
        if pn.is_cross():
            parts.append("x")
            last_was_cross = True
        else:
            if not last_was_cross:
                parts.append(".")
            parts.append(pn.to_string_compact() if compact else pn.to_string_full())
            last_was_cross = False
    return "".join(parts)
