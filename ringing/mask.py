"""
PlaceMask - Fixed-width place-set

A set of place indices stored as the bits of one unsigned 64-bit integer.

Design principles:
- PlaceMask instances are immutable
- add()/delete() return new instances
- Equality and ordering compare the underlying integer
- Indices outside [0, 64) are rejected, never wrapped

Bit format:
    Bit i set  <=>  place i is held.
    Index 0 is the lowest bit, so the debug form prints index 0 first:

        repr(PlaceMask.from_bitmask(0b1001_1000))
        'PlaceMask(0001100100000000...0000)'
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator

from .constants import MASK_WIDTH
from .errors import IndexOutOfRangeError


_FULL = (1 << MASK_WIDTH) - 1


def _check_index(index: int) -> int:
    if not 0 <= index < MASK_WIDTH:
        raise IndexOutOfRangeError(index, MASK_WIDTH, what="Place-set index")
    return index


@dataclass(frozen=True, order=True)
class PlaceMask:
    """Set of place indices in [0, 64)."""
    bits: int = 0

    def __post_init__(self):
        if not 0 <= self.bits <= _FULL:
            raise IndexOutOfRangeError(self.bits, 1 << MASK_WIDTH, what="Bitmask")

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> PlaceMask:
        return cls(0)

    @classmethod
    def from_bitmask(cls, value: int) -> PlaceMask:
        """Wrap a raw integer; must fit in 64 bits."""
        return cls(value)

    @classmethod
    def from_indices(cls, indices: Iterable[int]) -> PlaceMask:
        bits = 0
        for i in indices:
            bits |= 1 << _check_index(i)
        return cls(bits)

    @staticmethod
    def limit() -> int:
        """Number of slots; every valid index is below this."""
        return MASK_WIDTH

    # -------------------------------------------------------------------------
    # Bit operations - return new instances
    # -------------------------------------------------------------------------

    def get(self, index: int) -> bool:
        return bool(self.bits >> _check_index(index) & 1)

    def add(self, index: int) -> PlaceMask:
        return PlaceMask(self.bits | 1 << _check_index(index))

    def delete(self, index: int) -> PlaceMask:
        return PlaceMask(self.bits & ~(1 << _check_index(index)))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def indices(self) -> Iterator[int]:
        """Held indices in ascending order."""
        bits = self.bits
        i = 0
        while bits:
            if bits & 1:
                yield i
            bits >>= 1
            i += 1

    def __contains__(self, index: int) -> bool:
        return 0 <= index < MASK_WIDTH and self.get(index)

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __bool__(self) -> bool:
        return self.bits != 0

    def to_string(self) -> str:
        """64 characters of '0'/'1', index 0 first."""
        return "".join("1" if self.bits >> i & 1 else "0" for i in range(MASK_WIDTH))

    def __repr__(self) -> str:
        return f"PlaceMask({self.to_string()})"
