"""
Permutation Module

Permutations of the bells (changes) and the accumulator that composes a
run of them into one net permutation.

A Permutation is stored as a row: ``row[i]`` is the bell in position i.
Rounds is the ascending row. Multiplication follows row order:

    (a * b)[i] = a[b[i]]

so applying the rows of a touch one after another is the left-to-right
fold ``total = total * next``.
"""

from __future__ import annotations
from typing import Iterable, Iterator, List, Union
from math import gcd

import numpy as np

from .bell_names import name_to_number, number_to_name
from .constants import BELL_NAMES
from .errors import IndexOutOfRangeError, MismatchedStageError
from .types import Bell, Parity, Stage


ROW_DTYPE = np.intp

StageLike = Union[Stage, int]


def _stage_value(stage: StageLike) -> int:
    return stage.value if isinstance(stage, Stage) else int(stage)


class Permutation:
    """
    Immutable bijection on [0, stage).

    Build one with ``Permutation(row)`` (checked), ``Permutation.rounds``,
    ``Permutation.from_string`` or by multiplying two permutations.
    """

    __slots__ = ("_row",)

    def __init__(self, row: Iterable[int]):
        arr = np.fromiter((int(x) for x in row), dtype=ROW_DTYPE)
        n = arr.size
        if n and (arr.min() < 0 or arr.max() >= n
                  or not np.all(np.bincount(arr, minlength=n) == 1)):
            raise ValueError(f"Row {arr.tolist()} is not a permutation of 0..{n - 1}")
        arr.flags.writeable = False
        self._row = arr

    @classmethod
    def _from_array(cls, arr: np.ndarray) -> Permutation:
        # Unchecked: callers guarantee arr is a bijection of the right dtype
        perm = cls.__new__(cls)
        arr.flags.writeable = False
        perm._row = arr
        return perm

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def rounds(cls, stage: StageLike) -> Permutation:
        return cls._from_array(np.arange(_stage_value(stage), dtype=ROW_DTYPE))

    @classmethod
    def from_string(cls, row: str) -> Permutation:
        """Parse a row of bell names, e.g. '241635'."""
        return cls(name_to_number(c) for c in row)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def stage(self) -> Stage:
        return Stage(int(self._row.size))

    def __len__(self) -> int:
        return int(self._row.size)

    def __getitem__(self, index: int) -> int:
        return int(self._row[index])

    def __iter__(self) -> Iterator[int]:
        return iter(self._row.tolist())

    def bells(self) -> Iterator[Bell]:
        for x in self._row.tolist():
            yield Bell(x)

    def as_array(self) -> np.ndarray:
        """The row as a read-only numpy array."""
        return self._row

    def to_list(self) -> List[int]:
        return self._row.tolist()

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    def __mul__(self, other: Permutation) -> Permutation:
        if not isinstance(other, Permutation):
            return NotImplemented
        if self._row.size != other._row.size:
            raise MismatchedStageError(self._row.size, other._row.size, action="multiply")
        return Permutation._from_array(self._row[other._row])

    def inverse(self) -> Permutation:
        return Permutation._from_array(np.argsort(self._row).astype(ROW_DTYPE))

    def __pow__(self, exponent: int) -> Permutation:
        base = self if exponent >= 0 else self.inverse()
        result = Permutation.rounds(len(self))
        n = abs(exponent) % self.order()
        while n:
            if n & 1:
                result = result * base
            base = base * base
            n >>= 1
        return result

    def cycle_lengths(self) -> List[int]:
        """Lengths of the disjoint cycles, fixed bells included."""
        seen = [False] * int(self._row.size)
        lengths = []
        row = self._row.tolist()
        for start in range(len(row)):
            if seen[start]:
                continue
            length = 0
            i = start
            while not seen[i]:
                seen[i] = True
                i = row[i]
                length += 1
            lengths.append(length)
        return lengths

    def parity(self) -> Parity:
        lengths = self.cycle_lengths()
        return Parity((len(self) - len(lengths)) % 2)

    def order(self) -> int:
        """Smallest n > 0 with self ** n == rounds."""
        result = 1
        for length in self.cycle_lengths():
            result = result * length // gcd(result, length)
        return result

    def is_rounds(self) -> bool:
        return bool(np.array_equal(self._row, np.arange(self._row.size)))

    # -------------------------------------------------------------------------
    # Comparison & display
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Permutation):
            return False
        return bool(np.array_equal(self._row, other._row))

    def __hash__(self) -> int:
        return hash(self._row.tobytes())

    def to_string(self) -> str:
        """Row as bell names, e.g. '241635'."""
        return "".join(number_to_name(x) for x in self._row.tolist())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self._row.size <= len(BELL_NAMES):
            return f"Permutation('{self.to_string()}')"
        return f"Permutation({self._row.tolist()})"


class PermutationAccumulator:
    """
    Running product of a sequence of permutations.

    Starts at rounds. Each ``accumulate`` call folds one more row into the
    total in a single pass over its index source; no intermediate
    Permutation is built. Not safe to share between threads; independent
    accumulators are.
    """

    def __init__(self, stage: StageLike):
        self._size = _stage_value(stage)
        self._row: List[int] = list(range(self._size))

    @property
    def stage(self) -> Stage:
        return Stage(self._size)

    def accumulate(self, source: Iterable[int]) -> None:
        """
        Fold one row into the total.

        Args:
            source: The row's indices in position order: a Permutation,
                a notation's ``iter_indices()``, or any iterable of ints.
                Must be a bijection on [0, stage); repeated indices are
                not detected.

        Raises:
            MismatchedStageError: source longer or shorter than the stage
            IndexOutOfRangeError: a negative index
        """
        total = self._row
        size = self._size
        row = []
        for j in source:
            if j < 0:
                raise IndexOutOfRangeError(j, size, what="Row index")
            if j >= size:
                raise MismatchedStageError(size, j + 1, action="accumulate")
            row.append(total[j])
        if len(row) != size:
            raise MismatchedStageError(self._size, len(row), action="accumulate")
        self._row = row

    def accumulate_notation(self, notation) -> None:
        """Fold one place notation's row into the total."""
        if notation.stage.value != self._size:
            raise MismatchedStageError(self._size, notation.stage.value, action="accumulate")
        self.accumulate(notation.iter_indices())

    def total(self) -> Permutation:
        return Permutation._from_array(np.array(self._row, dtype=ROW_DTYPE))

    def reset(self) -> None:
        self._row = list(range(self._size))
