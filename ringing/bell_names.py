"""
Bell-name codec.

Converts between single-character bell names and zero-based numbers using
the fixed alphabet in ``constants.BELL_NAMES``.
"""

from typing import Dict

from .constants import BELL_NAMES
from .errors import InvalidBellNameError, IndexOutOfRangeError


_NAME_TO_NUMBER: Dict[str, int] = {c: i for i, c in enumerate(BELL_NAMES)}


def is_bell_name(c: str) -> bool:
    """True if ``c`` is a single character from the bell-name alphabet."""
    return c in _NAME_TO_NUMBER


def name_to_number(c: str) -> int:
    """
    Convert a bell name into its number, where 0 is the treble.

    Example:
        >>> name_to_number('4'), name_to_number('0'), name_to_number('T')
        (3, 9, 11)
    """
    try:
        return _NAME_TO_NUMBER[c]
    except KeyError:
        raise InvalidBellNameError(c) from None


def number_to_name(n: int) -> str:
    """Convert a bell number into its single-character name."""
    if not 0 <= n < len(BELL_NAMES):
        raise IndexOutOfRangeError(n, len(BELL_NAMES), what="Bell number")
    return BELL_NAMES[n]
