# ringing/constants.py
"""
Ringing Constants

This module defines constants used throughout the ringing package:

LAYER 1: Place-set Constants (Mask Layer)
- MASK_WIDTH: Number of slots in a place-set (hard ceiling on stage)
- MAX_STAGE: Largest stage a notation can describe

LAYER 2: Bell Names (Text Layer)
- BELL_NAMES: Ordered alphabet of single-character bell names
- CROSS_NOTATIONS: Tokens standing for a cross

LAYER 3: Stage Names (Display Layer)
- STAGE_NAMES: Display names for stages 0..22
"""


# =============================================================================
# LAYER 1: Place-set Constants (Mask Layer)
# =============================================================================

MASK_WIDTH = 64      # Slots in a place-set, indices 0..63
MAX_STAGE = MASK_WIDTH


# =============================================================================
# LAYER 2: Bell Names (Text Layer)
# =============================================================================

# Treble first; '0' is the tenth bell. I, O, Q and X are never bell names.
BELL_NAMES = "1234567890ETABCDFGHJKLMNPRSUVWYZ"

# A single character from this set is a whole cross token
CROSS_CHARS = frozenset("xX-")

# Full-token spellings of a cross (the empty token counts too)
CROSS_NOTATIONS = frozenset({"", "x", "X", "-"})

# Plain separators between tokens in a multi-notation string
SEPARATORS = frozenset(". ")

# Separator that also marks the symmetry pivot
COMMA = ","

assert len(set(BELL_NAMES)) == len(BELL_NAMES), "Bell names must be unique"
assert not set("IOQX") & set(BELL_NAMES), "I, O, Q and X are reserved"


# =============================================================================
# LAYER 3: Stage Names (Display Layer)
# =============================================================================

STAGE_NAMES = (
    "Zero",
    "One",
    "Two",
    "Singles",
    "Minimus",
    "Doubles",
    "Minor",
    "Triples",
    "Major",
    "Caters",
    "Royal",
    "Cinques",
    "Maximus",
    "Sextuples",
    "Fourteen",
    "Septuples",
    "Sixteen",
    "Octuples",
    "Eighteen",
    "Nonuples",
    "Twenty",
    "Decuples",
    "Twenty-Two",
)

assert len(STAGE_NAMES) == 23, "Stage names cover 0..22"
