"""
Tests for bell names, Stage/Place/Bell and the Parity/Stroke algebras
"""

import pytest

from ringing import (
    Bell,
    Parity,
    Place,
    Stage,
    Stroke,
    InvalidBellNameError,
    IndexOutOfRangeError,
    UnknownStageError,
    is_bell_name,
    name_to_number,
    number_to_name,
)
from ringing.constants import BELL_NAMES


class TestBellNames:
    def test_alphabet_bijection(self):
        for i, c in enumerate(BELL_NAMES):
            assert name_to_number(c) == i
            assert number_to_name(name_to_number(c)) == c
            assert Bell(name_to_number(c)).as_char() == c

    def test_known_names(self):
        assert name_to_number("1") == 0
        assert name_to_number("4") == 3
        assert name_to_number("0") == 9
        assert name_to_number("E") == 10
        assert name_to_number("T") == 11

    @pytest.mark.parametrize("c", ["\0", "\n", " ", "★", "I", "O", "Q", "X", "x", "!"])
    def test_unknown_names(self, c):
        assert not is_bell_name(c)
        with pytest.raises(InvalidBellNameError):
            name_to_number(c)

    def test_is_bell_name(self):
        assert is_bell_name("1")
        assert is_bell_name("F")
        assert is_bell_name("Z")
        assert not is_bell_name("12")

    @pytest.mark.parametrize("n", [len(BELL_NAMES), 33, 10000, -1])
    def test_number_too_large(self, n):
        with pytest.raises(IndexOutOfRangeError):
            number_to_name(n)

    def test_too_large_conversion_for_each_type(self):
        for cls in (Place, Bell, Stage):
            with pytest.raises(IndexOutOfRangeError):
                cls(10000).as_char()


class TestNumberTypes:
    @pytest.mark.parametrize("cls", [Place, Bell, Stage])
    def test_negative_conversion(self, cls):
        with pytest.raises(ValueError):
            cls(-1)

    def test_types_are_distinct(self):
        assert Place(3) != Bell(3)
        assert Bell(3) != Stage(3)
        assert Place(3) == Place(3)
        with pytest.raises(TypeError):
            Place(1) < Bell(2)

    def test_ordering_within_type(self):
        assert Bell(1) < Bell(2)
        assert Stage.MINOR < Stage.MAJOR
        assert int(Stage.ROYAL) == 10

    def test_bell_from_char(self):
        assert Bell.from_char("0") == Bell(9)


class TestStage:
    def test_constants(self):
        assert Stage.SINGLES == Stage(3)
        assert Stage.MINOR == Stage(6)
        assert Stage.CINQUES == Stage(11)
        assert Stage.TWENTY_TWO == Stage(22)

    def test_string_conversions(self):
        for i in range(23):
            s = Stage(i)
            assert Stage.from_name(str(s)) == s

        assert str(Stage.MINOR) == "Minor"
        assert str(Stage(22)) == "Twenty-Two"
        assert str(Stage(100)) == "<stage 100>"

    @pytest.mark.parametrize("name", ["", "Sixteens", "minor", "ahlagskhdioghapsodihg", "\n\n\n", "<stage 100>"])
    def test_from_invalid_string(self, name):
        with pytest.raises(UnknownStageError):
            Stage.from_name(name)


class TestParity:
    def test_not(self):
        assert ~Parity.EVEN == Parity.ODD
        assert ~Parity.ODD == Parity.EVEN

    def test_multiply(self):
        assert Parity.EVEN * Parity.EVEN == Parity.EVEN
        assert Parity.EVEN * Parity.ODD == Parity.ODD
        assert Parity.ODD * Parity.EVEN == Parity.ODD
        assert Parity.ODD * Parity.ODD == Parity.EVEN


class TestStroke:
    def test_not(self):
        assert ~Stroke.HAND == Stroke.BACK
        assert ~Stroke.BACK == Stroke.HAND

    def test_from_index(self):
        assert Stroke.from_index(0) == Stroke.BACK
        assert Stroke.from_index(1) == Stroke.HAND
        assert Stroke.from_index(10) == Stroke.BACK


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
