"""Tests for Symbol values, magnitudes and character mapping."""

from __future__ import annotations

import pytest

from numerus.core.exceptions import InvalidSymbol
from numerus.models.symbol import Symbol, symbols_from_string


@pytest.mark.parametrize(
    "symbol, value, magnitude",
    [
        (Symbol.I, 1, 0),
        (Symbol.V, 5, 0),
        (Symbol.X, 10, 1),
        (Symbol.L, 50, 1),
        (Symbol.C, 100, 2),
        (Symbol.D, 500, 2),
        (Symbol.M, 1000, 3),
    ],
)
def test_value_and_magnitude_table(symbol, value, magnitude):
    assert symbol.value == value
    assert symbol.magnitude() == magnitude


def test_five_types_are_v_l_d():
    assert {s for s in Symbol if s.is_five_type()} == {Symbol.V, Symbol.L, Symbol.D}


class TestFromChar:
    @pytest.mark.parametrize("char", list("IVXLCDM"))
    def test_maps_each_recognized_letter(self, char):
        assert Symbol.from_char(char).name == char

    @pytest.mark.parametrize("char", ["i", "A", "0", " ", "", "IV"])
    def test_rejects_anything_else(self, char):
        with pytest.raises(InvalidSymbol) as excinfo:
            Symbol.from_char(char)
        assert excinfo.value.char == char
        assert excinfo.value.position is None


class TestSymbolsFromString:
    def test_maps_in_order(self):
        assert symbols_from_string("MCM") == [Symbol.M, Symbol.C, Symbol.M]

    def test_empty_string(self):
        assert symbols_from_string("") == []

    def test_reports_position_of_first_bad_char(self):
        with pytest.raises(InvalidSymbol) as excinfo:
            symbols_from_string("XIZQ")
        assert excinfo.value.char == "Z"
        assert excinfo.value.position == 2
        assert excinfo.value.numeral == "XIZQ"
        assert "'Z' is not a valid roman numeral" in str(excinfo.value)
