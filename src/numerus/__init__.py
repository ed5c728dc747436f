"""Numerus — strict roman numeral parsing."""

from __future__ import annotations

from numerus.core.exceptions import (
    ConsecutiveFiveType,
    InvalidSequence,
    InvalidSubtraction,
    InvalidSymbol,
    NumerusError,
    RomanNumeralError,
)
from numerus.models.symbol import Symbol
from numerus.parser.validator import RomanNumeralValidator, parse_roman_numerals

__all__ = [
    "ConsecutiveFiveType",
    "InvalidSequence",
    "InvalidSubtraction",
    "InvalidSymbol",
    "NumerusError",
    "RomanNumeralError",
    "RomanNumeralValidator",
    "Symbol",
    "parse_roman_numerals",
]
