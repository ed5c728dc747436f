"""Roman numeral symbols and their fixed values.

Each of the seven symbols is worth 1 or 5 times a power of ten. The power
(``magnitude``) drives every ordering decision in the parser, so it comes
from a fixed table rather than a logarithm.
"""

from __future__ import annotations

from enum import Enum

from numerus.core.exceptions import InvalidSymbol
from numerus.core.types import Magnitude


class Symbol(Enum):
    """One of I, V, X, L, C, D, M. ``Symbol.X.value == 10``."""

    I = 1
    V = 5
    X = 10
    L = 50
    C = 100
    D = 500
    M = 1000

    def magnitude(self) -> Magnitude:
        """Power of ten of the value: 0 for I/V, 1 for X/L, 2 for C/D, 3 for M."""
        return _MAGNITUDES[self]

    def is_five_type(self) -> bool:
        """True for V, L and D."""
        return self in _FIVE_TYPES

    @classmethod
    def from_char(cls, char: str) -> Symbol:
        try:
            return cls[char]
        except KeyError:
            raise InvalidSymbol(char) from None

    def __str__(self) -> str:
        return self.name


_MAGNITUDES: dict[Symbol, Magnitude] = {
    Symbol.I: 0,
    Symbol.V: 0,
    Symbol.X: 1,
    Symbol.L: 1,
    Symbol.C: 2,
    Symbol.D: 2,
    Symbol.M: 3,
}

_FIVE_TYPES = frozenset({Symbol.V, Symbol.L, Symbol.D})


def symbols_from_string(numeral: str) -> list[Symbol]:
    """Map every character of ``numeral`` to a Symbol.

    Raises:
        InvalidSymbol: for the first unrecognized character, with its position.
    """
    symbols = []
    for position, char in enumerate(numeral):
        try:
            symbols.append(Symbol.from_char(char))
        except InvalidSymbol:
            raise InvalidSymbol(char, numeral, position) from None
    return symbols
