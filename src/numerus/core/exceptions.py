"""Numerus exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from numerus.core.types import Numeral

if TYPE_CHECKING:
    from numerus.models.symbol import Symbol


class NumerusError(Exception):
    """Base exception for all Numerus errors."""


class ConfigurationError(NumerusError):
    """Settings could not be applied."""


class RomanNumeralError(NumerusError):
    """A string was rejected as a roman numeral."""

    def __init__(self, message: str, numeral: Numeral | None = None, position: int | None = None) -> None:
        self.numeral = numeral
        self.position = position
        super().__init__(message)


class InvalidSymbol(RomanNumeralError):
    """Character is not one of I, V, X, L, C, D, M."""

    def __init__(self, char: str, numeral: Numeral | None = None, position: int | None = None) -> None:
        self.char = char
        message = f"{char!r} is not a valid roman numeral"
        if numeral is not None and position is not None:
            message += f" (position {position} of {numeral!r})"
        super().__init__(message, numeral, position)


class InvalidSubtraction(RomanNumeralError):
    """Subtractive pair built on a repeated run or across too wide a magnitude gap."""

    def __init__(
        self,
        current: Symbol,
        staged: Symbol,
        run_count: int,
        numeral: Numeral | None = None,
        position: int | None = None,
    ) -> None:
        self.current = current
        self.staged = staged
        self.run_count = run_count
        if run_count > 1:
            message = f"{current.name} cannot follow {staged.name} after a run of {run_count} {staged.name}"
        else:
            message = f"{staged.name} cannot be subtracted from {current.name}"
        super().__init__(message, numeral, position)


class ConsecutiveFiveType(RomanNumeralError):
    """Two adjacent V, L or D symbols."""

    def __init__(self, symbol: Symbol, numeral: Numeral | None = None, position: int | None = None) -> None:
        self.symbol = symbol
        super().__init__(f"Consecutive {symbol.name}s are not allowed in {numeral!r}", numeral, position)


class InvalidSequence(RomanNumeralError):
    """Any other transition the grammar does not accept."""

    def __init__(self, numeral: Numeral, position: int | None = None) -> None:
        message = f"Invalid roman numeral sequence: {numeral!r}"
        if position is not None:
            message += f" (at position {position})"
        super().__init__(message, numeral, position)
