"""RomanNumeralValidator — folds a symbol sequence into its integer value.

The scan runs strictly left to right and never backtracks. Each incoming
symbol is checked against the staged symbol and the current run, in this
order:

1. Nothing staged and the run constraint admits the symbol: stage it.
2. Symbol worth more than the staged one: subtractive pair. The staged
   symbol must be a run of one, and the magnitude gap must be 0 or 1.
   The magnitude just below the staged one becomes the new ceiling.
3. Symbol worth no more than the staged one and admitted by the run
   constraint: commit the staged value, then extend or restart the run.
4. Anything else is an invalid sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from numerus.core.config import ParserConfig
from numerus.core.exceptions import (
    ConsecutiveFiveType,
    InvalidSequence,
    InvalidSubtraction,
    RomanNumeralError,
)
from numerus.core.types import Numeral
from numerus.models.fold_state import FoldState
from numerus.models.symbol import Symbol, symbols_from_string

logger = logging.getLogger(__name__)


def step(
    state: FoldState,
    current: Symbol,
    *,
    numeral: Numeral,
    position: int,
    max_run_length: int,
) -> FoldState:
    """Apply one symbol to ``state`` and return the next state."""
    staged = state.staged

    if staged is None:
        if state.admits(current, max_run_length):
            return FoldState(
                accumulator=state.accumulator,
                run_magnitude=current.magnitude(),
                run_count=1,
                staged=current,
            )
        raise InvalidSequence(numeral, position)

    if current.value > staged.value:
        if state.run_count > 1:
            raise InvalidSubtraction(current, staged, state.run_count, numeral, position)
        if current.magnitude() - staged.magnitude() not in (0, 1):
            raise InvalidSubtraction(current, staged, state.run_count, numeral, position)
        # No further symbol of the staged magnitude may follow.
        return FoldState(
            accumulator=state.accumulator + current.value - staged.value,
            run_magnitude=staged.magnitude() - 1,
            run_count=0,
            staged=None,
        )

    if state.admits(current, max_run_length):
        if current is staged:
            if current.is_five_type():
                raise ConsecutiveFiveType(current, numeral, position)
            run_magnitude, run_count = state.run_magnitude, state.run_count + 1
        else:
            run_magnitude, run_count = current.magnitude(), 1
        return FoldState(
            accumulator=state.accumulator + staged.value,
            run_magnitude=run_magnitude,
            run_count=run_count,
            staged=current,
        )

    raise InvalidSequence(numeral, position)


class RomanNumeralValidator:
    """Parses and validates uppercase roman numeral strings."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        if config is None:
            config = ParserConfig()
        self._max_run_length = config.max_run_length

    @property
    def max_run_length(self) -> int:
        return self._max_run_length

    def fold(self, numeral: Numeral, symbols: Iterable[Symbol]) -> FoldState:
        """Run ``step`` over ``symbols`` from the initial state."""
        state = FoldState()
        for position, symbol in enumerate(symbols):
            state = step(
                state, symbol,
                numeral=numeral, position=position, max_run_length=self._max_run_length,
            )
        return state

    def parse(self, numeral: Numeral) -> int:
        """Return the value of ``numeral``.

        Every character is mapped to a Symbol before the scan starts, so an
        unrecognized character is reported ahead of any grammar violation.

        Raises:
            InvalidSymbol: character outside I, V, X, L, C, D, M.
            InvalidSubtraction: subtractive pair after a repeated run or
                across a magnitude gap greater than one.
            ConsecutiveFiveType: two adjacent V, L or D.
            InvalidSequence: any other rejected transition.
        """
        try:
            total = self.fold(numeral, symbols_from_string(numeral)).total()
        except RomanNumeralError as exc:
            logger.debug("Rejected %r: %s", numeral, exc)
            raise
        logger.debug("Parsed %r as %d", numeral, total)
        return total

    def is_valid(self, numeral: Numeral) -> bool:
        try:
            self.parse(numeral)
        except RomanNumeralError:
            return False
        return True


def parse_roman_numerals(numeral: Numeral) -> int:
    """Parse ``numeral`` with the default parser configuration."""
    return RomanNumeralValidator().parse(numeral)
