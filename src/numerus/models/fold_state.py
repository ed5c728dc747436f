"""Fold state carried between symbols while a numeral is scanned."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from numerus.core.types import Magnitude, RunCount
from numerus.models.symbol import Symbol


class FoldState(BaseModel):
    """Immutable snapshot of the left-to-right scan."""

    accumulator: int = Field(default=0, ge=0)
    run_magnitude: Optional[Magnitude] = None  # None: no magnitude constraint yet
    run_count: RunCount = Field(default=0, ge=0)
    staged: Optional[Symbol] = None  # may still become the low half of a subtractive pair

    model_config = {"frozen": True}

    def admits(self, symbol: Symbol, max_run_length: int) -> bool:
        """Whether ``symbol`` may continue or start a run from this state."""
        if self.run_count >= max_run_length:
            return False
        return self.run_magnitude is None or self.run_magnitude >= symbol.magnitude()

    def total(self) -> int:
        """Accumulator with any staged symbol flushed in."""
        if self.staged is None:
            return self.accumulator
        return self.accumulator + self.staged.value
