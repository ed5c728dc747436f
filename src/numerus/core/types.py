"""Type aliases used across Numerus."""

from __future__ import annotations

Magnitude = int
RunCount = int
Numeral = str
