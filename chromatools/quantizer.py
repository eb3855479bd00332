"""Four-level quantizer with three thresholds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Quantizer:
    """Maps a value to 0, 1, 2 or 3 by comparing it with ``t0 <= t1 <= t2``."""

    t0: float = 0.0
    t1: float = 0.0
    t2: float = 0.0

    def __post_init__(self) -> None:
        if not self.t0 <= self.t1 <= self.t2:
            raise ValueError("thresholds must satisfy t0 <= t1 <= t2")

    def quantize(self, value: float) -> int:
        """Return the quantization level of ``value``."""
        if value < self.t1:
            return 0 if value < self.t0 else 1
        return 2 if value < self.t2 else 3

    def __str__(self) -> str:
        return f"Quantizer({self.t0:g}, {self.t1:g}, {self.t2:g})"