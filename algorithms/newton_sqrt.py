"""
Square root by Newton iteration, one update per step.
"""
from __future__ import annotations
import math
from typing import Optional

from pkgs.interruptable import Done, PENDING, Status


class NewtonSqrt:
    """Refines an estimate of ``sqrt(value)`` until the residual is small."""

    def __init__(self, value: float, tolerance: float = 1e-12):
        if not math.isfinite(value):
            raise ValueError(f"value must be finite, got {value}")
        if value < 0:
            raise ValueError(f"cannot take the square root of {value}")
        if tolerance <= 0:
            raise ValueError(f"tolerance must be > 0, got {tolerance}")
        self.value = float(value)
        self.tolerance = tolerance
        self.estimate = max(self.value, 1.0)
        self.iterations = 0

    def _converged(self) -> bool:
        residual = abs(self.estimate * self.estimate - self.value)
        return residual <= self.tolerance * self.value

    def step(self) -> Status[float]:
        if self.value == 0.0:
            self.estimate = 0.0
            return Done(0.0)
        if not self._converged():
            self.estimate = 0.5 * (self.estimate + self.value / self.estimate)
            self.iterations += 1
        if self._converged():
            return Done(self.estimate)
        return PENDING

    def snapshot(self) -> Optional[float]:
        return self.estimate
