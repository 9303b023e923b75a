"""
Incremental argmax search over a score vector.

The vector is scanned one chunk per step, so a long scan can be cut off
by a deadline and still report the best entry seen so far.
"""
from __future__ import annotations
from typing import Optional, Tuple

import numpy as np

from pkgs.interruptable import Done, PENDING, Status

Match = Tuple[int, float]


class ArgmaxSearch:
    """Finds ``(index, value)`` of the largest score, ``chunk_size`` entries at a time."""

    def __init__(self, scores, chunk_size: int = 1024):
        self.scores = np.asarray(scores, dtype=float).ravel()
        if self.scores.size == 0:
            raise ValueError("scores must not be empty")
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self.chunk_size = chunk_size
        self.position = 0
        self._best: Optional[Match] = None

    def step(self) -> Status[Match]:
        end = min(self.position + self.chunk_size, self.scores.size)
        if self.position < end:
            chunk = self.scores[self.position:end]
            local = int(np.argmax(chunk))
            candidate = (self.position + local, float(chunk[local]))
            # ties keep the earliest index
            if self._best is None or candidate[1] > self._best[1]:
                self._best = candidate
            self.position = end
        if self.position >= self.scores.size:
            return Done(self._best)
        return PENDING

    def snapshot(self) -> Optional[Match]:
        return self._best
