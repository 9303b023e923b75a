"""
Selection sort as an interruptable computation.

Each step places the smallest remaining item at the front of the unsorted
tail. If the deadline is missed, the partially sorted data is the partial
result: a sorted prefix followed by the untouched remainder.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, TypeVar

from pkgs.interruptable import Done, PENDING, Status

T = TypeVar('T')


def is_sorted(seq: Sequence) -> bool:
    return all(a <= b for a, b in zip(seq, seq[1:]))


def sorted_prefix_length(seq: Sequence) -> int:
    """Count adjacent pairs in order from the start, stopping at the first inversion."""
    count = 0
    for a, b in zip(seq, seq[1:]):
        if not a <= b:
            break
        count += 1
    return count


class SelectionSort:
    """Stepwise selection sort over a private copy of ``data``."""

    def __init__(self, data: Sequence[T]):
        self.data: List[T] = list(data)
        self.idx = 0

    def _sorting_step(self):
        """Perform one pass of selection sort."""
        tail = range(self.idx, len(self.data))
        lowest = min(tail, key=self.data.__getitem__)
        self.data[self.idx], self.data[lowest] = self.data[lowest], self.data[self.idx]
        self.idx += 1

    def step(self) -> Status[List[T]]:
        if self.idx < len(self.data):
            self._sorting_step()
        if is_sorted(self.data):
            return Done(list(self.data))
        return PENDING

    def snapshot(self) -> Optional[List[T]]:
        # the working data is always a meaningful partial result
        return list(self.data)
