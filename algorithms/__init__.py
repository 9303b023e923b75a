"""
Anytime algorithms implementing the interruptable contract.

This package contains sample computations that can be cut off by a
deadline and still return a useful partial result:
- Selection sort (partially sorted data)
- Newton square root (current estimate)
- Chunked argmax search (best entry seen so far)
"""

from .selection_sort import SelectionSort, is_sorted, sorted_prefix_length
from .newton_sqrt import NewtonSqrt
from .argmax_search import ArgmaxSearch

__all__ = [
    'SelectionSort', 'is_sorted', 'sorted_prefix_length',
    'NewtonSqrt',
    'ArgmaxSearch'
]
