"""
Progress contract implemented by stepwise computations.

Implementors are plain classes exposing ``step()`` and ``snapshot()``;
they do not need to inherit from ``Interruptable``.
"""
from typing import Optional, Protocol, TypeVar, runtime_checkable

from .status import Status

T = TypeVar('T')


@runtime_checkable
class Interruptable(Protocol[T]):
    """A computation that gives up control after every unit of work."""

    def step(self) -> Status[T]:
        """Advance by one unit of work and report whether it finished."""
        ...

    def snapshot(self) -> Optional[T]:
        """Return the best output so far without changing any state."""
        ...
