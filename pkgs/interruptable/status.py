"""
Step status tag for interruptable computations.

A step either finishes the computation, carrying its output, or leaves
more work to do. No other outcome exists at this layer.
"""
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar('T')


@dataclass(frozen=True)
class Done(Generic[T]):
    """The computation finished and produced ``output``."""
    output: T


class Pending:
    """The computation needs at least one more step."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'PENDING'


PENDING = Pending()

Status = Union[Done[T], Pending]


def is_done(status: Any) -> bool:
    """Return True for ``Done``, False for ``PENDING``; reject anything else."""
    if isinstance(status, Done):
        return True
    if isinstance(status, Pending):
        return False
    raise TypeError(
        f"step() must return Done(...) or PENDING, got {type(status).__name__}"
    )
