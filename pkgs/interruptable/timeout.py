"""
Timeout outcome for runs that missed their deadline.

Carries how late the run was and whatever partial result the
computation could offer at that point.
"""
from dataclasses import dataclass
from datetime import timedelta
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class TimeoutOutcome(Generic[T]):
    """Deadline miss: overrun in seconds plus an optional partial result."""
    late_by: float
    partial: Optional[T] = None

    def __post_init__(self):
        if self.late_by < 0:
            raise ValueError(f"late_by must be >= 0, got {self.late_by}")

    def partial_result(self) -> Optional[T]:
        """Return the partial result, or None if none existed."""
        return self.partial

    def late_by_timedelta(self) -> timedelta:
        return timedelta(seconds=self.late_by)


class DeadlineExceeded(TimeoutError):
    """Raised by ``ExecutionResult.unwrap()`` when a run timed out."""

    def __init__(self, outcome: TimeoutOutcome):
        super().__init__(f"deadline missed by {outcome.late_by:.6f}s")
        self.outcome = outcome

    @property
    def late_by(self) -> float:
        return self.outcome.late_by

    def partial_result(self):
        return self.outcome.partial_result()
