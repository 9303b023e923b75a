"""
Executor that drives an interruptable computation against a deadline.

The executor steps the computation until it reports completion or until
the elapsed time, measured after a pending step, reaches the deadline.
Steps are never interrupted; deadline precision is bounded by the
longest single step.
"""
import logging
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from .contract import Interruptable
from .status import is_done
from .timeout import DeadlineExceeded, TimeoutOutcome

T = TypeVar('T')

Deadline = Union[int, float, timedelta]

logger = logging.getLogger(__name__)


class ExecutorConsumedError(RuntimeError):
    """Raised when ``run()`` is called on an executor that already ran."""


@dataclass(frozen=True)
class ExecutionResult(Generic[T]):
    """Result of a single executor run."""
    success: bool
    output: Optional[T] = None
    timeout: Optional[TimeoutOutcome[T]] = None
    steps: int = 0
    elapsed: float = 0.0

    def unwrap(self) -> T:
        """Return the output, or raise ``DeadlineExceeded`` on timeout."""
        if not self.success:
            raise DeadlineExceeded(self.timeout)
        return self.output


def _as_seconds(deadline: Deadline) -> float:
    if isinstance(deadline, timedelta):
        seconds = deadline.total_seconds()
    elif isinstance(deadline, (int, float)) and not isinstance(deadline, bool):
        seconds = float(deadline)
    else:
        raise TypeError(f"deadline must be seconds or timedelta, got {type(deadline).__name__}")
    if seconds < 0:
        raise ValueError(f"deadline must be >= 0, got {seconds}")
    return seconds


class Executor(Generic[T]):
    """Runs an ``Interruptable`` until it is done or the deadline is missed."""

    def __init__(self,
                 func: Interruptable[T],
                 deadline: Deadline,
                 clock: Callable[[], float] = time.monotonic,
                 recorder: Optional[Any] = None):
        self.deadline = _as_seconds(deadline)
        self._func: Optional[Interruptable[T]] = func
        self._clock = clock
        self.recorder = recorder
        self._result: Optional[ExecutionResult[T]] = None

    @property
    def consumed(self) -> bool:
        return self._func is None

    def run(self) -> ExecutionResult[T]:
        """Step the computation to completion or until the deadline passes.

        A zero deadline still allows one step, since the clock is only
        checked after a step reports PENDING. A ``Done`` step is honored
        however late it arrives.
        """
        if self._func is None:
            raise ExecutorConsumedError("Executor.run() may only be called once")

        func = self._func
        logger.debug(f"Starting {type(func).__name__} with deadline {self.deadline:.6f}s")

        start = self._clock()
        steps = 0
        try:
            while True:
                status = func.step()
                steps += 1
                done = is_done(status)
                elapsed = self._clock() - start

                if self.recorder is not None:
                    self.recorder.log({"step": steps, "elapsed": elapsed, "done": done})

                if done:
                    self._result = ExecutionResult(
                        success=True, output=status.output,
                        steps=steps, elapsed=elapsed
                    )
                    logger.info(f"{type(func).__name__} completed after {steps} steps in {elapsed:.6f}s")
                    return self._result

                if elapsed >= self.deadline:
                    outcome = TimeoutOutcome(
                        late_by=elapsed - self.deadline,
                        partial=func.snapshot()
                    )
                    self._result = ExecutionResult(
                        success=False, timeout=outcome,
                        steps=steps, elapsed=elapsed
                    )
                    logger.info(
                        f"{type(func).__name__} missed deadline by {outcome.late_by:.6f}s "
                        f"after {steps} steps"
                    )
                    return self._result
        finally:
            self._func = None

    def partial_result(self) -> Optional[T]:
        """Best result available now, whether or not ``run()`` has happened.

        Before the run this is the computation's snapshot. Afterwards it is
        the final output, or the partial result kept in the timeout outcome.
        """
        if self._func is not None:
            return self._func.snapshot()
        if self._result is None:
            return None
        if self._result.success:
            return self._result.output
        return self._result.timeout.partial_result()


def exec_interruptable(func: Interruptable[T], deadline: Deadline, **kwargs) -> ExecutionResult[T]:
    """Shorthand for ``Executor(func, deadline, **kwargs).run()``."""
    return Executor(func, deadline, **kwargs).run()
