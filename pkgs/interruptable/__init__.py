"""
Cooperative interruption of stepwise computations.

This package contains the progress contract a computation implements,
the executor that enforces a deadline between steps, and the result
types that carry the output or the partial result of a missed deadline.
"""

from .status import Done, Pending, PENDING, Status, is_done
from .contract import Interruptable
from .timeout import TimeoutOutcome, DeadlineExceeded
from .executor import (
    Executor, ExecutionResult, ExecutorConsumedError, exec_interruptable
)

__all__ = [
    # Status
    'Done', 'Pending', 'PENDING', 'Status', 'is_done',
    # Contract
    'Interruptable',
    # Timeout
    'TimeoutOutcome', 'DeadlineExceeded',
    # Executor
    'Executor', 'ExecutionResult', 'ExecutorConsumedError', 'exec_interruptable'
]
