"""Coordination layer - locked move/delete with bounded retry."""

from .config import Settings
from .errors import FileOpsError, OperationFault, RetryExhaustedError
from .file_locks import LockOutcome, LockResult, attempt_with_lock
from .operations import FileOperations
from .retry import DEFAULT_MAX_ATTEMPTS, RetryPolicy

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "FileOperations",
    "FileOpsError",
    "LockOutcome",
    "LockResult",
    "OperationFault",
    "RetryExhaustedError",
    "RetryPolicy",
    "Settings",
    "attempt_with_lock",
]
