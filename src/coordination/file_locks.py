"""File coordination - advisory locks around destructive file operations."""

import fcntl
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Callable

import structlog

logger = structlog.get_logger()

Operation = Callable[[BinaryIO], None]


class LockOutcome(str, Enum):
    """Outcome of a single lock attempt."""
    SUCCESS = "success"
    LOCK_UNAVAILABLE = "lock_unavailable"
    IO_FAILURE = "io_failure"
    OPERATION_FAULT = "operation_fault"


@dataclass
class LockResult:
    """Result of a lock acquisition attempt."""
    outcome: LockOutcome
    path: Path
    attempts: int = 1
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is LockOutcome.SUCCESS


def attempt_with_lock(path: Path, operation: Operation) -> LockResult:
    """Run ``operation`` against ``path`` while holding an exclusive lock.

    The lock is taken with ``LOCK_NB``: a file already locked by another
    descriptor is reported as LOCK_UNAVAILABLE instead of waiting. Failures
    to open or lock the file are reported as IO_FAILURE. Anything raised by
    the operation itself propagates to the caller once the lock is released
    and the handle closed.
    """
    path = Path(path)

    try:
        handle = path.open("r+b")
    except OSError as exc:
        logger.warning("File cannot be opened for locking", file=path.name, error=str(exc))
        return LockResult(outcome=LockOutcome.IO_FAILURE, path=path, error=str(exc))

    with handle:
        try:
            fcntl.flock(handle.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        except BlockingIOError:
            logger.warning("File is already locked", file=path.name)
            return LockResult(outcome=LockOutcome.LOCK_UNAVAILABLE, path=path)
        except OSError as exc:
            logger.warning("File cannot be locked", file=path.name, error=str(exc))
            return LockResult(outcome=LockOutcome.IO_FAILURE, path=path, error=str(exc))

        logger.debug("Acquired file lock", file=path.name)
        try:
            operation(handle)
        finally:
            fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
            logger.debug("Released file lock", file=path.name)

    return LockResult(outcome=LockOutcome.SUCCESS, path=path)
