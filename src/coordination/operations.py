"""Move and delete files while holding an exclusive lock on them."""

import shutil
from contextlib import suppress
from pathlib import Path
from typing import BinaryIO

import structlog

from .errors import OperationFault
from .file_locks import LockOutcome, LockResult, Operation, attempt_with_lock
from .retry import RetryPolicy

logger = structlog.get_logger()


class FileOperations:
    """Destructive file operations guarded by advisory locks.

    Every public method returns a boolean; failures are only distinguishable
    through the logs (or through ``run`` for callers that need the outcome).
    """

    def __init__(self, retry_policy: RetryPolicy | None = None):
        self.retry_policy = retry_policy or RetryPolicy()

    def run(self, path: Path, operation: Operation) -> LockResult:
        """Run ``operation`` under the lock, retrying faults raised by it."""
        path = Path(path)
        attempts = 0

        def attempt() -> LockResult:
            nonlocal attempts
            attempts += 1
            return attempt_with_lock(path, operation)

        try:
            result = self.retry_policy.call(attempt)
        except Exception as e:
            logger.error(
                "Exception executing locked operation",
                file=path.name,
                attempts=attempts,
                error=str(e),
                exc_info=True,
            )
            return LockResult(
                outcome=LockOutcome.OPERATION_FAULT,
                path=path,
                attempts=attempts,
                error=str(e),
            )

        result.attempts = attempts
        return result

    def execute_with_lock(self, path: Path, operation: Operation) -> bool:
        """Run ``operation`` under the lock; True only if it ran to completion."""
        return self.run(path, operation).succeeded

    def move(self, source: Path, destination: Path) -> bool:
        """Move ``source`` to ``destination`` while holding a lock on ``source``."""
        source = Path(source)
        destination = Path(destination)

        def move_file(handle: BinaryIO) -> None:
            if destination.exists():
                raise OperationFault(f"Destination {destination} already exists")
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
                shutil.move(str(source), str(destination))
            except OSError as e:
                raise OperationFault(f"Cannot move {source} to {destination}: {e}") from e

        moved = self.execute_with_lock(source, move_file)
        if moved:
            logger.info("Moved file", source=str(source), destination=str(destination))
        return moved

    def delete(self, source: Path) -> bool:
        """Delete ``source`` while holding a lock on it. Delete errors are ignored."""
        source = Path(source)

        if not source.exists():
            logger.debug("Nothing to delete", file=source.name)
            return True

        def delete_file(handle: BinaryIO) -> None:
            with suppress(OSError):
                source.unlink()

        deleted = self.execute_with_lock(source, delete_file)
        if deleted:
            logger.info("Deleted file", file=str(source))
        return deleted
