"""Errors raised by locked file operations."""


class FileOpsError(Exception):
    """Base locked file operations exception."""


class OperationFault(FileOpsError):
    """Raised by an operation running under the lock when it cannot complete."""


class RetryExhaustedError(FileOpsError):
    """Raised when every attempt allowed by a retry policy has failed."""

    def __init__(self, name: str, attempts: int, last_error: BaseException):
        super().__init__(f"{name} gave up after {attempts} attempts: {last_error}")
        self.name = name
        self.attempts = attempts
        self.last_error = last_error
