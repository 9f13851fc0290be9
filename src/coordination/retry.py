"""Bounded retry of a whole lock/run/release cycle."""

import time
from dataclasses import dataclass
from typing import Callable, TypeVar

import structlog

from .config import Settings
from .errors import RetryExhaustedError

logger = structlog.get_logger()

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 30


@dataclass(frozen=True)
class RetryPolicy:
    """Re-run a callable while it raises, up to ``max_attempts`` times.

    A returned value is always final. Only exceptions matching ``retry_on``
    are retried; anything else propagates on the first attempt.
    """
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delay_seconds: float = 0.0
    backoff: float = 1.0
    retry_on: tuple[type[BaseException], ...] = (Exception,)
    name: str = "file-io-retry"
    sleep: Callable[[float], None] = time.sleep

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds cannot be negative")
        if self.backoff < 1:
            raise ValueError("backoff must be at least 1")

    @classmethod
    def from_settings(cls, settings: Settings) -> "RetryPolicy":
        """Build the policy from environment configuration."""
        return cls(
            max_attempts=settings.file_op_max_attempts,
            delay_seconds=settings.file_op_retry_delay_seconds,
            backoff=settings.file_op_retry_backoff,
        )

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after the given (1-based) failed attempt."""
        return self.delay_seconds * self.backoff ** (attempt - 1)

    def call(self, fn: Callable[[], T]) -> T:
        """Run ``fn`` until it returns or the attempt ceiling is reached."""
        last_error: BaseException | None = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                return fn()
            except self.retry_on as exc:
                last_error = exc
                logger.debug(
                    "Attempt failed",
                    retry=self.name,
                    attempt=attempt,
                    max_attempts=self.max_attempts,
                    error=str(exc),
                )

            if attempt < self.max_attempts:
                self.sleep(self.delay_for(attempt))

        raise RetryExhaustedError(self.name, self.max_attempts, last_error) from last_error
