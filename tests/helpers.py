r"""Shared backoff strategies and operations for the retry tests."""

from __future__ import annotations

from aretry.backoff import BackoffStrategy


class FixedBackoff(BackoffStrategy):
    """Backoff strategy with a fixed budget and a fixed delay."""

    def __init__(self, max_retries: int = 3, delay: float = 1.0) -> None:
        self.max_retries = max_retries
        self.delay = delay

    def get_max_retries(self) -> int:
        return self.max_retries

    def get_next_delay(self, retry_count: int) -> float:  # noqa: ARG002
        return self.delay


class DoublingBackoff(BackoffStrategy):
    """Backoff strategy doubling the delay after each failure."""

    def get_max_retries(self) -> int:
        return 4

    def get_next_delay(self, retry_count: int) -> float:
        return 0.5 * 2 ** (retry_count - 1)


class NoRetryBackoff(BackoffStrategy):
    """Backoff strategy that never retries."""

    def get_max_retries(self) -> int:
        return 0

    def get_next_delay(self, retry_count: int) -> float:  # noqa: ARG002
        return 1.0


class TransientError(Exception):
    """Error raised by operations that should be retried."""


class FatalError(Exception):
    """Error raised by operations that should not be retried."""


class FatalSubError(FatalError):
    """Subclass of FatalError."""
