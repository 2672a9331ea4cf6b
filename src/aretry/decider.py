r"""Retry decision logic shared by the sync and async retry loops.

This module provides the RetryDecider class that decides whether a
failure should be retried and how long to wait before the next attempt.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.backoff import BackoffStrategy
    from aretry.options import RetryOptions

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a failed operation should be retried.

    Args:
        strategy: The backoff strategy providing the retry budget and the
            base delays.
        options: The retry options.

    Example:
        ```pycon
        >>> from aretry import RetryOptions
        >>> from aretry.backoff import BackoffStrategy
        >>> from aretry.decider import RetryDecider
        >>> class TwoRetries(BackoffStrategy):
        ...     def get_max_retries(self) -> int:
        ...         return 2
        ...     def get_next_delay(self, retry_count: int) -> float:
        ...         return 1.0
        ...
        >>> decider = RetryDecider(TwoRetries(), RetryOptions(scale_factor=0.5))
        >>> decider.classify(RuntimeError("boom"), retry_count=1)
        (True, 'RuntimeError')
        >>> decider.classify(RuntimeError("boom"), retry_count=3)
        (False, 'max retries exhausted')
        >>> decider.calculate_delay(1)
        0.5

        ```
    """

    def __init__(self, strategy: BackoffStrategy, options: RetryOptions) -> None:
        self.strategy = strategy
        self.options = options
        self.max_retries = strategy.get_max_retries()

    def classify(self, error: Exception, retry_count: int) -> tuple[bool, str]:
        """Determine if a failure should trigger a retry.

        The checks run in order: unrecoverable error types, the abort
        predicate, then the retry budget.

        Args:
            error: The exception raised by the operation.
            retry_count: The number of failures observed so far (1-indexed).

        Returns:
            Tuple of (should_retry, reason).
        """
        if isinstance(error, self.options.unrecoverable_errors):
            return (False, "unrecoverable error")
        if self.options.abort_retry is not None and self.options.abort_retry(
            error, retry_count
        ):
            return (False, "aborted by predicate")
        # retry_count - 1 retries have already been performed
        if retry_count > self.max_retries:
            return (False, "max retries exhausted")
        return (True, type(error).__name__)

    def calculate_delay(self, retry_count: int) -> float:
        """Calculate the scaled delay before the next attempt.

        The strategy's delay is not clamped: negative or NaN values are
        passed through to the sleep function.

        Args:
            retry_count: The number of failures observed so far (1-indexed).

        Returns:
            The delay in seconds.
        """
        base_delay = self.strategy.get_next_delay(retry_count)
        delay = base_delay * self.options.scale_factor
        logger.debug(
            f"Waiting {delay:.2f}s before retry "
            f"(base={base_delay:.2f}s, scale_factor={self.options.scale_factor})"
        )
        return delay
