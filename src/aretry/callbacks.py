r"""Callback data structures for retry observability.

The ``on_retry`` hook of ``RetryOptions`` receives a ``RetryInfo`` right
before each backoff wait. It can be used for logging, metrics or alerting.

Example:
    ```pycon
    >>> from aretry.callbacks import RetryInfo
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"attempt {info.attempt}/{info.max_retries + 1} in {info.wait_time}s")
    ...
    >>> log_retry(RetryInfo(attempt=2, retry_count=1, max_retries=3, wait_time=0.5, error=None))
    attempt 2/4 in 0.5s

    ```
"""

from __future__ import annotations

__all__ = ["RetryInfo", "invoke_on_retry"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class RetryInfo:
    """Information passed to the on_retry callback.

    Attributes:
        attempt: The number of the upcoming attempt (1-indexed). The first
            retry is attempt 2.
        retry_count: The number of failures observed so far.
        max_retries: Maximum number of retries allowed by the strategy.
        wait_time: The scaled delay in seconds before the upcoming attempt.
        error: The exception that triggered the retry.
    """

    attempt: int
    retry_count: int
    max_retries: int
    wait_time: float
    error: Exception | None


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    attempt: int,
    retry_count: int,
    max_retries: int,
    wait_time: float,
    error: Exception | None,
) -> None:
    """Invoke the on_retry callback if provided.

    Args:
        on_retry: Optional callback.
        attempt: The number of the upcoming attempt.
        retry_count: The number of failures observed so far.
        max_retries: Maximum number of retries.
        wait_time: The scaled delay before the upcoming attempt.
        error: The exception that triggered the retry.
    """
    if on_retry is None:
        return
    on_retry(
        RetryInfo(
            attempt=attempt,
            retry_count=retry_count,
            max_retries=max_retries,
            wait_time=wait_time,
            error=error,
        )
    )
