r"""aretry - Retry fallible operations with pluggable backoff strategies.

This package re-invokes an operation until it succeeds, the retry budget
of a backoff strategy is exhausted, or the failure is classified as
unrecoverable. Delays come from a caller supplied ``BackoffStrategy`` and
can be uniformly scaled.

Key Features:
    - Async ``retry`` and blocking ``retry_sync`` with the same semantics
    - Backoff strategies passed as instances or as classes
    - Unrecoverable exception types and abort predicates
    - Scale factor applied to every delay
    - ``on_retry`` callback for observability
    - Optional per-attempt timeout for async operations

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import RetryOptions, retry
    >>> from aretry.backoff import BackoffStrategy
    >>> class Fixed(BackoffStrategy):
    ...     def get_max_retries(self) -> int:
    ...         return 2
    ...     def get_next_delay(self, retry_count: int) -> float:
    ...         return 0.1
    ...
    >>> async def fetch(attempt: int) -> int:
    ...     return attempt
    ...
    >>> asyncio.run(retry(fetch, Fixed(), RetryOptions(scale_factor=0.5)))
    1

    ```
"""

from __future__ import annotations

__all__ = [
    "BackoffStrategy",
    "RetryConfigurationError",
    "RetryInfo",
    "RetryOptions",
    "__version__",
    "retry",
    "retry_sync",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.backoff import BackoffStrategy
from aretry.callbacks import RetryInfo
from aretry.exceptions import RetryConfigurationError
from aretry.options import RetryOptions
from aretry.retry import retry
from aretry.retry_sync import retry_sync

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
