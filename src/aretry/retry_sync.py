r"""Synchronous retry orchestrator.

This module provides ``retry_sync``, the blocking counterpart of
``aretry.retry``. It follows the same classification and delay rules
and waits with ``time.sleep``.
"""

from __future__ import annotations

__all__ = ["retry_sync"]

import inspect
import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.backoff import create_backoff_strategy
from aretry.callbacks import invoke_on_retry
from aretry.decider import RetryDecider
from aretry.exceptions import RetryConfigurationError
from aretry.options import RetryOptions

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff import BackoffStrategy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def retry_sync(
    operation: Callable[[int], T],
    backoff_strategy: BackoffStrategy | type[BackoffStrategy],
    options: RetryOptions | None = None,
) -> T:
    """Run a synchronous operation and retry it with backoff when it fails.

    See ``aretry.retry`` for the retry rules. Negative delays are passed
    to ``time.sleep``, which rejects them with ``ValueError``.

    Args:
        operation: The operation to run. It receives the attempt number
            (1-indexed) and must not return an awaitable.
        backoff_strategy: A backoff strategy instance, or a strategy class
            that is instantiated once per call without arguments.
        options: Optional retry options. ``attempt_timeout`` is not
            supported. Defaults to ``RetryOptions()``.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        RetryConfigurationError: If the options are invalid or set
            ``attempt_timeout``. The operation is not invoked.
        TypeError: If ``backoff_strategy`` is not a valid strategy, or if
            the operation returns an awaitable.
        Exception: The operation's own last error, unchanged, when retrying
            stops.

    Example:
        ```pycon
        >>> from aretry import RetryOptions, retry_sync
        >>> from aretry.backoff import BackoffStrategy
        >>> class Immediate(BackoffStrategy):
        ...     def get_max_retries(self) -> int:
        ...         return 5
        ...     def get_next_delay(self, retry_count: int) -> float:
        ...         return 0.0
        ...
        >>> def read(attempt: int) -> int:
        ...     raise KeyError(attempt)
        ...
        >>> retry_sync(read, Immediate, RetryOptions(unrecoverable_errors=(KeyError,)))
        Traceback (most recent call last):
        ...
        KeyError: 1

        ```
    """
    if options is None:
        options = RetryOptions()
    options.validate()
    if options.attempt_timeout is not None:
        msg = "attempt_timeout is not supported by retry_sync, use retry instead"
        raise RetryConfigurationError(msg)
    strategy = create_backoff_strategy(backoff_strategy)
    decider = RetryDecider(strategy, options)

    attempt = 1
    while True:
        try:
            result = operation(attempt)
        except Exception as exc:
            attempt += 1
            retry_count = attempt - 1
            should_retry, reason = decider.classify(exc, retry_count)
            if not should_retry:
                logger.debug(f"Giving up after {retry_count} attempt(s) ({reason}): {exc!r}")
                raise
            logger.debug(f"Attempt {retry_count} failed, will retry ({reason})")
            delay = decider.calculate_delay(retry_count)
            invoke_on_retry(
                options.on_retry,
                attempt=attempt,
                retry_count=retry_count,
                max_retries=decider.max_retries,
                wait_time=delay,
                error=exc,
            )
        else:
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                msg = "retry_sync cannot await the operation result, use retry instead"
                raise TypeError(msg)
            if attempt > 1:
                logger.debug(f"Operation succeeded on attempt {attempt}")
            return result
        time.sleep(delay)
