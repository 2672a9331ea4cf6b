r"""Asynchronous retry orchestrator.

This module provides the ``retry`` coroutine that re-invokes a fallible
operation according to a backoff strategy until it succeeds, the retry
budget is exhausted, or the failure is classified as unrecoverable.
"""

from __future__ import annotations

__all__ = ["retry"]

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.backoff import create_backoff_strategy
from aretry.callbacks import invoke_on_retry
from aretry.decider import RetryDecider
from aretry.options import RetryOptions

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.backoff import BackoffStrategy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


async def retry(
    operation: Callable[[int], T | Awaitable[T]],
    backoff_strategy: BackoffStrategy | type[BackoffStrategy],
    options: RetryOptions | None = None,
) -> T:
    """Run an operation and retry it with backoff when it fails.

    The operation is called with the current attempt number (1-indexed)
    and may return a value or an awaitable. On failure, the error is
    classified in order:

    1. If it is an instance of one of ``options.unrecoverable_errors``,
       it is re-raised immediately.
    2. If ``options.abort_retry(error, retry_count)`` returns ``True``,
       it is re-raised immediately.
    3. If the retry budget (``backoff_strategy.get_max_retries()``) is
       exhausted, it is re-raised.
    4. Otherwise the coroutine sleeps for
       ``backoff_strategy.get_next_delay(retry_count) * options.scale_factor``
       seconds and calls the operation again.

    ``retry_count`` is the number of failures observed so far, so it is
    ``1`` after the first failure. The operation is invoked at most
    ``get_max_retries() + 1`` times, and always sequentially.

    Only ``Exception`` subclasses are caught: cancelling the task that
    awaits ``retry`` interrupts the running attempt or the pending sleep
    and propagates ``asyncio.CancelledError`` unchanged.

    Args:
        operation: The operation to run. It receives the attempt number.
        backoff_strategy: A backoff strategy instance, or a strategy class
            that is instantiated once per call without arguments.
        options: Optional retry options. Defaults to ``RetryOptions()``.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        RetryConfigurationError: If the options are invalid. The operation
            is not invoked.
        TypeError: If ``backoff_strategy`` is not a valid strategy.
        Exception: The operation's own last error, unchanged, when retrying
            stops.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import RetryOptions, retry
        >>> from aretry.backoff import BackoffStrategy
        >>> class Immediate(BackoffStrategy):
        ...     def get_max_retries(self) -> int:
        ...         return 3
        ...     def get_next_delay(self, retry_count: int) -> float:
        ...         return 0.0
        ...
        >>> async def flaky(attempt: int) -> str:
        ...     if attempt < 3:
        ...         raise ConnectionError("not yet")
        ...     return f"ok on attempt {attempt}"
        ...
        >>> asyncio.run(retry(flaky, Immediate))
        'ok on attempt 3'

        ```
    """
    if options is None:
        options = RetryOptions()
    options.validate()
    strategy = create_backoff_strategy(backoff_strategy)
    decider = RetryDecider(strategy, options)

    attempt = 1
    while True:
        try:
            result = await _call_operation(operation, attempt, options.attempt_timeout)
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
            if attempt > 1:
                logger.debug(f"Operation succeeded on attempt {attempt}")
            return result
        await asyncio.sleep(delay)


async def _call_operation(
    operation: Callable[[int], T | Awaitable[T]],
    attempt: int,
    attempt_timeout: float | None,
) -> T:
    r"""Call the operation and await its result if needed.

    ``attempt_timeout`` only applies to awaitable results: a synchronous
    operation has already finished when it returns.
    """
    result = operation(attempt)
    if not inspect.isawaitable(result):
        return result
    if attempt_timeout is None:
        return await result
    return await asyncio.wait_for(result, timeout=attempt_timeout)
