r"""Resolve the backoff strategy argument accepted by the retry functions."""

from __future__ import annotations

__all__ = ["create_backoff_strategy"]

from aretry.backoff.base import BackoffStrategy


def create_backoff_strategy(
    backoff_strategy: BackoffStrategy | type[BackoffStrategy],
) -> BackoffStrategy:
    """Return a backoff strategy instance.

    Args:
        backoff_strategy: A strategy instance, returned as is, or a
            strategy class, instantiated without arguments.

    Returns:
        The backoff strategy instance.

    Raises:
        TypeError: If ``backoff_strategy`` is neither a ``BackoffStrategy``
            instance nor a ``BackoffStrategy`` subclass.

    Example:
        ```pycon
        >>> from aretry.backoff import BackoffStrategy, create_backoff_strategy
        >>> class NoRetry(BackoffStrategy):
        ...     def get_max_retries(self) -> int:
        ...         return 0
        ...     def get_next_delay(self, retry_count: int) -> float:
        ...         return 0.0
        ...
        >>> strategy = create_backoff_strategy(NoRetry)
        >>> isinstance(strategy, NoRetry)
        True
        >>> create_backoff_strategy(strategy) is strategy
        True

        ```
    """
    if isinstance(backoff_strategy, BackoffStrategy):
        return backoff_strategy
    if isinstance(backoff_strategy, type) and issubclass(backoff_strategy, BackoffStrategy):
        return backoff_strategy()
    msg = (
        "backoff_strategy must be a BackoffStrategy instance or subclass, "
        f"got {backoff_strategy!r}"
    )
    raise TypeError(msg)
