r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BackoffStrategy"]

from abc import ABC, abstractmethod


class BackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how many times a failed operation may be
    retried and how long to wait before each retry. Any subclass can be
    passed to ``aretry.retry`` either as an instance or as a class that
    can be instantiated without arguments.

    Example:
        ```pycon
        >>> from aretry.backoff import BackoffStrategy
        >>> class FixedBackoff(BackoffStrategy):
        ...     def get_max_retries(self) -> int:
        ...         return 3
        ...     def get_next_delay(self, retry_count: int) -> float:
        ...         return 0.5
        ...
        >>> strategy = FixedBackoff()
        >>> strategy.get_max_retries()
        3
        >>> strategy.get_next_delay(1)
        0.5

        ```
    """

    @abstractmethod
    def get_max_retries(self) -> int:
        """Return the maximum number of retries after the first attempt.

        Returns:
            The retry budget. ``0`` means the operation runs exactly once.
        """

    @abstractmethod
    def get_next_delay(self, retry_count: int) -> float:
        """Return the delay to wait before the next retry.

        Args:
            retry_count: The number of failures observed so far (1-indexed).
                For example, ``retry_count=1`` is the wait after the first
                failure.

        Returns:
            The delay in seconds, before ``scale_factor`` is applied.
        """
