r"""Configuration dataclass and defaults for the retry functions.

This module provides the ``RetryOptions`` dataclass that customizes how
``retry`` and ``retry_sync`` classify failures and scale delays.
"""

from __future__ import annotations

__all__ = ["DEFAULT_SCALE_FACTOR", "RetryOptions"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.validation import (
    validate_attempt_timeout,
    validate_scale_factor,
    validate_unrecoverable_errors,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import RetryInfo

# Multiplier applied to every delay returned by the backoff strategy
DEFAULT_SCALE_FACTOR = 1.0


@dataclass
class RetryOptions:
    """Options controlling how failures are classified and delays scaled.

    Args:
        abort_retry: Optional predicate called with the failure and the
            retry count (number of failures so far, 1-indexed). Returning
            ``True`` stops retrying and re-raises the failure.
        scale_factor: Multiplier applied to every delay returned by the
            backoff strategy. Must be > 0.
        unrecoverable_errors: Exception classes that are never retried.
            A failure that is an instance of any of them is re-raised
            immediately.
        on_retry: Optional callback called before each backoff wait.
        attempt_timeout: Optional time limit in seconds for a single
            attempt. Only supported by the async ``retry`` function.
            A timed out attempt fails with ``TimeoutError``.

    Raises:
        RetryConfigurationError: If ``scale_factor``, ``attempt_timeout``
            or ``unrecoverable_errors`` is invalid.

    Example:
        ```pycon
        >>> from aretry import RetryOptions
        >>> options = RetryOptions(scale_factor=2.0, unrecoverable_errors=(KeyError,))
        >>> options.scale_factor
        2.0
        >>> options.merge(scale_factor=0.5).scale_factor
        0.5
        >>> options.scale_factor
        2.0

        ```
    """

    abort_retry: Callable[[Exception, int], bool] | None = None
    scale_factor: float = DEFAULT_SCALE_FACTOR
    unrecoverable_errors: tuple[type[BaseException], ...] = ()
    on_retry: Callable[[RetryInfo], None] | None = None
    attempt_timeout: float | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate the options.

        ``unrecoverable_errors`` is normalized to a tuple.

        Raises:
            RetryConfigurationError: If any option fails validation.
        """
        validate_scale_factor(self.scale_factor)
        validate_attempt_timeout(self.attempt_timeout)
        validate_unrecoverable_errors(self.unrecoverable_errors)
        self.unrecoverable_errors = tuple(self.unrecoverable_errors)

    def merge(self, **overrides: Any) -> RetryOptions:
        """Return a new validated ``RetryOptions`` with some fields replaced.

        Args:
            **overrides: Field values to replace.

        Returns:
            The new options. ``self`` is left unchanged.
        """
        return replace(self, **overrides)
