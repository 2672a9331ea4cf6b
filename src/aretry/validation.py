r"""Parameter validation utilities for retry options.

This module provides validation functions for retry options to ensure
they meet the required constraints before any operation is invoked.
"""

from __future__ import annotations

__all__ = [
    "validate_attempt_timeout",
    "validate_scale_factor",
    "validate_unrecoverable_errors",
]

import math

from aretry.exceptions import RetryConfigurationError


def validate_scale_factor(scale_factor: float) -> None:
    """Validate the delay scale factor.

    Args:
        scale_factor: Multiplier applied to every backoff delay.
            Must be a number > 0 (not NaN).

    Raises:
        RetryConfigurationError: If ``scale_factor`` is not a positive number.

    Example:
        ```pycon
        >>> from aretry.validation import validate_scale_factor
        >>> validate_scale_factor(1.0)
        >>> validate_scale_factor(2)
        >>> validate_scale_factor(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aretry.exceptions.RetryConfigurationError: scale_factor must be a positive number greater than zero, got 0

        ```
    """
    if (
        isinstance(scale_factor, bool)
        or not isinstance(scale_factor, (int, float))
        or math.isnan(scale_factor)
        or scale_factor <= 0
    ):
        msg = f"scale_factor must be a positive number greater than zero, got {scale_factor!r}"
        raise RetryConfigurationError(msg)


def validate_attempt_timeout(attempt_timeout: float | None) -> None:
    """Validate the per-attempt timeout.

    Args:
        attempt_timeout: Maximum seconds a single attempt may run.
            Must be a number > 0 (not NaN) if provided.

    Raises:
        RetryConfigurationError: If ``attempt_timeout`` is not a positive number.

    Example:
        ```pycon
        >>> from aretry.validation import validate_attempt_timeout
        >>> validate_attempt_timeout(None)
        >>> validate_attempt_timeout(5.0)

        ```
    """
    if attempt_timeout is None:
        return
    if (
        isinstance(attempt_timeout, bool)
        or not isinstance(attempt_timeout, (int, float))
        or math.isnan(attempt_timeout)
        or attempt_timeout <= 0
    ):
        msg = f"attempt_timeout must be > 0, got {attempt_timeout!r}"
        raise RetryConfigurationError(msg)


def validate_unrecoverable_errors(
    unrecoverable_errors: tuple[type[BaseException], ...] | list[type[BaseException]],
) -> None:
    """Validate the exception classes that are never retried.

    Args:
        unrecoverable_errors: A tuple, list or set of exception classes.

    Raises:
        RetryConfigurationError: If ``unrecoverable_errors`` is not a
            collection of ``BaseException`` subclasses.

    Example:
        ```pycon
        >>> from aretry.validation import validate_unrecoverable_errors
        >>> validate_unrecoverable_errors(())
        >>> validate_unrecoverable_errors((KeyError, TimeoutError))
        >>> validate_unrecoverable_errors(["KeyError"])  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aretry.exceptions.RetryConfigurationError: unrecoverable_errors must only contain exception classes, got 'KeyError'

        ```
    """
    if not isinstance(unrecoverable_errors, (tuple, list, set, frozenset)):
        msg = (
            "unrecoverable_errors must be a tuple of exception classes, "
            f"got {unrecoverable_errors!r}"
        )
        raise RetryConfigurationError(msg)
    for error in unrecoverable_errors:
        if not isinstance(error, type) or not issubclass(error, BaseException):
            msg = f"unrecoverable_errors must only contain exception classes, got {error!r}"
            raise RetryConfigurationError(msg)
