r"""Exceptions raised by aretry itself.

Failures of the retried operation are never wrapped: they propagate
unchanged. Only invalid configuration is reported with a dedicated
exception.
"""

from __future__ import annotations

__all__ = ["RetryConfigurationError"]


class RetryConfigurationError(ValueError):
    """Raised when retry options are invalid.

    It is raised before the operation is invoked and is never retried.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryConfigurationError
        >>> try:
        ...     raise RetryConfigurationError("scale_factor must be > 0, got 0")
        ... except ValueError as exc:
        ...     print(exc)
        ...
        scale_factor must be > 0, got 0

        ```
    """
