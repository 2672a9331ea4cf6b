r"""Backoff strategy contract used by the retry functions.

Concrete delay curves are provided by callers: any subclass of
``BackoffStrategy`` can be used.
"""

from __future__ import annotations

__all__ = ["BackoffStrategy", "create_backoff_strategy"]

from aretry.backoff.base import BackoffStrategy
from aretry.backoff.factory import create_backoff_strategy
