r"""Unit tests for the BackoffStrategy base class."""

from __future__ import annotations

import pytest

from aretry.backoff import BackoffStrategy
from tests.helpers import FixedBackoff


def test_backoff_strategy_is_abstract() -> None:
    with pytest.raises(TypeError):
        BackoffStrategy()


def test_backoff_strategy_requires_both_methods() -> None:
    class OnlyMaxRetries(BackoffStrategy):
        def get_max_retries(self) -> int:
            return 1

    with pytest.raises(TypeError):
        OnlyMaxRetries()


def test_backoff_strategy_subclass() -> None:
    strategy = FixedBackoff(max_retries=2, delay=0.5)
    assert isinstance(strategy, BackoffStrategy)
    assert strategy.get_max_retries() == 2
    assert strategy.get_next_delay(1) == 0.5
