r"""Unit tests for create_backoff_strategy."""

from __future__ import annotations

import pytest

from aretry.backoff import create_backoff_strategy
from tests.helpers import FixedBackoff, NoRetryBackoff


def test_create_backoff_strategy_instance() -> None:
    strategy = FixedBackoff()
    assert create_backoff_strategy(strategy) is strategy


def test_create_backoff_strategy_class() -> None:
    strategy = create_backoff_strategy(NoRetryBackoff)
    assert isinstance(strategy, NoRetryBackoff)


def test_create_backoff_strategy_class_new_instance_per_call() -> None:
    assert create_backoff_strategy(FixedBackoff) is not create_backoff_strategy(FixedBackoff)


@pytest.mark.parametrize("value", [None, 1.0, object(), int, lambda: FixedBackoff()])
def test_create_backoff_strategy_invalid(value: object) -> None:
    with pytest.raises(TypeError, match=r"backoff_strategy must be a BackoffStrategy"):
        create_backoff_strategy(value)
