"""Pytest configuration and fixtures."""

from datetime import UTC, datetime

import pytest

from swapfee.engine import RuleEngine
from swapfee.registry import StaticTokenRegistry
from tests.helpers import TOKENS, make_config


class FixedClock:
    """Settable clock for rule validity windows."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def registry() -> StaticTokenRegistry:
    """Registry holding the standard test tokens."""
    return StaticTokenRegistry(TOKENS)


@pytest.fixture
def clock() -> FixedClock:
    """Clock fixed at 2024-06-15T12:00:00Z."""
    return FixedClock(datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def make_engine(registry, clock):
    """Build an engine over the test registry and fixed clock."""

    def _make(rules=None, **config_kwargs) -> RuleEngine:
        return RuleEngine(make_config(rules=rules, **config_kwargs), registry, clock=clock)

    return _make
