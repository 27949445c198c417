from __future__ import annotations

import pytest

from ideaspec.classifier import Classifier
from ideaspec.engine import Engine


@pytest.fixture
def classifier() -> Classifier:
    """Provide a classifier wired with every built-in analyzer."""
    return Classifier()


@pytest.fixture
def engine() -> Engine:
    """Provide an engine using the packaged templates."""
    return Engine()


class FakeClock:
    """Manually advanced clock for store and limiter tests."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
