"""Tests for the fixed-window rate limiter."""

from __future__ import annotations

import pytest

from ideaspec.stores import InMemoryTTLStore, RateLimiter


def test_allows_up_to_limit_then_refuses(clock) -> None:
    limiter = RateLimiter(InMemoryTTLStore(clock=clock), limit=3, window_seconds=60, clock=clock)

    decisions = [limiter.hit("1.2.3.4") for _ in range(4)]

    assert [decision.allowed for decision in decisions] == [True, True, True, False]
    assert [decision.remaining for decision in decisions] == [2, 1, 0, 0]
    assert decisions[-1].reset_at == clock.now + 60


def test_window_resets_after_expiry(clock) -> None:
    limiter = RateLimiter(InMemoryTTLStore(clock=clock), limit=1, window_seconds=10, clock=clock)

    assert limiter.hit("caller").allowed is True
    assert limiter.hit("caller").allowed is False

    clock.advance(11)
    assert limiter.hit("caller").allowed is True


def test_identities_are_counted_separately(clock) -> None:
    limiter = RateLimiter(InMemoryTTLStore(clock=clock), limit=1, window_seconds=60, clock=clock)

    assert limiter.hit("a").allowed is True
    assert limiter.hit("b").allowed is True
    assert limiter.hit("a").allowed is False


def test_reset_at_ms_is_epoch_milliseconds(clock) -> None:
    limiter = RateLimiter(InMemoryTTLStore(clock=clock), limit=1, window_seconds=2.5, clock=clock)

    decision = limiter.hit("caller")

    assert decision.reset_at_ms == int((clock.now + 2.5) * 1000)


@pytest.mark.parametrize("settings", [{"limit": 0}, {"window_seconds": 0}, {"window_seconds": -5}])
def test_rejects_non_positive_limit_or_window(clock, settings) -> None:
    with pytest.raises(ValueError):
        RateLimiter(InMemoryTTLStore(clock=clock), clock=clock, **settings)
