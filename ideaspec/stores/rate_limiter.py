"""Per-caller request limiting over a TTL store."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable

from .ttl_store import TTLStore

_KEY_PREFIX = "rate:"


@dataclass(frozen=True)
class RateDecision:
    """Outcome of a rate-limit check; ``reset_at`` is epoch seconds."""

    allowed: bool
    remaining: int
    reset_at: float

    @property
    def reset_at_ms(self) -> int:
        return int(self.reset_at * 1000)


@dataclass(frozen=True)
class _Window:
    count: int
    reset_at: float


class RateLimiter:
    """Fixed-window counter keyed by caller identity.

    The first request from an identity opens a window of ``window_seconds``;
    once ``limit`` requests were counted in it, further requests are refused
    until the window resets.
    """

    def __init__(
        self,
        store: TTLStore,
        *,
        limit: int = 60,
        window_seconds: float = 60.0,
        clock: Callable[[], float] | None = None,
    ) -> None:
        if limit <= 0 or window_seconds <= 0:
            raise ValueError("limit and window_seconds must be positive")
        self._store = store
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock or time.time
        self._lock = threading.Lock()

    def hit(self, identity: str) -> RateDecision:
        key = f"{_KEY_PREFIX}{identity}"
        with self._lock:
            now = self._clock()
            window = self._store.get(key)
            if not isinstance(window, _Window) or now > window.reset_at:
                window = _Window(count=1, reset_at=now + self.window_seconds)
                self._store.set(key, window, self.window_seconds)
                return RateDecision(True, max(self.limit - 1, 0), window.reset_at)
            if window.count >= self.limit:
                return RateDecision(False, 0, window.reset_at)
            window = _Window(count=window.count + 1, reset_at=window.reset_at)
            self._store.set(key, window, max(window.reset_at - now, 0.0))
            return RateDecision(True, self.limit - window.count, window.reset_at)


__all__ = ["RateDecision", "RateLimiter"]
