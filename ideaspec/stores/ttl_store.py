"""Key/value stores with per-entry expiry."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol

from ..logging import get_logger

logger = get_logger("stores")

Clock = Callable[[], float]


class TTLStore(Protocol):
    """Minimal get/set-with-expiry interface used by the cache and rate limiter."""

    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any, ttl: float) -> None:
        ...

    def delete(self, key: str) -> None:
        ...

    def clear(self) -> None:
        ...


@dataclass
class _Entry:
    value: Any
    expires_at: float


class InMemoryTTLStore:
    """Process-local store guarded by a lock.

    Expired entries are dropped lazily on read and swept whenever the store
    grows past ``max_entries``.
    """

    def __init__(self, *, clock: Clock | None = None, max_entries: int = 10_000) -> None:
        self._clock: Clock = clock or time.monotonic
        self._max_entries = max_entries
        self._lock = threading.Lock()
        self._entries: Dict[str, _Entry] = {}

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[key]
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl: float) -> None:
        with self._lock:
            now = self._clock()
            self._entries[key] = _Entry(value=value, expires_at=now + ttl)
            if len(self._entries) > self._max_entries:
                self._sweep(now)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _sweep(self, now: float) -> None:
        expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            del self._entries[key]
        overflow = len(self._entries) - self._max_entries
        if overflow > 0:
            # dicts keep insertion order, so the oldest writes go first
            for key in list(self._entries)[:overflow]:
                del self._entries[key]
        logger.debug("Swept %d expired and %d overflow entries", len(expired), max(overflow, 0))


__all__ = ["Clock", "InMemoryTTLStore", "TTLStore"]
