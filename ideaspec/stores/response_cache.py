"""Short-lived cache for service responses."""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, Mapping, Optional

from .ttl_store import TTLStore

_KEY_PREFIX = "improve:"


class ResponseCache:
    """Memoizes responses by ``(idea, hints, include_details)``.

    Safe because the engine is a pure function of those inputs.
    """

    def __init__(self, store: TTLStore, *, ttl_seconds: float = 60.0) -> None:
        self._store = store
        self.ttl_seconds = ttl_seconds

    @staticmethod
    def make_key(idea: str, hints: Optional[Mapping[str, Any]], include_details: bool) -> str:
        payload = json.dumps(
            {"i": idea, "h": dict(hints) if hints else None, "d": bool(include_details)},
            sort_keys=True,
            ensure_ascii=False,
            default=str,
        )
        digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()
        return f"{_KEY_PREFIX}{digest}"

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        if self.ttl_seconds <= 0:
            return None
        return self._store.get(key)

    def store(self, key: str, response: Dict[str, Any]) -> None:
        if self.ttl_seconds <= 0:
            return
        self._store.set(key, response, self.ttl_seconds)


__all__ = ["ResponseCache"]
