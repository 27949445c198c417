"""Injectable stores backing the service's response cache and rate limiter."""

from .rate_limiter import RateDecision, RateLimiter
from .response_cache import ResponseCache
from .ttl_store import InMemoryTTLStore, TTLStore

__all__ = ["InMemoryTTLStore", "RateDecision", "RateLimiter", "ResponseCache", "TTLStore"]
