"""Small helpers shared across ideaspec modules."""

from __future__ import annotations

import re
from typing import Any, Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

STATED_GOAL_LIMIT = 280


def slugify(name: str) -> str:
    """Return the URL path for a page name, e.g. ``Cart / Checkout`` -> ``/cart-checkout``."""
    slug = _NON_ALNUM.sub("-", name.lower()).strip("-")
    return f"/{slug}"


def truncate(text: str, limit: int) -> str:
    return text[:limit] if len(text) > limit else text


def as_bool(value: Any) -> Optional[bool]:
    """Coerce booleans and yes/no style strings; anything else is None."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["STATED_GOAL_LIMIT", "as_bool", "slugify", "truncate"]
