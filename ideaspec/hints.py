"""Caller-supplied hints that override or extend classified values."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .utils import as_bool

# camelCase wire key -> dataclass attribute
_LIST_KEYS: Dict[str, str] = {
    "audience": "audience",
    "tone": "tone",
    "features": "features",
    "industries": "industries",
    "regions": "regions",
    "languages": "languages",
    "pages": "pages",
    "compliance": "compliance",
    "kpis": "kpis",
    "userStories": "user_stories",
    "tech": "tech",
    "contentChecklist": "content_checklist",
    "milestones": "milestones",
    "personas": "personas",
}
_STR_KEYS: Dict[str, str] = {
    "siteType": "site_type",
    "currency": "currency",
    "outputLang": "output_lang",
}
_BOOL_KEYS: Dict[str, str] = {
    "requiresPayments": "requires_payments",
    "projectMode": "project_mode",
}
_KNOWN_KEYS: Dict[str, str] = {**_LIST_KEYS, **_STR_KEYS, **_BOOL_KEYS}


@dataclass(frozen=True)
class Hints:
    """Partially populated overrides for the feature vector.

    Scalar fields left as ``None`` keep the classified value; list fields
    are appended to the classified sets. Keys the engine does not know are
    preserved on ``extra`` and otherwise ignored.
    """

    site_type: Optional[str] = None
    currency: Optional[str] = None
    output_lang: Optional[str] = None
    requires_payments: Optional[bool] = None
    project_mode: Optional[bool] = None
    audience: Tuple[str, ...] = ()
    tone: Tuple[str, ...] = ()
    features: Tuple[str, ...] = ()
    industries: Tuple[str, ...] = ()
    regions: Tuple[str, ...] = ()
    languages: Tuple[str, ...] = ()
    pages: Tuple[str, ...] = ()
    compliance: Tuple[str, ...] = ()
    kpis: Tuple[str, ...] = ()
    user_stories: Tuple[str, ...] = ()
    tech: Tuple[str, ...] = ()
    content_checklist: Tuple[str, ...] = ()
    milestones: Tuple[str, ...] = ()
    personas: Tuple[str, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "Hints":
        """Build hints from a camelCase (or snake_case) mapping."""
        if not data:
            return cls()
        snake_to_attr = {attr: attr for attr in _KNOWN_KEYS.values()}
        values: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, raw in data.items():
            attr = _KNOWN_KEYS.get(key) or snake_to_attr.get(key)
            if attr is None:
                extra[key] = raw
                continue
            if attr in _LIST_KEYS.values():
                values[attr] = _as_str_tuple(raw)
            elif attr in _BOOL_KEYS.values():
                values[attr] = as_bool(raw)
            else:
                values[attr] = _as_str(raw)
        return cls(extra=extra, **values)

    def with_output_lang(self, output_lang: str | None) -> "Hints":
        if output_lang is None:
            return self
        return replace(self, output_lang=output_lang)

    def to_dict(self) -> Dict[str, Any]:
        """Return the populated fields keyed by their wire names."""
        payload: Dict[str, Any] = {}
        for key, attr in _KNOWN_KEYS.items():
            value = getattr(self, attr)
            if value is None or value == ():
                continue
            payload[key] = list(value) if isinstance(value, tuple) else value
        return payload


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _as_str_tuple(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence):
        return tuple(str(item) for item in value if isinstance(item, (str, int, float)))
    return ()


__all__ = ["Hints"]
