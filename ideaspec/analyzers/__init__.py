"""Analyzer implementations and discovery utilities."""

from __future__ import annotations

from typing import Callable, List, Sequence, Set

from .audience import AudienceAnalyzer
from .base import Analyzer, IdeaText
from .features import FeatureAnalyzer
from .intent import ProjectModeAnalyzer, SiteTypeAnalyzer
from .market import (
    ComplianceAnalyzer,
    CurrencyAnalyzer,
    IndustryAnalyzer,
    LanguageAnalyzer,
    PaymentAnalyzer,
    RegionAnalyzer,
)
from .tone import ToneAnalyzer

_BUILTIN_FACTORIES: dict[str, Callable[[], Analyzer]] = {
    "audience": AudienceAnalyzer,
    "site_type": SiteTypeAnalyzer,
    "project_mode": ProjectModeAnalyzer,
    "tone": ToneAnalyzer,
    "features": FeatureAnalyzer,
    "industry": IndustryAnalyzer,
    "region": RegionAnalyzer,
    "language": LanguageAnalyzer,
    "currency": CurrencyAnalyzer,
    "payment": PaymentAnalyzer,
    "compliance": ComplianceAnalyzer,
}


def discover_analyzers(enabled: Sequence[str] | None = None) -> List[Analyzer]:
    """Return instantiated analyzers, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}
        unknown = enabled_set - set(_BUILTIN_FACTORIES)
        if unknown:
            missing = ", ".join(sorted(unknown))
            raise ValueError(f"Unknown analyzers requested: {missing}")

    return [
        factory()
        for name, factory in _BUILTIN_FACTORIES.items()
        if enabled_set is None or name in enabled_set
    ]


__all__ = [
    "Analyzer",
    "IdeaText",
    "discover_analyzers",
]
