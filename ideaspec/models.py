"""Core data models shared across ideaspec components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

SITE_TYPES: Tuple[str, ...] = (
    "saas",
    "ecommerce",
    "portfolio",
    "restaurant",
    "blog",
    "event",
    "booking",
    "generic",
)

OUTPUT_LANGS: Tuple[str, ...] = ("en", "ar")

DEFAULT_SITE_TYPE = "generic"
DEFAULT_OUTPUT_LANG = "en"


@dataclass
class Signal:
    """Structured fact emitted by analyzers for downstream use."""

    name: str
    value: str
    source: str
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SitemapEntry:
    """A page and its URL path."""

    name: str
    path: str


@dataclass(frozen=True)
class Detection:
    """Text-derived facts produced by the classifier before any hint is applied."""

    stated_goal: str
    idea_length: int
    word_count: int
    audience: Tuple[str, ...]
    site_type: str
    project_mode: bool
    tone: Tuple[str, ...]
    features: Tuple[str, ...]
    industries: Tuple[str, ...]
    regions: Tuple[str, ...]
    uses_arabic: bool
    currency: str
    payment_keywords: bool
    compliance: Tuple[str, ...]


@dataclass(frozen=True)
class FeatureVector:
    """Merged classification result consumed by the document builder.

    Set-valued fields are tuples with insertion order preserved and no
    duplicates. ``detection`` keeps the classifier output the vector was
    built from so hint overlays can rebuild derived fields.
    """

    detection: Detection
    site_type: str
    site_type_label: str
    audience: Tuple[str, ...]
    tone: Tuple[str, ...]
    suggested_sections: Tuple[str, ...]
    default_features: Tuple[str, ...]
    detected_features: Tuple[str, ...]
    selected_features: Tuple[str, ...]
    industries: Tuple[str, ...]
    regions: Tuple[str, ...]
    languages: Tuple[str, ...]
    currency: str
    requires_payments: bool
    compliance: Tuple[str, ...]
    pages: Tuple[str, ...]
    sitemap: Tuple[SitemapEntry, ...]
    user_stories: Tuple[str, ...]
    tech_suggestions: Tuple[str, ...]
    non_functional: Tuple[str, ...]
    kpis: Tuple[str, ...]
    content_checklist: Tuple[str, ...]
    milestones: Tuple[str, ...]
    personas: Tuple[str, ...]
    clarifying_questions: Tuple[str, ...]
    project_mode: bool
    output_lang: str = DEFAULT_OUTPUT_LANG

    @property
    def stated_goal(self) -> str:
        return self.detection.stated_goal

    @property
    def uses_arabic(self) -> bool:
        return "Arabic" in self.languages

    def to_dict(self) -> Dict[str, Any]:
        """Return the feature detail object exposed to API callers."""
        return {
            "audience": list(self.audience),
            "siteType": self.site_type,
            "siteTypeLabel": self.site_type_label,
            "tone": list(self.tone),
            "suggestedSections": list(self.suggested_sections),
            "defaultFeatures": list(self.default_features),
            "detectedFeatures": list(self.detected_features),
            "selectedFeatures": list(self.selected_features),
            "ideaLength": self.detection.idea_length,
            "wordCount": self.detection.word_count,
            "statedGoal": self.stated_goal,
            "projectMode": self.project_mode,
            "industries": list(self.industries),
            "regions": list(self.regions),
            "languages": list(self.languages),
            "currency": self.currency,
            "requiresPayments": self.requires_payments,
            "compliance": list(self.compliance),
            "pages": list(self.pages),
            "sitemap": [{"name": entry.name, "path": entry.path} for entry in self.sitemap],
            "userStories": list(self.user_stories),
            "techSuggestions": list(self.tech_suggestions),
            "nonFunctional": list(self.non_functional),
            "kpis": list(self.kpis),
            "contentChecklist": list(self.content_checklist),
            "milestones": list(self.milestones),
            "personas": list(self.personas),
            "clarifyingQuestions": list(self.clarifying_questions),
            "outputLang": self.output_lang,
        }


def unique(items: List[str] | Tuple[str, ...]) -> Tuple[str, ...]:
    """Deduplicate preserving first-seen order, dropping empty entries."""
    seen: List[str] = []
    for item in items:
        if item and item not in seen:
            seen.append(item)
    return tuple(seen)


__all__ = [
    "DEFAULT_OUTPUT_LANG",
    "DEFAULT_SITE_TYPE",
    "Detection",
    "FeatureVector",
    "OUTPUT_LANGS",
    "SITE_TYPES",
    "Signal",
    "SitemapEntry",
    "unique",
]
