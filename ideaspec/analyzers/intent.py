"""Site type and project-mode detection."""

from __future__ import annotations

from typing import Iterable, List

from .base import Analyzer, IdeaText
from .vocabulary import PROJECT_MODE_PATTERN, SITE_TYPE_PATTERNS
from ..models import Signal


class SiteTypeAnalyzer(Analyzer):
    """Classifies the idea into a single site category.

    Categories are tested in a fixed order and the first match wins, so an
    idea mentioning both a shop and a blog is an ecommerce site. No signal is
    emitted when nothing matches.
    """

    name = "site_type"

    def analyze(self, idea: IdeaText) -> Iterable[Signal]:
        for site_type, pattern in SITE_TYPE_PATTERNS:
            match = pattern.search(idea.lower)
            if match is not None:
                return [self._signal("site_type", site_type, match=match.group(0))]
        return []


class ProjectModeAnalyzer(Analyzer):
    """Flags ideas that ask for planning material (scope, milestones, spec)."""

    name = "project_mode"

    def analyze(self, idea: IdeaText) -> Iterable[Signal]:
        signals: List[Signal] = []
        match = PROJECT_MODE_PATTERN.search(idea.lower)
        if match is not None:
            signals.append(self._signal("project_mode", "true", match=match.group(0)))
        return signals
