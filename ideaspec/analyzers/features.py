"""Feature request detection."""

from __future__ import annotations

from typing import Iterable, List

from .base import Analyzer, IdeaText
from .vocabulary import FEATURE_PATTERNS
from ..models import Signal


class FeatureAnalyzer(Analyzer):
    """Maps feature keywords onto feature labels, in table order."""

    name = "features"

    def analyze(self, idea: IdeaText) -> Iterable[Signal]:
        signals: List[Signal] = []
        for pattern, label in FEATURE_PATTERNS:
            match = pattern.search(idea.lower)
            if match is not None:
                signals.append(self._signal("feature", label, match=match.group(0)))
        return signals
