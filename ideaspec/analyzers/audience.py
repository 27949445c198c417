"""Audience detection from keyword tables."""

from __future__ import annotations

from typing import Iterable, List

from .base import Analyzer, IdeaText
from .vocabulary import AUDIENCE_KEYWORDS
from ..models import Signal


class AudienceAnalyzer(Analyzer):
    """Emits one signal per audience keyword found in the idea.

    English and Arabic keywords map onto the same canonical English label;
    duplicate labels are collapsed by the classifier.
    """

    name = "audience"

    def analyze(self, idea: IdeaText) -> Iterable[Signal]:
        signals: List[Signal] = []
        for keyword, label in AUDIENCE_KEYWORDS.items():
            if idea.contains(keyword):
                signals.append(self._signal("audience", label, keyword=keyword))
        return signals
