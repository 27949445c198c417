"""Tone keyword detection."""

from __future__ import annotations

from typing import Iterable

from .base import Analyzer, IdeaText
from .vocabulary import TONE_PATTERNS
from ..models import Signal


class ToneAnalyzer(Analyzer):
    """Collects every tone keyword present in the idea."""

    name = "tone"

    def analyze(self, idea: IdeaText) -> Iterable[Signal]:
        return [
            self._signal("tone", tone)
            for pattern, tone in TONE_PATTERNS
            if idea.contains(pattern)
        ]
