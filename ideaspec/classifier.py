"""Turns raw idea text into a feature vector using the analyzers."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from .analyzers import Analyzer, IdeaText, discover_analyzers
from .analyzers.vocabulary import (
    FALLBACK_AUDIENCE,
    FALLBACK_CURRENCY,
    FALLBACK_INDUSTRY,
    FALLBACK_REGION,
    FALLBACK_TONE,
)
from .logging import get_logger
from .merger import build_feature_vector
from .models import DEFAULT_SITE_TYPE, Detection, FeatureVector, Signal, unique
from .utils import STATED_GOAL_LIMIT, truncate


class Classifier:
    """Runs every analyzer over the idea and applies per-field fallbacks.

    The classifier never sees hints: its vector carries ``output_lang='en'``
    and text-derived values only.
    """

    def __init__(self, analyzers: Optional[Iterable[Analyzer]] = None) -> None:
        self.analyzers: List[Analyzer] = (
            list(analyzers) if analyzers is not None else discover_analyzers()
        )
        self.logger = get_logger("classifier")

    def classify(self, text: str | None) -> FeatureVector:
        return build_feature_vector(self.detect(text))

    def detect(self, text: str | None) -> Detection:
        idea = IdeaText.from_raw(text)
        grouped = self._group_signals(self._run(idea))

        site_type = self._first_value(grouped, "site_type") or DEFAULT_SITE_TYPE
        detection = Detection(
            stated_goal=truncate(idea.collapsed, STATED_GOAL_LIMIT),
            idea_length=len(idea.raw),
            word_count=idea.word_count,
            audience=self._values(grouped, "audience") or (FALLBACK_AUDIENCE,),
            site_type=site_type,
            project_mode="project_mode" in grouped,
            tone=self._values(grouped, "tone") or FALLBACK_TONE,
            features=self._values(grouped, "feature"),
            industries=self._values(grouped, "industry") or (FALLBACK_INDUSTRY,),
            regions=self._values(grouped, "region") or (FALLBACK_REGION,),
            uses_arabic="language.arabic" in grouped,
            currency=self._first_value(grouped, "currency") or FALLBACK_CURRENCY,
            payment_keywords="payment" in grouped,
            compliance=self._values(grouped, "compliance"),
        )
        self.logger.debug(
            "Classified idea (%d chars) as %s; %d features, project_mode=%s",
            detection.idea_length,
            detection.site_type,
            len(detection.features),
            detection.project_mode,
        )
        return detection

    def _run(self, idea: IdeaText) -> List[Signal]:
        signals: List[Signal] = []
        for analyzer in self.analyzers:
            if not analyzer.supports(idea):
                continue
            signals.extend(analyzer.analyze(idea))
        return signals

    @staticmethod
    def _group_signals(signals: Iterable[Signal]) -> Dict[str, List[Signal]]:
        grouped: Dict[str, List[Signal]] = defaultdict(list)
        for signal in signals:
            grouped[signal.name].append(signal)
        return grouped

    @staticmethod
    def _values(grouped: Dict[str, List[Signal]], name: str) -> tuple[str, ...]:
        return unique([signal.value for signal in grouped.get(name, [])])

    @staticmethod
    def _first_value(grouped: Dict[str, List[Signal]], name: str) -> Optional[str]:
        items: Sequence[Signal] = grouped.get(name, [])
        return items[0].value if items else None


__all__ = ["Classifier"]
