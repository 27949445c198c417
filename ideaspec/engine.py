"""Single entry point that classifies an idea and renders its documents."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from .classifier import Classifier
from .hints import Hints
from .logging import get_logger
from .merger import HintMerger
from .models import FeatureVector
from .prompting.builder import DocumentBuilder

HintsInput = Union[Hints, Mapping[str, Any], None]


@dataclass(frozen=True)
class ImproveResult:
    """Rendered documents plus the feature vector they were built from."""

    improved: str
    blueprint: Optional[str]
    processing_ms: float
    details: FeatureVector

    def details_dict(self) -> Dict[str, Any]:
        payload = self.details.to_dict()
        if self.blueprint is not None:
            payload["blueprint"] = self.blueprint
        return payload

    def to_response(self, include_details: bool = False) -> Dict[str, Any]:
        response: Dict[str, Any] = {
            "improved": self.improved,
            "meta": {"processingMs": self.processing_ms},
        }
        if include_details:
            response["details"] = self.details_dict()
        return response


class Engine:
    """Coordinates Classifier -> HintMerger -> DocumentBuilder.

    Holds no per-request state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        classifier: Classifier | None = None,
        merger: HintMerger | None = None,
        builder: DocumentBuilder | None = None,
    ) -> None:
        self.classifier = classifier or Classifier()
        self.merger = merger or HintMerger()
        self.builder = builder or DocumentBuilder()
        self.logger = get_logger("engine")

    def analyze(
        self, text: str | None, hints: HintsInput = None, *, output_lang: str | None = None
    ) -> FeatureVector:
        """Return the merged feature vector without rendering documents."""
        resolved = _resolve_hints(hints).with_output_lang(output_lang)
        classified = self.classifier.classify(text)
        return self.merger.merge(classified, resolved)

    def improve(
        self, text: str | None, hints: HintsInput = None, *, output_lang: str | None = None
    ) -> ImproveResult:
        started = time.perf_counter()
        vector = self.analyze(text, hints, output_lang=output_lang)
        documents = self.builder.build(vector)
        processing_ms = round((time.perf_counter() - started) * 1000, 3)
        self.logger.debug(
            "Improved idea as %s (lang=%s, blueprint=%s) in %.3f ms",
            vector.site_type,
            vector.output_lang,
            documents.blueprint is not None,
            processing_ms,
        )
        return ImproveResult(
            improved=documents.improved,
            blueprint=documents.blueprint,
            processing_ms=processing_ms,
            details=vector,
        )


def _resolve_hints(hints: HintsInput) -> Hints:
    if isinstance(hints, Hints):
        return hints
    return Hints.from_mapping(hints)


__all__ = ["Engine", "ImproveResult"]
