"""Base classes for idea analyzers."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Pattern, Union

from ..models import Signal

Matcher = Union[str, Pattern[str]]

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class IdeaText:
    """Trimmed idea text plus its lower-cased form used for matching."""

    raw: str
    lower: str

    @classmethod
    def from_raw(cls, raw: str | None) -> "IdeaText":
        idea = (raw or "").strip()
        return cls(raw=idea, lower=idea.lower())

    def contains(self, matcher: Matcher) -> bool:
        if isinstance(matcher, str):
            return matcher in self.lower
        return matcher.search(self.lower) is not None

    @property
    def is_empty(self) -> bool:
        return not self.raw

    @property
    def collapsed(self) -> str:
        return _WHITESPACE.sub(" ", self.raw)

    @property
    def word_count(self) -> int:
        return len(self.raw.split()) if self.raw else 0


class Analyzer(ABC):
    """Contract for analyzers that emit signals from an idea."""

    name: str = "analyzer"

    def supports(self, idea: IdeaText) -> bool:
        """Return True when this analyzer should run for the idea."""
        return not idea.is_empty

    @abstractmethod
    def analyze(self, idea: IdeaText) -> Iterable[Signal]:
        """Produce structured signals consumed by the classifier."""

    def _signal(self, name: str, value: str, **metadata: object) -> Signal:
        return Signal(name=name, value=value, source=self.name, metadata=dict(metadata))


__all__ = ["Analyzer", "IdeaText", "Matcher"]
