"""Analyzers for the commercial context of an idea: industry, market and payments."""

from __future__ import annotations

from typing import Iterable, List, Pattern, Sequence, Tuple

from .base import Analyzer, IdeaText
from .vocabulary import (
    ARABIC_KEYWORD_PATTERN,
    ARABIC_SCRIPT_PATTERN,
    COMPLIANCE_PATTERNS,
    CURRENCY_PATTERNS,
    INDUSTRY_PATTERNS,
    PAYMENT_PATTERN,
    REGION_PATTERNS,
)
from ..models import Signal


class _CollectingAnalyzer(Analyzer):
    """Emits a signal for every table entry whose pattern matches."""

    signal_name: str = ""
    patterns: Sequence[Tuple[Pattern[str], str]] = ()

    def analyze(self, idea: IdeaText) -> Iterable[Signal]:
        return [
            self._signal(self.signal_name, label)
            for pattern, label in self.patterns
            if idea.contains(pattern)
        ]


class IndustryAnalyzer(_CollectingAnalyzer):
    name = "industry"
    signal_name = "industry"
    patterns = INDUSTRY_PATTERNS


class RegionAnalyzer(_CollectingAnalyzer):
    name = "region"
    signal_name = "region"
    patterns = REGION_PATTERNS


class ComplianceAnalyzer(_CollectingAnalyzer):
    name = "compliance"
    signal_name = "compliance"
    patterns = COMPLIANCE_PATTERNS


class CurrencyAnalyzer(Analyzer):
    """Picks the first currency whose pattern matches; regional ones are tried first."""

    name = "currency"

    def analyze(self, idea: IdeaText) -> Iterable[Signal]:
        for pattern, code in CURRENCY_PATTERNS:
            if idea.contains(pattern):
                return [self._signal("currency", code)]
        return []


class LanguageAnalyzer(Analyzer):
    """Detects whether the site needs Arabic content.

    Either an explicit keyword (``arabic``, ``rtl``) or an idea written in
    Arabic script counts.
    """

    name = "language"

    def analyze(self, idea: IdeaText) -> Iterable[Signal]:
        signals: List[Signal] = []
        if idea.contains(ARABIC_KEYWORD_PATTERN):
            signals.append(self._signal("language.arabic", "true", reason="keyword"))
        elif idea.contains(ARABIC_SCRIPT_PATTERN):
            signals.append(self._signal("language.arabic", "true", reason="script"))
        return signals


class PaymentAnalyzer(Analyzer):
    name = "payment"

    def analyze(self, idea: IdeaText) -> Iterable[Signal]:
        match = PAYMENT_PATTERN.search(idea.lower)
        if match is None:
            return []
        return [self._signal("payment", "true", match=match.group(0))]


__all__ = [
    "ComplianceAnalyzer",
    "CurrencyAnalyzer",
    "IndustryAnalyzer",
    "LanguageAnalyzer",
    "PaymentAnalyzer",
    "RegionAnalyzer",
]
