"""Signal-level tests for the built-in analyzers."""

from __future__ import annotations

from ideaspec.analyzers import IdeaText
from ideaspec.analyzers.audience import AudienceAnalyzer
from ideaspec.analyzers.features import FeatureAnalyzer
from ideaspec.analyzers.intent import ProjectModeAnalyzer, SiteTypeAnalyzer
from ideaspec.analyzers.market import (
    ComplianceAnalyzer,
    CurrencyAnalyzer,
    IndustryAnalyzer,
    LanguageAnalyzer,
    PaymentAnalyzer,
    RegionAnalyzer,
)
from ideaspec.analyzers.tone import ToneAnalyzer


def _values(analyzer, text: str) -> list[str]:
    return [signal.value for signal in analyzer.analyze(IdeaText.from_raw(text))]


def test_audience_keywords_map_to_canonical_labels() -> None:
    values = _values(AudienceAnalyzer(), "A portfolio for designers and مطورين")
    assert "Designers" in values


def test_audience_arabic_keyword_uses_english_label() -> None:
    values = _values(AudienceAnalyzer(), "موقع لطلاب الجامعة")
    assert values == ["Students"]


def test_site_type_emits_single_first_match() -> None:
    signals = list(SiteTypeAnalyzer().analyze(IdeaText.from_raw("A shop with a blog")))
    assert [signal.value for signal in signals] == ["ecommerce"]
    assert signals[0].source == "site_type"


def test_site_type_emits_nothing_without_keywords() -> None:
    assert _values(SiteTypeAnalyzer(), "Something nice for my neighbours") == []


def test_project_mode_detects_planning_words() -> None:
    assert _values(ProjectModeAnalyzer(), "MVP scope and milestones") == ["true"]
    assert _values(ProjectModeAnalyzer(), "A cosy cafe") == []


def test_tone_collects_every_match() -> None:
    assert _values(ToneAnalyzer(), "Playful but premium, with a bold hero") == [
        "playful",
        "premium",
        "bold",
    ]


def test_features_collect_all_matches_in_table_order() -> None:
    values = _values(FeatureAnalyzer(), "Blog, FAQ and pricing tiers")
    assert values == ["Pricing with clear plan comparison", "FAQ", "Blog"]


def test_industry_and_region_collect_matches() -> None:
    text = "A clinic booking site in Cairo"
    assert "Healthcare" in _values(IndustryAnalyzer(), text)
    assert _values(RegionAnalyzer(), text) == ["Egypt"]


def test_currency_prefers_regional_codes() -> None:
    assert _values(CurrencyAnalyzer(), "Prices in dollars and riyals for Saudi buyers") == ["SAR"]
    assert _values(CurrencyAnalyzer(), "A quiet garden") == []


def test_language_detects_keyword_or_script() -> None:
    keyword = list(LanguageAnalyzer().analyze(IdeaText.from_raw("Site in Arabic and English")))
    script = list(LanguageAnalyzer().analyze(IdeaText.from_raw("موقع شخصي")))

    assert keyword[0].metadata == {"reason": "keyword"}
    assert script[0].metadata == {"reason": "script"}
    assert _values(LanguageAnalyzer(), "A site in English") == []


def test_payment_records_matched_keyword() -> None:
    signals = list(PaymentAnalyzer().analyze(IdeaText.from_raw("Take payments with Paymob")))
    assert len(signals) == 1
    assert signals[0].metadata["match"] == "payment"


def test_compliance_collects_frameworks() -> None:
    assert _values(ComplianceAnalyzer(), "Must be GDPR and SOC2 ready") == ["GDPR", "SOC 2"]
