"""Tests for overlaying hints onto classified feature vectors."""

from __future__ import annotations

from ideaspec import defaults
from ideaspec.classifier import Classifier
from ideaspec.hints import Hints
from ideaspec.merger import HintMerger


def test_site_type_hint_overrides_detection(classifier: Classifier) -> None:
    base = classifier.classify("Project scope: mvp, milestones and requirements.")
    merged = HintMerger().merge(base, Hints.from_mapping({"siteType": "booking"}))

    assert merged.site_type == "booking"
    assert merged.project_mode is True
    assert merged.suggested_sections == defaults.SECTIONS_BY_TYPE["booking"]
    assert merged.pages[: len(defaults.PAGES_BY_TYPE["booking"])] == defaults.PAGES_BY_TYPE["booking"]
    assert defaults.QUESTIONS_BY_TYPE["booking"][0] in merged.clarifying_questions


def test_invalid_site_type_hint_is_ignored(classifier: Classifier) -> None:
    base = classifier.classify("A shop for handmade soap")
    merged = HintMerger().merge(base, Hints.from_mapping({"siteType": "spaceship"}))

    assert merged.site_type == "ecommerce"


def test_site_type_hint_is_case_insensitive(classifier: Classifier) -> None:
    base = classifier.classify("")
    merged = HintMerger().merge(base, Hints.from_mapping({"siteType": " Blog "}))

    assert merged.site_type == "blog"


def test_list_hints_append_without_duplicates(classifier: Classifier) -> None:
    base = classifier.classify("A portfolio for photographers")
    hints = Hints.from_mapping(
        {
            "audience": ["Photographers", "Art directors"],
            "tone": ["minimal", "friendly"],
            "pages": ["Work", "Press"],
            "kpis": ["Portfolio views"],
        }
    )
    merged = HintMerger().merge(base, hints)

    assert merged.audience == ("Photographers", "Art directors")
    assert merged.tone == ("friendly", "confident", "concise", "minimal")
    assert merged.pages.count("Work") == 1
    assert merged.pages[-1] == "Press"
    assert merged.sitemap[-1].path == "/press"
    assert merged.kpis[-1] == "Portfolio views"


def test_currency_and_payment_hints_replace_detection(classifier: Classifier) -> None:
    base = classifier.classify("A shop with a cart and checkout")
    assert base.requires_payments is True

    merged = HintMerger().merge(
        base, Hints.from_mapping({"currency": "AED", "requiresPayments": False})
    )

    assert merged.currency == "AED"
    assert merged.requires_payments is False
    assert "Billing" not in merged.pages
    assert defaults.TECH_PAYMENTS not in merged.tech_suggestions
    assert defaults.QUESTION_PAYMENTS not in merged.clarifying_questions


def test_hinted_checkout_feature_enables_payment_pages(classifier: Classifier) -> None:
    base = classifier.classify("A landing page for a bakery")
    merged = HintMerger().merge(base, Hints.from_mapping({"features": ["E-commerce checkout"]}))

    assert merged.requires_payments is True
    assert merged.pages[-2:] == ("Billing", "Checkout")
    assert "E-commerce checkout" in merged.selected_features
    assert merged.detected_features == ()


def test_hinted_arabic_language_adds_rtl_requirements(classifier: Classifier) -> None:
    base = classifier.classify("A site for a yoga studio")
    merged = HintMerger().merge(base, Hints.from_mapping({"languages": ["Arabic"]}))

    assert merged.languages == ("English", "Arabic")
    assert defaults.TECH_ARABIC in merged.tech_suggestions
    assert defaults.NON_FUNCTIONAL_ARABIC in merged.non_functional
    assert defaults.QUESTION_ARABIC in merged.clarifying_questions


def test_project_mode_hint_can_disable_detection(classifier: Classifier) -> None:
    base = classifier.classify("Project brief for a bakery")
    merged = HintMerger().merge(base, Hints.from_mapping({"projectMode": False}))

    assert base.project_mode is True
    assert merged.project_mode is False


def test_output_lang_hint_requires_known_language(classifier: Classifier) -> None:
    base = classifier.classify("")
    merger = HintMerger()

    assert merger.merge(base, Hints.from_mapping({"outputLang": "ar"})).output_lang == "ar"
    assert merger.merge(base, Hints.from_mapping({"outputLang": "fr"})).output_lang == "en"


def test_unknown_keys_are_kept_aside(classifier: Classifier) -> None:
    hints = Hints.from_mapping({"brandColor": "teal", "siteType": "event"})
    merged = HintMerger().merge(classifier.classify(""), hints)

    assert hints.extra == {"brandColor": "teal"}
    assert merged.site_type == "event"
    assert "brandColor" not in merged.to_dict()


def test_merge_leaves_original_vector_untouched(classifier: Classifier) -> None:
    base = classifier.classify("A shop for handmade soap")
    snapshot = base.to_dict()

    HintMerger().merge(base, Hints.from_mapping({"siteType": "blog", "audience": ["Makers"]}))

    assert base.to_dict() == snapshot


def test_merge_without_hints_returns_same_vector(classifier: Classifier) -> None:
    base = classifier.classify("A shop for handmade soap")
    assert HintMerger().merge(base, None) is base
    assert HintMerger().merge(base, Hints()) == base


def test_compliance_adds_legal_question(classifier: Classifier) -> None:
    merged = HintMerger().merge(
        classifier.classify("A clinic website"), Hints.from_mapping({"compliance": ["HIPAA"]})
    )

    assert merged.compliance == ("HIPAA",)
    assert merged.clarifying_questions[-1] == defaults.QUESTION_COMPLIANCE


def test_hints_accept_snake_case_and_coerce_values() -> None:
    hints = Hints.from_mapping(
        {"site_type": "saas", "requires_payments": "yes", "features": "FAQ", "tone": None}
    )

    assert hints.site_type == "saas"
    assert hints.requires_payments is True
    assert hints.features == ("FAQ",)
    assert hints.tone == ()
    assert hints.to_dict() == {"features": ["FAQ"], "siteType": "saas", "requiresPayments": True}
