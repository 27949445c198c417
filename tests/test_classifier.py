"""Tests for idea classification and fallbacks."""

from __future__ import annotations

from ideaspec.analyzers import discover_analyzers
from ideaspec.classifier import Classifier
from ideaspec.defaults import SECTIONS_BY_TYPE
from ideaspec.utils import STATED_GOAL_LIMIT


def test_saas_idea_collects_requested_features(classifier: Classifier) -> None:
    vector = classifier.classify(
        "A SaaS landing page for time tracking. Pricing, FAQ, testimonials, blog."
    )

    assert vector.site_type == "saas"
    for feature in ("Pricing with clear plan comparison", "FAQ", "Testimonials", "Blog"):
        assert feature in vector.selected_features
    assert "Pricing" in vector.pages
    assert "Blog" in vector.pages
    assert vector.suggested_sections == SECTIONS_BY_TYPE["saas"]


def test_arabic_store_detects_market_and_payments(classifier: Classifier) -> None:
    vector = classifier.classify("متجر إلكتروني للأزياء في مصر مع سلة وشراء ودفع")

    assert vector.site_type == "ecommerce"
    assert "Egypt" in vector.regions
    assert vector.currency == "EGP"
    assert vector.requires_payments is True
    assert vector.languages == ("Arabic", "English")
    assert "Online shoppers" in vector.audience


def test_empty_idea_uses_fallbacks(classifier: Classifier) -> None:
    vector = classifier.classify("")

    assert vector.site_type == "generic"
    assert vector.site_type_label == "Landing page"
    assert vector.audience == ("Prospective customers and early adopters",)
    assert vector.tone == ("friendly", "confident", "concise")
    assert vector.industries == ("General",)
    assert vector.regions == ("Global",)
    assert vector.languages == ("English",)
    assert vector.currency == "USD"
    assert vector.stated_goal == ""
    assert vector.detected_features == ()
    assert vector.requires_payments is False
    assert vector.project_mode is False
    assert vector.detection.idea_length == 0
    assert vector.pages and len(vector.sitemap) == len(vector.pages)
    assert vector.detection.word_count == 0


def test_none_is_treated_as_empty(classifier: Classifier) -> None:
    assert classifier.classify(None) == classifier.classify("   ")


def test_project_words_enable_project_mode(classifier: Classifier) -> None:
    vector = classifier.classify("Project scope: mvp, milestones and requirements.")

    assert vector.project_mode is True
    assert vector.site_type == "generic"


def test_site_type_precedence_follows_category_order(classifier: Classifier) -> None:
    assert classifier.classify("An online store with a blog and newsletter").site_type == "ecommerce"
    assert classifier.classify("A subscription store for coffee beans").site_type == "saas"


def test_stated_goal_is_collapsed_and_truncated(classifier: Classifier) -> None:
    vector = classifier.classify("  A   cosy\ncafe  ")
    assert vector.stated_goal == "A cosy cafe"
    assert vector.detection.word_count == 3

    long_vector = classifier.classify("idea " * 200)
    assert len(long_vector.stated_goal) == STATED_GOAL_LIMIT


def test_classified_vector_defaults_to_english_output(classifier: Classifier) -> None:
    assert classifier.classify("متجر").output_lang == "en"


def test_detected_features_only_reflect_text(classifier: Classifier) -> None:
    vector = classifier.classify("A bakery site with a contact form")

    assert vector.detected_features == ("Contact form",)
    assert vector.selected_features[: len(vector.default_features)] == vector.default_features
    assert vector.selected_features[-1] == "Contact form"


def test_classifier_accepts_custom_analyzers() -> None:
    classifier = Classifier(discover_analyzers(["site_type"]))
    vector = classifier.classify("A photography portfolio for designers")

    assert vector.site_type == "portfolio"
    assert vector.audience == ("Prospective customers and early adopters",)


def test_classification_is_deterministic(classifier: Classifier) -> None:
    text = "A restaurant site in Dubai with reservations and a menu"
    assert classifier.classify(text) == classifier.classify(text)
