"""Tests for the engine facade."""

from __future__ import annotations

from ideaspec.engine import Engine
from ideaspec.hints import Hints

ARABIC_IDEA = "متجر إلكتروني للأزياء في مصر مع سلة وشراء ودفع"


def test_improve_returns_documents_and_details(engine: Engine) -> None:
    result = engine.improve("A portfolio for photographers with a contact form")

    assert result.improved.startswith("Project overview")
    assert result.blueprint is None
    assert result.processing_ms >= 0
    assert result.details.site_type == "portfolio"


def test_response_shape_without_details(engine: Engine) -> None:
    response = engine.improve("A cosy cafe").to_response()

    assert set(response) == {"improved", "meta"}
    assert set(response["meta"]) == {"processingMs"}


def test_response_details_include_blueprint_and_language(engine: Engine) -> None:
    response = engine.improve(
        "Project scope: mvp, milestones and requirements.", {"siteType": "booking"}
    ).to_response(include_details=True)

    details = response["details"]
    assert details["siteType"] == "booking"
    assert details["projectMode"] is True
    assert details["outputLang"] == "en"
    assert details["blueprint"].startswith("Project blueprint")
    assert details["sitemap"][0] == {"name": "Home", "path": "/home"}


def test_details_omit_blueprint_outside_project_mode(engine: Engine) -> None:
    details = engine.improve("A cosy cafe").details_dict()
    assert "blueprint" not in details


def test_output_lang_keyword_overrides_hint(engine: Engine) -> None:
    result = engine.improve(ARABIC_IDEA, Hints(output_lang="en"), output_lang="ar")

    assert result.details.output_lang == "ar"
    assert result.improved.startswith("نظرة عامة على المشروع")
    assert result.details.currency == "EGP"
    assert result.details.requires_payments is True


def test_improve_is_deterministic_apart_from_timing(engine: Engine) -> None:
    first = engine.improve(ARABIC_IDEA, {"outputLang": "ar", "projectMode": True})
    second = engine.improve(ARABIC_IDEA, {"outputLang": "ar", "projectMode": True})

    assert first.improved == second.improved
    assert first.blueprint == second.blueprint
    assert first.details_dict() == second.details_dict()


def test_analyze_accepts_mapping_hints(engine: Engine) -> None:
    vector = engine.analyze("", {"audience": ["Gardeners"], "unknownKey": 1})

    assert vector.audience == ("Prospective customers and early adopters", "Gardeners")
