"""Tests for analyzer discovery utilities."""

from __future__ import annotations

import pytest

from ideaspec.analyzers import Analyzer, IdeaText, discover_analyzers
from ideaspec.analyzers.features import FeatureAnalyzer
from ideaspec.analyzers.intent import SiteTypeAnalyzer


def test_discover_analyzers_returns_builtin_analyzers() -> None:
    analyzers = discover_analyzers()
    names = [analyzer.name for analyzer in analyzers]
    assert "site_type" in names
    assert "features" in names
    assert len(names) == len(set(names))
    assert all(isinstance(analyzer, Analyzer) for analyzer in analyzers)


def test_discover_analyzers_respects_enabled_filter() -> None:
    analyzers = discover_analyzers(["Features", "site_type"])
    assert {type(analyzer) for analyzer in analyzers} == {FeatureAnalyzer, SiteTypeAnalyzer}


def test_discover_analyzers_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="sentiment"):
        discover_analyzers(["sentiment"])


def test_analyzers_skip_empty_ideas() -> None:
    idea = IdeaText.from_raw("   ")
    assert idea.is_empty
    assert not any(analyzer.supports(idea) for analyzer in discover_analyzers())


def test_idea_text_normalizes_whitespace() -> None:
    idea = IdeaText.from_raw("  A shop\n\n for   plants  ")
    assert idea.raw == "A shop\n\n for   plants"
    assert idea.lower == "a shop\n\n for   plants"
    assert idea.collapsed == "A shop for plants"
    assert idea.word_count == 4
