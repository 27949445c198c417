"""Builds feature vectors from classifier detections and caller hints."""

from __future__ import annotations

from typing import List, Optional

from . import defaults
from .analyzers.vocabulary import BLOG_FEATURE, CHECKOUT_FEATURE
from .hints import Hints
from .models import (
    DEFAULT_OUTPUT_LANG,
    OUTPUT_LANGS,
    SITE_TYPES,
    Detection,
    FeatureVector,
    SitemapEntry,
    unique,
)
from .utils import slugify


class HintMerger:
    """Overlays hints onto a classified vector.

    Valid scalar hints replace the classified value; list hints are appended
    to the classified sets with duplicates skipped. Out-of-range enumeration
    values and unknown keys are ignored rather than rejected.
    """

    def merge(self, vector: FeatureVector, hints: Hints | None) -> FeatureVector:
        if hints is None:
            return vector
        return build_feature_vector(vector.detection, hints)


def build_feature_vector(detection: Detection, hints: Optional[Hints] = None) -> FeatureVector:
    """Derive a complete vector from ``detection``, applying ``hints`` if given.

    Derived fields (pages, stories, questions, ...) depend on the merged
    scalars, so they are recomputed here rather than patched onto an
    existing vector.
    """
    hints = hints or Hints()

    site_type = detection.site_type
    if hints.site_type is not None:
        candidate = hints.site_type.strip().lower()
        if candidate in SITE_TYPES:
            site_type = candidate

    output_lang = DEFAULT_OUTPUT_LANG
    if hints.output_lang is not None and hints.output_lang in OUTPUT_LANGS:
        output_lang = hints.output_lang

    project_mode = detection.project_mode
    if hints.project_mode is not None:
        project_mode = hints.project_mode

    currency = detection.currency
    if hints.currency:
        currency = hints.currency

    feature_pool = unique(detection.features + hints.features)
    requires_payments = CHECKOUT_FEATURE in feature_pool or detection.payment_keywords
    if hints.requires_payments is not None:
        requires_payments = hints.requires_payments

    audience = unique(detection.audience + hints.audience)
    tone = unique(detection.tone + hints.tone)
    industries = unique(detection.industries + hints.industries)
    regions = unique(detection.regions + hints.regions)
    base_languages = ("Arabic", "English") if detection.uses_arabic else ("English",)
    languages = unique(base_languages + hints.languages)
    uses_arabic = "Arabic" in languages
    compliance = unique(detection.compliance + hints.compliance)

    default_features = defaults.DEFAULT_FEATURES_BY_TYPE[site_type]
    selected_features = unique(default_features + feature_pool)

    pages: List[str] = list(defaults.PAGES_BY_TYPE[site_type])
    if BLOG_FEATURE in feature_pool:
        pages.append(defaults.BLOG_PAGE)
    if requires_payments:
        pages.extend(defaults.PAYMENT_PAGES)
    page_names = unique(tuple(pages) + hints.pages)
    sitemap = tuple(SitemapEntry(name=name, path=slugify(name)) for name in page_names)

    user_stories = unique(
        defaults.USER_STORIES_BASE + defaults.USER_STORIES_BY_TYPE[site_type] + hints.user_stories
    )

    tech: List[str] = list(defaults.TECH_BASELINE)
    if requires_payments:
        tech.append(defaults.TECH_PAYMENTS)
    if uses_arabic:
        tech.append(defaults.TECH_ARABIC)
    if BLOG_FEATURE in feature_pool:
        tech.append(defaults.TECH_BLOG)
    tech_suggestions = unique(tuple(tech) + hints.tech)

    non_functional = defaults.NON_FUNCTIONAL_BASE
    if uses_arabic:
        non_functional = non_functional + (defaults.NON_FUNCTIONAL_ARABIC,)

    questions: List[str] = list(defaults.CLARIFYING_QUESTIONS_BASE)
    if requires_payments:
        questions.append(defaults.QUESTION_PAYMENTS)
    if uses_arabic:
        questions.append(defaults.QUESTION_ARABIC)
    questions.extend(defaults.QUESTIONS_BY_TYPE.get(site_type, ()))
    if compliance:
        questions.append(defaults.QUESTION_COMPLIANCE)

    return FeatureVector(
        detection=detection,
        site_type=site_type,
        site_type_label=defaults.SITE_TYPE_LABELS[site_type],
        audience=audience,
        tone=tone,
        suggested_sections=defaults.SECTIONS_BY_TYPE[site_type],
        default_features=default_features,
        detected_features=detection.features,
        selected_features=selected_features,
        industries=industries,
        regions=regions,
        languages=languages,
        currency=currency,
        requires_payments=requires_payments,
        compliance=compliance,
        pages=page_names,
        sitemap=sitemap,
        user_stories=user_stories,
        tech_suggestions=tech_suggestions,
        non_functional=non_functional,
        kpis=unique(defaults.KPIS_BY_TYPE[site_type] + hints.kpis),
        content_checklist=unique(defaults.CONTENT_CHECKLIST + hints.content_checklist),
        milestones=unique(defaults.MILESTONES + hints.milestones),
        personas=unique(defaults.PERSONAS + hints.personas),
        clarifying_questions=unique(tuple(questions)),
        project_mode=project_mode,
        output_lang=output_lang,
    )


__all__ = ["HintMerger", "build_feature_vector"]
