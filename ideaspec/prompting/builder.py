"""Renders feature vectors into the improved prompt and the project blueprint."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import FeatureVector
from .catalog import Catalog

_DOCUMENT_TEMPLATE = "document.j2"


@dataclass
class Section:
    """A heading followed by its body lines."""

    name: str
    title: str
    lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RenderedDocuments:
    improved: str
    blueprint: Optional[str]


class DocumentBuilder:
    """Assembles localized sections and renders them through a Jinja template.

    Rendering is a pure function of the vector: no I/O besides loading the
    template, no clock, no randomness.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def build(self, vector: FeatureVector) -> RenderedDocuments:
        return RenderedDocuments(
            improved=self.render_improved(vector),
            blueprint=self.render_blueprint(vector),
        )

    def render_improved(self, vector: FeatureVector) -> str:
        catalog = Catalog(vector.output_lang)
        return self._render(None, self.improved_sections(vector, catalog))

    def render_blueprint(self, vector: FeatureVector) -> Optional[str]:
        if not vector.project_mode:
            return None
        catalog = Catalog(vector.output_lang)
        return self._render(
            catalog.text("heading.blueprint"),
            self.blueprint_sections(vector, catalog),
        )

    def improved_sections(self, vector: FeatureVector, catalog: Catalog) -> List[Section]:
        audience = catalog.labels("audience", vector.audience)
        tone = catalog.labels("tone", vector.tone)
        site_type = catalog.label(
            "site_type", vector.site_type, english=vector.site_type_label
        )
        overview = catalog.text(
            "overview.line", site_type=site_type, audience=", ".join(audience)
        )

        sections = [
            Section("overview", catalog.text("heading.overview"), [overview]),
            Section("audience", catalog.text("heading.audience"), _bullets(audience)),
            Section("goals", catalog.text("heading.goals"), _bullets(catalog.bullets("goals"))),
            Section("tone", catalog.text("heading.tone"), [f"- {', '.join(tone)}"]),
            Section(
                "structure",
                catalog.text("heading.structure"),
                _bullets(catalog.labels("section", vector.suggested_sections)),
            ),
            Section("features", catalog.text("heading.features"), _bullets(vector.selected_features)),
            Section("content", catalog.text("heading.content"), _bullets(catalog.bullets("content"))),
            Section("visual", catalog.text("heading.visual"), _bullets(catalog.bullets("visual"))),
        ]
        if vector.stated_goal:
            sections.append(
                Section("notes", catalog.text("heading.notes"), [f"- {vector.stated_goal}"])
            )
        return sections

    def blueprint_sections(self, vector: FeatureVector, catalog: Catalog) -> List[Section]:
        scope = [
            catalog.text("scope.industry", value=", ".join(vector.industries)),
            catalog.text("scope.regions", value=", ".join(vector.regions)),
            catalog.text("scope.languages", value=", ".join(vector.languages)),
            catalog.text("scope.currency", value=vector.currency),
        ]
        sitemap = [f"{entry.name} ({entry.path})" for entry in vector.sitemap]
        return [
            Section("scope", catalog.text("heading.scope"), _bullets(scope)),
            Section("sitemap", catalog.text("heading.sitemap"), _bullets(sitemap)),
            Section("user_stories", catalog.text("heading.user_stories"), _bullets(vector.user_stories)),
            Section(
                "non_functional",
                catalog.text("heading.non_functional"),
                _bullets(vector.non_functional),
            ),
            Section("kpis", catalog.text("heading.kpis"), _bullets(vector.kpis)),
            Section("tech", catalog.text("heading.tech"), _bullets(vector.tech_suggestions)),
            Section("checklist", catalog.text("heading.checklist"), _bullets(vector.content_checklist)),
            Section("milestones", catalog.text("heading.milestones"), _bullets(vector.milestones)),
            Section("questions", catalog.text("heading.questions"), _bullets(vector.clarifying_questions)),
        ]

    def _render(self, title: Optional[str], sections: Sequence[Section]) -> str:
        template = self._env.get_template(_DOCUMENT_TEMPLATE)
        rendered = template.render(
            title=title,
            sections=[{"name": s.name, "title": s.title, "lines": s.lines} for s in sections],
        )
        return rendered.rstrip("\n")

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


def _bullets(items: Sequence[str]) -> List[str]:
    return [f"- {item}" for item in items]


__all__ = ["DocumentBuilder", "RenderedDocuments", "Section"]
