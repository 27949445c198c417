"""Document rendering for improved prompts and project blueprints."""

from .builder import DocumentBuilder, RenderedDocuments, Section
from .catalog import Catalog

__all__ = ["Catalog", "DocumentBuilder", "RenderedDocuments", "Section"]
