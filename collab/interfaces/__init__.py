"""Abstract interfaces for pluggable strategies."""

from collab.interfaces.template import BaseDocumentExporter, BaseTemplateEngine, ExportedDocument

__all__ = [
    "BaseDocumentExporter",
    "BaseTemplateEngine",
    "ExportedDocument",
]
