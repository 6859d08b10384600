"""Template engine strategies.

Implements placeholder substitution, NDA generation, and document export.
"""

from collab.strategies.template_engine.engine import (
    PlaceholderTemplateEngine,
    placeholders,
    substitute,
)
from collab.strategies.template_engine.exporter import DocxExporter, TextExporter, get_exporter
from collab.strategies.template_engine.models import NDAData, NDAVariables
from collab.strategies.template_engine.nda import (
    NDAGenerator,
    format_long_date,
    generate_document_text,
    generate_nda,
)

__all__ = [
    "PlaceholderTemplateEngine",
    "placeholders",
    "substitute",
    "DocxExporter",
    "TextExporter",
    "get_exporter",
    "NDAData",
    "NDAVariables",
    "NDAGenerator",
    "format_long_date",
    "generate_document_text",
    "generate_nda",
]
