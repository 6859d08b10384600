"""Strategy implementations for document generation."""

from collab.strategies.template_engine import (
    NDAGenerator,
    PlaceholderTemplateEngine,
    generate_nda,
    substitute,
)

__all__ = [
    "NDAGenerator",
    "PlaceholderTemplateEngine",
    "generate_nda",
    "substitute",
]
