"""Template rendering and document export interfaces.

Defines abstract base classes for turning templates into generated
documents and for packaging those documents as downloads.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class ExportedDocument:
    """A generated document ready to be sent to a client.

    Attributes:
        content: Encoded file body.
        media_type: MIME type of ``content``.
        filename: Suggested download filename.
    """

    content: bytes
    media_type: str
    filename: str


class BaseTemplateEngine(ABC):
    """Abstract base class for placeholder substitution strategies."""

    @abstractmethod
    def render(self, template: str, variables: Mapping[str, str]) -> str:
        """Substitute placeholders in a template.

        Args:
            template: Template text containing placeholder tokens.
            variables: Placeholder name to replacement value.

        Returns:
            The rendered text. Tokens whose name is not in ``variables``
            are left as they are.
        """

    @abstractmethod
    def placeholders(self, template: str) -> list[str]:
        """Return the distinct placeholder names used by a template."""


class BaseDocumentExporter(ABC):
    """Abstract base class for document export formats."""

    @abstractmethod
    def export(self, text: str, basename: str) -> ExportedDocument:
        """Package document text for download.

        Args:
            text: The generated document text.
            basename: Filename without extension.

        Returns:
            The encoded document.
        """

    @property
    @abstractmethod
    def extension(self) -> str:
        """Return the file extension produced, including the dot."""
