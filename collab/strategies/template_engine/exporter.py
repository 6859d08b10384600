"""Document exporters.

Package generated document text as a plain-text or Word download.
"""

import io
import logging
import re

from docx import Document

from collab.interfaces.template import BaseDocumentExporter, ExportedDocument

logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_basename(*parts: str) -> str:
    """Join parts into a filename stem safe for Content-Disposition."""
    joined = "_".join(part.strip() for part in parts if part and part.strip())
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", joined).strip("_.")
    return cleaned or "document"


class TextExporter(BaseDocumentExporter):
    """Exports document text as UTF-8 plain text."""

    def export(self, text: str, basename: str) -> ExportedDocument:
        return ExportedDocument(
            content=text.encode("utf-8"),
            media_type="text/plain; charset=utf-8",
            filename=f"{basename}{self.extension}",
        )

    @property
    def extension(self) -> str:
        return ".txt"


class DocxExporter(BaseDocumentExporter):
    """Exports document text as a Word document.

    Uses python-docx. Each line of the text becomes one paragraph so that
    numbered clauses and signature blocks keep their layout.
    """

    def export(self, text: str, basename: str) -> ExportedDocument:
        doc = Document()
        lines = text.strip("\n").splitlines()

        for line in lines:
            doc.add_paragraph(line)

        buffer = io.BytesIO()
        doc.save(buffer)

        logger.debug(f"Exported {len(lines)} paragraphs to {basename}{self.extension}")

        return ExportedDocument(
            content=buffer.getvalue(),
            media_type=DOCX_MEDIA_TYPE,
            filename=f"{basename}{self.extension}",
        )

    @property
    def extension(self) -> str:
        return ".docx"


EXPORTERS: dict[str, BaseDocumentExporter] = {
    "txt": TextExporter(),
    "docx": DocxExporter(),
}


def get_exporter(export_format: str) -> BaseDocumentExporter:
    """Look up an exporter by format name.

    Raises:
        KeyError: If the format is not supported.
    """
    return EXPORTERS[export_format.lower()]
