"""Unit tests for document exporters."""

import io

import pytest
from docx import Document

from collab.strategies.template_engine import DocxExporter, TextExporter, get_exporter
from collab.strategies.template_engine.exporter import DOCX_MEDIA_TYPE, safe_basename


class TestTextExporter:
    """Test suite for plain-text export."""

    def test_export(self):
        document = TextExporter().export("Hello Ana\n", "greeting")

        assert document.content == b"Hello Ana\n"
        assert document.filename == "greeting.txt"
        assert document.media_type.startswith("text/plain")

    def test_utf8(self):
        """Test that non-ASCII names survive encoding."""
        document = TextExporter().export("São Paulo Ltda", "nda")
        assert document.content.decode("utf-8") == "São Paulo Ltda"


class TestDocxExporter:
    """Test suite for Word export."""

    def test_one_paragraph_per_line(self):
        """Test that each line becomes a paragraph and outer blank lines are dropped."""
        document = DocxExporter().export("\nTITLE\n\nClause one\nClause two\n", "nda")

        assert document.filename == "nda.docx"
        assert document.media_type == DOCX_MEDIA_TYPE

        parsed = Document(io.BytesIO(document.content))
        texts = [paragraph.text for paragraph in parsed.paragraphs]
        assert texts[-4:] == ["TITLE", "", "Clause one", "Clause two"]


class TestHelpers:
    """Test suite for exporter lookup and filenames."""

    def test_get_exporter_case_insensitive(self):
        assert isinstance(get_exporter("DOCX"), DocxExporter)
        assert isinstance(get_exporter("txt"), TextExporter)

    def test_get_exporter_unknown(self):
        with pytest.raises(KeyError):
            get_exporter("pdf")

    @pytest.mark.parametrize(
        ("parts", "expected"),
        [
            (("NDA", "Acme Skincare", "Ana Silva"), "NDA_Acme_Skincare_Ana_Silva"),
            (("NDA", 'Evil"; rm', "../x"), "NDA_Evil_rm_.._x"),
            (("", "  "), "document"),
        ],
    )
    def test_safe_basename(self, parts, expected):
        assert safe_basename(*parts) == expected
