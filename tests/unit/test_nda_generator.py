"""Unit tests for NDA generation."""

import datetime
import logging

import pytest

from collab.strategies.template_engine import (
    NDAData,
    NDAGenerator,
    format_long_date,
    generate_document_text,
    generate_nda,
    placeholders,
)
from collab.strategies.template_engine.templates import NDA_TEMPLATE


@pytest.fixture
def data() -> NDAData:
    return NDAData(brand_name="Acme Skincare", creator_name="Ana Silva", term="2 years")


class TestFormatLongDate:
    """Test suite for the 'Month Day, Year' format."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (datetime.date(2024, 3, 5), "March 5, 2024"),
            (datetime.date(2023, 12, 31), "December 31, 2023"),
            (datetime.date(2025, 1, 1), "January 1, 2025"),
        ],
    )
    def test_format(self, value, expected):
        assert format_long_date(value) == expected


class TestGenerateNDA:
    """Test suite for generate_nda()."""

    def test_contains_names_term_and_date(self, data):
        """Test that every supplied value appears in the output."""
        text = generate_nda(data, today=datetime.date(2024, 3, 5))

        assert "Acme Skincare" in text
        assert "Ana Silva" in text
        assert "a period of 2 years from the date" in text
        assert "entered into on March 5, 2024 between" in text

    def test_defaults_to_current_date(self, data):
        """Test that the date is today's when none is given."""
        text = generate_nda(data)
        assert format_long_date(datetime.date.today()) in text

    def test_no_placeholders_left(self, data):
        """Test that the built-in template is fully filled."""
        text = generate_nda(data, today=datetime.date(2024, 3, 5))
        assert placeholders(text) == []
        assert "{{" not in text

    def test_names_repeated_in_signature_block(self, data):
        """Test that both names appear in the preamble and the signature block."""
        text = generate_nda(data, today=datetime.date(2024, 3, 5))
        assert text.count("Acme Skincare") == 2
        assert text.count("Ana Silva") == 2

    def test_template_uses_expected_placeholders(self):
        """Test the built-in template's placeholder set."""
        assert set(placeholders(NDA_TEMPLATE)) == {"date", "brand_name", "creator_name", "term"}

    def test_accepts_camel_case_input(self):
        """Test that request-style keys populate the model."""
        data = NDAData.model_validate({"brandName": "B", "creatorName": "C", "term": "1 year"})
        assert (data.brand_name, data.creator_name, data.term) == ("B", "C", "1 year")


class TestNDAGenerator:
    """Test suite for NDAGenerator with custom templates."""

    def test_custom_template(self, data):
        """Test rendering a caller-supplied template."""
        generator = NDAGenerator(template="{{brand_name}} x {{creator_name}} on {{date}}")
        text = generator.generate(data, today=datetime.date(2024, 7, 4))
        assert text == "Acme Skincare x Ana Silva on July 4, 2024"

    def test_build_variables(self, data):
        """Test the variable mapping has exactly four entries."""
        variables = NDAGenerator().build_variables(data, today=datetime.date(2024, 3, 5))
        assert variables.model_dump() == {
            "brand_name": "Acme Skincare",
            "creator_name": "Ana Silva",
            "term": "2 years",
            "date": "March 5, 2024",
        }

    def test_generate_document_text_logs_unfilled(self, caplog):
        """Test that missing values are left in place and reported."""
        with caplog.at_level(logging.WARNING, logger="collab.strategies.template_engine.nda"):
            text = generate_document_text("{{term}} / {{unknown}}", {"term": "1 year"})

        assert text == "1 year / {{unknown}}"
        assert "unknown" in caplog.text
