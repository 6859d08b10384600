"""NDA document generator.

Builds the variable mapping for an NDA and renders the built-in template.
"""

import datetime
import logging
from collections.abc import Mapping

from collab.interfaces.template import BaseTemplateEngine
from collab.strategies.template_engine.engine import PlaceholderTemplateEngine
from collab.strategies.template_engine.models import NDAData, NDAVariables
from collab.strategies.template_engine.templates import NDA_TEMPLATE

logger = logging.getLogger(__name__)

# Fixed English names so the date does not depend on the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_long_date(value: datetime.date) -> str:
    """Format a date as 'Month Day, Year', e.g. 'March 5, 2024'."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


class NDAGenerator:
    """Generates NDA text from brand, creator, and term.

    Args:
        engine: Template engine used for substitution.
        template: Template text; defaults to the built-in NDA.
    """

    def __init__(
        self,
        engine: BaseTemplateEngine | None = None,
        template: str = NDA_TEMPLATE,
    ) -> None:
        self.engine = engine or PlaceholderTemplateEngine()
        self.template = template

    def build_variables(self, data: NDAData, today: datetime.date | None = None) -> NDAVariables:
        today = today or datetime.date.today()
        return NDAVariables(
            brand_name=data.brand_name,
            creator_name=data.creator_name,
            term=data.term,
            date=format_long_date(today),
        )

    def generate(self, data: NDAData, today: datetime.date | None = None) -> str:
        """Render the NDA for ``data`` dated ``today`` (default: the current date)."""
        variables = self.build_variables(data, today)
        return self.render(self.template, variables.model_dump())

    def render(self, template: str, variables: Mapping[str, str]) -> str:
        """Render an arbitrary template, logging any placeholder left unfilled."""
        missing = [name for name in self.engine.placeholders(template) if name not in variables]
        if missing:
            logger.warning(f"Template placeholders without values: {', '.join(missing)}")

        return self.engine.render(template, variables)


_default_generator = NDAGenerator()


def generate_nda(data: NDAData, today: datetime.date | None = None) -> str:
    """Generate NDA text with the built-in template."""
    return _default_generator.generate(data, today)


def generate_document_text(template: str, variables: Mapping[str, str]) -> str:
    """Render a caller-supplied template with the NDA generator's engine."""
    return _default_generator.render(template, variables)
