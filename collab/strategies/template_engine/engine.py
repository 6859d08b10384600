"""Placeholder template engine.

Replaces ``{{name}}`` tokens with values from a mapping in a single pass.
"""

import re
from collections.abc import Mapping

from collab.interfaces.template import BaseTemplateEngine

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class PlaceholderTemplateEngine(BaseTemplateEngine):
    """Substitutes ``{{name}}`` placeholders.

    Unknown names are left in the output verbatim. Substituted values are
    never re-scanned, so a value that itself looks like a token stays literal.
    """

    def __init__(self, pattern: re.Pattern[str] = PLACEHOLDER_PATTERN) -> None:
        self.pattern = pattern

    def render(self, template: str, variables: Mapping[str, str]) -> str:
        if not template or not variables:
            return template

        def replace(match: re.Match[str]) -> str:
            return variables.get(match.group(1), match.group(0))

        return self.pattern.sub(replace, template)

    def placeholders(self, template: str) -> list[str]:
        # dict preserves first-appearance order
        return list(dict.fromkeys(self.pattern.findall(template)))


_default_engine = PlaceholderTemplateEngine()


def substitute(template: str, variables: Mapping[str, str]) -> str:
    """Render ``template`` with the default placeholder engine."""
    return _default_engine.render(template, variables)


def placeholders(template: str) -> list[str]:
    """List the distinct placeholder names in ``template``."""
    return _default_engine.placeholders(template)
