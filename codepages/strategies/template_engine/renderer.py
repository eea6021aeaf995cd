"""Placeholder template renderer.

Replaces ``{{key}}`` tokens in a template with fragment text. Replacement
is literal and single pass per key: fragment values are inserted verbatim
and never expanded themselves.

Keys are processed in the fragment map's insertion order. A fragment value
that contains the token of a key processed later will have that token
replaced too; callers should not put placeholder-like text in fragments.
"""

import logging
import re

from codepages.interfaces.template import BaseTemplateRenderer, FragmentMap

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{[^{}\s]+\}\}")


def placeholder(name: str) -> str:
    """Return the placeholder token for a fragment name."""
    return "{{" + name + "}}"


def find_placeholders(document: str) -> list[str]:
    """List the distinct placeholder tokens present in a document, in order."""
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(document)))


def render(template: str, fragments: FragmentMap) -> str:
    """Substitute fragments into a template.

    Args:
        template: The template document.
        fragments: Placeholder token (braces included) to fragment text.

    Returns:
        The rendered document. Tokens without a fragment stay verbatim.
    """
    document = template
    for key, value in fragments.items():
        if not key:
            logger.warning("Ignoring fragment with an empty placeholder key")
            continue
        document = document.replace(key, value)
    return document


class PlaceholderRenderer(BaseTemplateRenderer):
    """Renderer for ``{{key}}`` templates using literal substitution."""

    def render(self, template: str, fragments: FragmentMap) -> str:
        """Substitute fragments into a template.

        Args:
            template: The template document. Never modified.
            fragments: Placeholder token to fragment text.

        Returns:
            The rendered document.
        """
        document = render(template, fragments)

        leftover = find_placeholders(document)
        if leftover:
            logger.warning(f"Unmatched placeholders left in page: {', '.join(leftover)}")

        return document
