"""Template rendering interfaces.

A template is plain text holding ``{{key}}`` placeholder tokens; a
fragment map supplies the text each token is replaced with.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

# Placeholder token (braces included) -> fragment text.
FragmentMap = Mapping[str, str]


class BaseTemplateRenderer(ABC):
    """Abstract base class for template rendering strategies."""

    @abstractmethod
    def render(self, template: str, fragments: FragmentMap) -> str:
        """Substitute fragments into a template.

        Args:
            template: The template document. Never modified.
            fragments: Placeholder token to fragment text.

        Returns:
            The rendered document. Tokens without a fragment are left as is.
        """
        ...
