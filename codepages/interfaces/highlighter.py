"""Abstract base class for syntax highlighters.

The highlighter is treated as a black box: raw source text in,
class-annotated HTML out.
"""

from abc import ABC, abstractmethod


class HighlightError(Exception):
    """Exception raised when source text cannot be highlighted."""

    pass


class BaseHighlighter(ABC):
    """Abstract base class for highlighting strategies.

    Example:
        ```python
        class PygmentsHighlighter(BaseHighlighter):
            def highlight(self, source: str, language: str, theme: str) -> str:
                # Implementation here
                pass
        ```
    """

    @abstractmethod
    def highlight(self, source: str, language: str, theme: str) -> str:
        """Convert raw source text into HTML markup.

        Args:
            source: The raw source text.
            language: Language tag used to pick a lexer (e.g. "go").
            theme: Style name used for colouring.

        Returns:
            HTML markup with semantic CSS-class spans.

        Raises:
            HighlightError: If the language or theme is unknown, or
                highlighting fails for any other reason.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the strategy name, as used in settings."""
        ...
