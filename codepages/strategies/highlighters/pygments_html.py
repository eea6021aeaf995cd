"""Pygments-based highlighter.

Uses Pygments' HtmlFormatter so the markup carries the short token
class names (``nx``, ``nf``, ``s``...) the annotation rules target.
"""

import logging

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from codepages.interfaces.highlighter import BaseHighlighter, HighlightError

logger = logging.getLogger(__name__)


class PygmentsHighlighter(BaseHighlighter):
    """Highlighter implementation using Pygments.

    Attributes:
        standalone: Emit a full HTML document with the style's CSS embedded,
            instead of a bare ``<div class="highlight">`` block.
    """

    def __init__(self, standalone: bool = True, css_class: str = "highlight") -> None:
        """Initialize the highlighter.

        Args:
            standalone: Whether to emit a full HTML document.
            css_class: CSS class of the wrapping block.
        """
        self._standalone = standalone
        self._css_class = css_class

    def highlight(self, source: str, language: str, theme: str) -> str:
        """Highlight source text with Pygments.

        Args:
            source: The raw source text.
            language: Pygments lexer alias (e.g. "go").
            theme: Pygments style name (e.g. "dracula").

        Returns:
            HTML markup.

        Raises:
            HighlightError: If the lexer or style is unknown, or Pygments fails.
        """
        try:
            lexer = get_lexer_by_name(language)
            formatter = HtmlFormatter(
                style=theme,
                full=self._standalone,
                cssclass=self._css_class,
            )
        except ClassNotFound as e:
            raise HighlightError(f"Cannot highlight as {language!r} with style {theme!r}: {e}") from e

        try:
            html = pygments_highlight(source, lexer, formatter)
        except Exception as e:
            raise HighlightError(f"Highlighting failed: {e}") from e

        logger.debug(f"Highlighted {len(source)} characters as {language} ({theme})")
        return html

    @property
    def name(self) -> str:
        """Return the strategy name."""
        return "pygments"
