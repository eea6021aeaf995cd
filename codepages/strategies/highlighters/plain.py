"""Plain text highlighter.

Escapes the source and wraps it in a ``<pre>`` block, without colouring.
"""

import html

from codepages.interfaces.highlighter import BaseHighlighter


class PlainTextHighlighter(BaseHighlighter):
    """Highlighter that only escapes the source text."""

    def highlight(self, source: str, language: str, theme: str) -> str:
        """Escape source text for HTML.

        Args:
            source: The raw source text.
            language: Ignored.
            theme: Ignored.

        Returns:
            The escaped text inside ``<pre class="plain">``.
        """
        return f'<pre class="plain">{html.escape(source)}</pre>'

    @property
    def name(self) -> str:
        """Return the strategy name."""
        return "plain"
