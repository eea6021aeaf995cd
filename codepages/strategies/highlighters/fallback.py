"""Highlighting with graceful degradation."""

import logging

from codepages.interfaces.highlighter import BaseHighlighter, HighlightError

logger = logging.getLogger(__name__)


def highlight_or_passthrough(
    highlighter: BaseHighlighter,
    source: str,
    language: str,
    theme: str,
    label: str = "",
) -> tuple[str, bool]:
    """Highlight source text, returning it unchanged if highlighting fails.

    Args:
        highlighter: The highlighting strategy.
        source: The raw source text.
        language: Language tag for the highlighter.
        theme: Style name for the highlighter.
        label: Document name or path used in the log message.

    Returns:
        ``(markup, True)`` with the highlighted HTML, or ``(source, False)``
        on HighlightError. Callers must not annotate the fallback text.
    """
    try:
        return highlighter.highlight(source, language, theme), True
    except HighlightError as e:
        logger.error(f"Highlighting {label or 'document'} failed, publishing plain text: {e}")
        return source, False
