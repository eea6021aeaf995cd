"""Concrete highlighter implementations."""

from codepages.strategies.highlighters.fallback import highlight_or_passthrough
from codepages.strategies.highlighters.plain import PlainTextHighlighter
from codepages.strategies.highlighters.pygments_html import PygmentsHighlighter

__all__ = [
    "PygmentsHighlighter",
    "PlainTextHighlighter",
    "highlight_or_passthrough",
]
