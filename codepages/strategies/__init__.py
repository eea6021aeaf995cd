"""Concrete strategy implementations."""

from codepages.strategies.annotators import (
    RegexAnnotator,
)
from codepages.strategies.highlighters import (
    PlainTextHighlighter,
    PygmentsHighlighter,
)
from codepages.strategies.template_engine import (
    PlaceholderRenderer,
)

__all__ = [
    "RegexAnnotator",
    "PlainTextHighlighter",
    "PygmentsHighlighter",
    "PlaceholderRenderer",
]
