"""Annotation rule interfaces.

An annotation rule is a pattern/replacement pair applied over
already-highlighted markup to insert hyperlinks or other markup.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class AnnotationRule:
    """A set of patterns sharing one replacement template.

    Attributes:
        patterns: Regular expressions with capture groups, tried in order.
        replacement: Template referencing captured groups by position
            (``\\1`` or ``\\g<1>``).
    """

    patterns: tuple[str, ...]
    replacement: str


@dataclass(frozen=True)
class RuleProblem:
    """A malformed pattern found while validating a rule table.

    Attributes:
        rule_index: Zero-based position of the rule in the table.
        pattern_index: Zero-based position of the pattern in the rule.
        pattern: The offending pattern text.
        message: The error reported by the regex engine.
    """

    rule_index: int
    pattern_index: int
    pattern: str
    message: str


class BaseAnnotator(ABC):
    """Abstract base class for annotation strategies.

    Implementations hold an immutable rule table and apply it to
    every document they are given.
    """

    @abstractmethod
    def annotate(self, markup: str) -> str:
        """Apply the rule table to highlighted markup.

        Args:
            markup: Highlighter output.

        Returns:
            The annotated markup, or the input unchanged if nothing matched.
        """
        ...

    @property
    @abstractmethod
    def rules(self) -> tuple[AnnotationRule, ...]:
        """Return the rule table in application order."""
        ...


class RuleFileError(Exception):
    """Exception raised when a rule file cannot be loaded."""

    pass
