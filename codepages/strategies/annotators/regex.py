"""Regex-based annotation strategy.

Rewrites highlighted markup with an ordered table of pattern/replacement
rules. Rules are applied one after the other on the current markup, so a
later rule can match text inserted by an earlier one.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from codepages.interfaces.annotator import AnnotationRule, BaseAnnotator, RuleProblem

logger = logging.getLogger(__name__)

PATTERN_FLAGS = re.IGNORECASE | re.MULTILINE


@dataclass(frozen=True)
class _CompiledRule:
    index: int
    patterns: tuple[re.Pattern[str], ...]
    replacement: str


def _compile_pattern(pattern: str, replacement: str) -> re.Pattern[str]:
    """Compile a pattern and check its replacement against it.

    Raises:
        re.error: If the pattern does not compile or the replacement
            references a group the pattern does not have.
    """
    compiled = re.compile(pattern, PATTERN_FLAGS)
    # The replacement template is parsed before any scanning happens,
    # so an empty subject is enough to surface bad group references.
    compiled.sub(replacement, "")
    return compiled


def compile_rules(rules: Sequence[AnnotationRule]) -> tuple[_CompiledRule, ...]:
    """Compile a rule table, skipping malformed patterns.

    Args:
        rules: The rule table in application order.

    Returns:
        The compiled rules, in the same order.
    """
    compiled_rules: list[_CompiledRule] = []

    for rule_index, rule in enumerate(rules):
        patterns: list[re.Pattern[str]] = []
        for pattern_index, pattern in enumerate(rule.patterns):
            try:
                patterns.append(_compile_pattern(pattern, rule.replacement))
            except re.error as e:
                logger.error(
                    f"Skipping pattern {pattern_index} of rule {rule_index} "
                    f"({pattern!r}): {e}"
                )
        compiled_rules.append(
            _CompiledRule(index=rule_index, patterns=tuple(patterns), replacement=rule.replacement)
        )

    return tuple(compiled_rules)


def validate_rules(rules: Sequence[AnnotationRule]) -> list[RuleProblem]:
    """Report every malformed pattern in a rule table.

    Nothing is applied and nothing is logged.

    Args:
        rules: The rule table to check.

    Returns:
        One RuleProblem per pattern that would be skipped. Empty if the
        table is valid.
    """
    problems: list[RuleProblem] = []
    for rule_index, rule in enumerate(rules):
        for pattern_index, pattern in enumerate(rule.patterns):
            try:
                _compile_pattern(pattern, rule.replacement)
            except re.error as e:
                problems.append(
                    RuleProblem(
                        rule_index=rule_index,
                        pattern_index=pattern_index,
                        pattern=pattern,
                        message=str(e),
                    )
                )
    return problems


def _apply(markup: str, compiled_rules: Sequence[_CompiledRule]) -> str:
    for rule in compiled_rules:
        for pattern in rule.patterns:
            markup, count = pattern.subn(rule.replacement, markup)
            if count:
                logger.debug(f"Rule {rule.index} matched {count} time(s): {pattern.pattern!r}")
    return markup


def annotate(markup: str, rules: Sequence[AnnotationRule]) -> str:
    """Apply a rule table to highlighted markup.

    Each pattern is compiled case-insensitive and multi-line, then every
    non-overlapping match in the current markup is replaced. Malformed
    patterns are logged and skipped.

    Args:
        markup: Highlighter output.
        rules: The rule table in application order.

    Returns:
        The annotated markup, or ``markup`` unchanged if nothing matched.
    """
    return _apply(markup, compile_rules(rules))


class RegexAnnotator(BaseAnnotator):
    """Annotator applying a fixed rule table with Python regular expressions.

    The table is compiled once at construction and reused for every
    document, so a malformed pattern is reported a single time per build.

    Attributes:
        rules: The rule table in application order.
    """

    def __init__(self, rules: Sequence[AnnotationRule]) -> None:
        """Initialize the annotator.

        Args:
            rules: The rule table in application order.
        """
        self._rules = tuple(rules)
        self._compiled = compile_rules(self._rules)

        active = sum(len(rule.patterns) for rule in self._compiled)
        total = sum(len(rule.patterns) for rule in self._rules)
        logger.info(f"Compiled {active}/{total} annotation patterns from {len(self._rules)} rules")

    def annotate(self, markup: str) -> str:
        """Apply the rule table to highlighted markup.

        Args:
            markup: Highlighter output.

        Returns:
            The annotated markup.
        """
        return _apply(markup, self._compiled)

    @property
    def rules(self) -> tuple[AnnotationRule, ...]:
        """Return the rule table in application order."""
        return self._rules
