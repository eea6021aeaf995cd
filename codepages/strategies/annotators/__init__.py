"""Concrete annotator implementations."""

from codepages.strategies.annotators.regex import RegexAnnotator, annotate, validate_rules
from codepages.strategies.annotators.rules import DEFAULT_RULES, load_rules

__all__ = [
    "RegexAnnotator",
    "annotate",
    "validate_rules",
    "DEFAULT_RULES",
    "load_rules",
]
