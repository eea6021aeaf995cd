"""Abstract base classes for the page build strategies."""

from codepages.interfaces.annotator import (
    AnnotationRule,
    BaseAnnotator,
    RuleFileError,
    RuleProblem,
)
from codepages.interfaces.highlighter import BaseHighlighter, HighlightError
from codepages.interfaces.source import BuildReport, SourceFile
from codepages.interfaces.template import BaseTemplateRenderer, FragmentMap

__all__ = [
    "AnnotationRule",
    "BaseAnnotator",
    "RuleFileError",
    "RuleProblem",
    "BaseHighlighter",
    "HighlightError",
    "BuildReport",
    "SourceFile",
    "BaseTemplateRenderer",
    "FragmentMap",
]
