"""Annotation rule file models.

Pydantic models validating rule files before they are turned into
immutable AnnotationRule values.
"""

from pydantic import BaseModel, Field

from codepages.interfaces.annotator import AnnotationRule


class RuleSpec(BaseModel):
    """One entry of a JSON rule file."""

    patterns: list[str] = Field(
        min_length=1,
        description="Regular expressions sharing the replacement, applied in order",
    )
    replacement: str = Field(description="Replacement template referencing groups by position")

    def to_rule(self) -> AnnotationRule:
        """Convert to an immutable AnnotationRule."""
        return AnnotationRule(patterns=tuple(self.patterns), replacement=self.replacement)
