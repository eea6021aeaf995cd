"""Template engine strategies.

Implements ``{{key}}`` placeholder substitution for page templates.
"""

from codepages.strategies.template_engine.renderer import (
    PlaceholderRenderer,
    find_placeholders,
    placeholder,
    render,
)

__all__ = [
    "PlaceholderRenderer",
    "find_placeholders",
    "placeholder",
    "render",
]
