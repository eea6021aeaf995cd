"""Core configuration and factory components."""

from codepages.core.config import Settings, get_settings
from codepages.core.factory import ComponentFactory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
]
