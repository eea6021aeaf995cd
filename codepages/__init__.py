"""Publish source files as syntax-highlighted, hyperlinked HTML pages."""

__version__ = "0.1.0"
