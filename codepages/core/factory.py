"""Component Factory for strategy instantiation.

The Factory Pattern allows the build to instantiate different
strategy implementations at runtime based on configuration or
environment variables.
"""

import logging

from codepages.core.config import Settings, get_settings
from codepages.interfaces.annotator import AnnotationRule, BaseAnnotator
from codepages.interfaces.highlighter import BaseHighlighter
from codepages.interfaces.template import BaseTemplateRenderer
from codepages.strategies.annotators import DEFAULT_RULES, RegexAnnotator, load_rules
from codepages.strategies.highlighters import PlainTextHighlighter, PygmentsHighlighter
from codepages.strategies.template_engine import PlaceholderRenderer

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        settings = get_settings()
        factory = ComponentFactory(settings)

        highlighter = factory.get_highlighter()
        annotator = factory.get_annotator()
        renderer = factory.get_renderer()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Build settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._highlighter_cache: BaseHighlighter | None = None
        self._annotator_cache: BaseAnnotator | None = None
        self._renderer_cache: BaseTemplateRenderer | None = None

    @property
    def settings(self) -> Settings:
        """Return the settings this factory was built with."""
        return self._settings

    def get_highlighter(self, highlighter_type: str | None = None) -> BaseHighlighter:
        """Get a highlighter instance based on the specified type.

        Args:
            highlighter_type: The highlighter type to instantiate. If None, uses settings.

        Returns:
            A BaseHighlighter implementation instance.

        Raises:
            ValueError: If the highlighter type is unknown.
        """
        if self._highlighter_cache is None or highlighter_type is not None:
            highlighter_type = highlighter_type or self._settings.highlighter_type

            logger.info(f"Instantiating highlighter: {highlighter_type}")

            match highlighter_type:
                case "pygments":
                    self._highlighter_cache = PygmentsHighlighter(
                        standalone=self._settings.highlight_standalone,
                    )
                case "plain":
                    self._highlighter_cache = PlainTextHighlighter()
                case _:
                    raise ValueError(
                        f"Unknown highlighter type: {highlighter_type}. "
                        f"Valid options: 'pygments', 'plain'"
                    )

        return self._highlighter_cache

    def get_rules(self) -> tuple[AnnotationRule, ...]:
        """Get the annotation rule table.

        Returns:
            Rules from the configured rule file, or the built-in table.

        Raises:
            RuleFileError: If the configured rule file is invalid.
        """
        if self._settings.rules_file is None:
            return DEFAULT_RULES
        return load_rules(self._settings.rules_file)

    def get_annotator(self) -> BaseAnnotator:
        """Get an annotator instance holding the configured rule table.

        Returns:
            A BaseAnnotator implementation instance.
        """
        if self._annotator_cache is None:
            logger.info("Instantiating annotator")

            self._annotator_cache = RegexAnnotator(self.get_rules())

        return self._annotator_cache

    def get_renderer(self) -> BaseTemplateRenderer:
        """Get a template renderer instance.

        Returns:
            A BaseTemplateRenderer implementation instance.
        """
        if self._renderer_cache is None:
            logger.info("Instantiating template renderer")

            self._renderer_cache = PlaceholderRenderer()

        return self._renderer_cache

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        This forces new instances to be created on next access.
        Useful for testing or when settings change.
        """
        self._highlighter_cache = None
        self._annotator_cache = None
        self._renderer_cache = None
        logger.debug("Component factory cache cleared")
