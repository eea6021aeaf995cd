"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access throughout the site build.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Repository root; default paths are resolved from here, not the working directory.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Site build settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    CODEPAGES_-prefixed environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEPAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input / output
    source_dir: Path = Field(
        default=PROJECT_ROOT / "about",
        description="Directory holding the source files to publish.",
    )
    source_extension: str = Field(
        default=".go",
        description="Only files with this extension are published.",
    )
    template_path: Path = Field(
        default=PROJECT_ROOT / "template" / "template.html",
        description="Page template containing {{key}} placeholders.",
    )
    page_dir: Path = Field(
        default=PROJECT_ROOT / "page",
        description="Directory the rendered pages are written to.",
    )

    # Site
    home_document: str = Field(
        default="me",
        description="Source name rendered as index.html, without navigation.",
    )
    site_label: str = Field(
        default="Tecnologer",
        description="Prefix for every page title.",
    )

    # Highlighting
    highlighter_type: str = Field(
        default="pygments",
        description="Highlighter strategy to use: 'pygments' or 'plain'.",
    )
    language: str = Field(
        default="go",
        description="Lexer name passed to the highlighter.",
    )
    theme: str = Field(
        default="dracula",
        description="Highlighter style name.",
    )
    highlight_standalone: bool = Field(
        default=True,
        description="Emit a full HTML document with embedded CSS for the code fragment.",
    )

    # Annotation
    rules_file: Path | None = Field(
        default=None,
        description="Optional JSON rule file. Built-in rules are used when unset.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path = Field(
        default=PROJECT_ROOT / "logs",
        description="Directory for info.log and error.log.",
    )

    @field_validator("source_extension")
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        """Ensure the extension starts with a dot."""
        v = v.strip()
        if v and not v.startswith("."):
            v = f".{v}"
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next access re-reads the environment."""
    global _settings
    _settings = None
