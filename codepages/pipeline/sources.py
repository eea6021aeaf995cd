"""Source discovery and template loading."""

import logging
from pathlib import Path

from codepages.interfaces.source import SourceFile

logger = logging.getLogger(__name__)


def discover_sources(directory: Path, extension: str) -> list[SourceFile]:
    """List the publishable files of a directory.

    Args:
        directory: Directory to scan (not recursive).
        extension: File extension to keep, dot included (e.g. ".go").

    Returns:
        The matching files sorted by file name.

    Raises:
        FileNotFoundError: If the directory does not exist.
        OSError: If the directory cannot be listed.
    """
    directory = Path(directory)
    extension = extension.lower()

    sources = [
        SourceFile(name=entry.stem, path=entry.resolve())
        for entry in sorted(directory.iterdir(), key=lambda p: p.name)
        if entry.is_file() and entry.suffix.lower() == extension
    ]

    logger.info(f"Found {len(sources)} {extension} file(s) in {directory}")
    return sources


def load_template(path: Path) -> str:
    """Read the page template.

    Raises:
        FileNotFoundError: If the template does not exist.
        OSError: If the template cannot be read.
    """
    template = Path(path).read_text(encoding="utf-8")
    logger.info(f"Loaded template {path} ({len(template)} characters)")
    return template
