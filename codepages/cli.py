"""Command-line entry point.

Builds the site from the configured source directory. There are no
flags: configuration comes from environment variables or a .env file.
"""

import sys

from codepages.core.config import get_settings
from codepages.core.logging_config import get_logger, setup_logging
from codepages.interfaces.annotator import RuleFileError
from codepages.pipeline import build_site

logger = get_logger(__name__)


def main() -> int:
    """Run a site build.

    Returns:
        0 if every page was written, 1 otherwise.
    """
    settings = get_settings()
    setup_logging(settings)

    try:
        report = build_site(settings)
    except (OSError, RuleFileError) as e:
        logger.error(f"Site build aborted: {e}", exc_info=True)
        return 1

    if report.failed:
        total = len(report.failed) + len(report.written)
        logger.error(f"{len(report.failed)} of {total} pages not published")

    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
