"""Per-page fragments.

Builds the fragment map for the closed set of placeholders a page
template may use: ``{{code}}``, ``{{file}}``, ``{{go_back}}``,
``{{version}}`` and ``{{title}}``.
"""

from datetime import datetime
from pathlib import Path

from codepages.interfaces.source import SourceFile
from codepages.strategies.template_engine import placeholder

CODE_KEY = placeholder("code")
FILE_KEY = placeholder("file")
GO_BACK_KEY = placeholder("go_back")
VERSION_KEY = placeholder("version")
TITLE_KEY = placeholder("title")

# YYYY.MMDD.HHMM
VERSION_FORMAT = "%Y.%m%d.%H%M"

INDEX_PAGE = "index"

HOME_ICON = """<a href="index.html" class="icon-link" title="return to home">
		<svg xmlns="http://www.w3.org/2000/svg" x="0px" y="0px" width="30" height="30" viewBox="0 -5 50 50">
    <path d="M 25 1.0507812 C 24.7825 1.0507812 24.565859 1.1197656 24.380859 1.2597656 L 1.3808594 19.210938 C 0.95085938 19.550938 0.8709375 20.179141 1.2109375 20.619141 C 1.5509375 21.049141 2.1791406 21.129062 2.6191406 20.789062 L 4 19.710938 L 4 46 C 4 46.55 4.45 47 5 47 L 19 47 L 19 29 L 31 29 L 31 47 L 45 47 C 45.55 47 46 46.55 46 46 L 46 19.710938 L 47.380859 20.789062 C 47.570859 20.929063 47.78 21 48 21 C 48.3 21 48.589063 20.869141 48.789062 20.619141 C 49.129063 20.179141 49.049141 19.550938 48.619141 19.210938 L 25.619141 1.2597656 C 25.434141 1.1197656 25.2175 1.0507812 25 1.0507812 z M 35 5 L 35 6.0507812 L 41 10.730469 L 41 5 L 35 5 z"></path>
</svg>
	</a>"""


def version_stamp(now: datetime | None = None) -> str:
    """Return the build version stamp for ``now`` (default: current local time)."""
    return (now or datetime.now()).strftime(VERSION_FORMAT)


def page_title(name: str, site_label: str) -> str:
    """Return the page title: site label, then the capitalized document name.

    Example:
        >>> page_title("about", "Tecnologer")
        'Tecnologer | About'
    """
    return f"{site_label} | {name[:1].upper()}{name[1:].lower()}"


def navigation_fragment(name: str, home_document: str) -> str:
    """Return the home link, or nothing for the home document itself."""
    if name == home_document:
        return ""
    return HOME_ICON


def output_path(page_dir: Path, name: str, home_document: str) -> Path:
    """Return where the page for ``name`` is written.

    The home document becomes ``index.html``.
    """
    page_name = INDEX_PAGE if name == home_document else name
    return Path(page_dir) / f"{page_name}.html"


def build_fragments(
    source: SourceFile,
    code: str,
    version: str,
    site_label: str,
    home_document: str,
) -> dict[str, str]:
    """Build the fragment map for one page.

    Args:
        source: The document being published.
        code: Highlighted and annotated source markup.
        version: Build version stamp.
        site_label: Prefix for the page title.
        home_document: Name of the document published as the index page.

    Returns:
        Placeholder token to fragment text. The code fragment comes last so
        placeholder-like text inside the source is never substituted.
    """
    return {
        FILE_KEY: source.name,
        GO_BACK_KEY: navigation_fragment(source.name, home_document),
        VERSION_KEY: version,
        TITLE_KEY: page_title(source.name, site_label),
        CODE_KEY: code,
    }
