"""Page assembly: source discovery, fragments and the build loop."""

from codepages.pipeline.builder import build_site, render_page, write_page
from codepages.pipeline.fragments import (
    build_fragments,
    navigation_fragment,
    output_path,
    page_title,
    version_stamp,
)
from codepages.pipeline.sources import discover_sources, load_template

__all__ = [
    "build_site",
    "render_page",
    "write_page",
    "build_fragments",
    "navigation_fragment",
    "output_path",
    "page_title",
    "version_stamp",
    "discover_sources",
    "load_template",
]
