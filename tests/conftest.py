"""Shared fixtures for the site build tests."""

from pathlib import Path

import pytest

from codepages.core.config import Settings

TEMPLATE = (
    "<html><head><title>{{title}}</title><meta name=\"version\" content=\"{{version}}\"></head>"
    "<body>{{go_back}}<h1>{{file}}</h1>{{code}}</body></html>"
)


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a source directory and template under a temporary root."""
    source_dir = tmp_path / "about"
    source_dir.mkdir()
    (source_dir / "me.go").write_text("package main\n", encoding="utf-8")
    (source_dir / "contact.go").write_text(
        'package main\n\nvar mail = "rdominguez@tecnologer.net"\n', encoding="utf-8"
    )
    (source_dir / "notes.txt").write_text("not published", encoding="utf-8")

    template_dir = tmp_path / "template"
    template_dir.mkdir()
    (template_dir / "template.html").write_text(TEMPLATE, encoding="utf-8")

    return tmp_path


@pytest.fixture
def settings(site_dir: Path) -> Settings:
    """Settings pointing at the temporary site, with the plain highlighter."""
    return Settings(
        source_dir=site_dir / "about",
        template_path=site_dir / "template" / "template.html",
        page_dir=site_dir / "page",
        log_dir=site_dir / "logs",
        highlighter_type="plain",
    )
