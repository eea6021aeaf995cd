"""Site build pipeline.

Executes, for every source file:
1. Reading -> 2. Highlighting -> 3. Annotation -> 4. Rendering -> 5. Writing

Failing to list the sources or load the template stops the build. A page
that cannot be read or written is logged and recorded in the report, and
the build moves on to the next one.
"""

import logging
from datetime import datetime
from pathlib import Path

from codepages.core.config import Settings, get_settings
from codepages.core.factory import ComponentFactory
from codepages.interfaces.annotator import BaseAnnotator
from codepages.interfaces.highlighter import BaseHighlighter
from codepages.interfaces.source import BuildReport, SourceFile
from codepages.interfaces.template import BaseTemplateRenderer
from codepages.pipeline.fragments import build_fragments, output_path, version_stamp
from codepages.pipeline.sources import discover_sources, load_template
from codepages.strategies.highlighters import highlight_or_passthrough

logger = logging.getLogger(__name__)


def render_page(
    source: SourceFile,
    content: str,
    template: str,
    version: str,
    settings: Settings,
    highlighter: BaseHighlighter,
    annotator: BaseAnnotator,
    renderer: BaseTemplateRenderer,
) -> str:
    """Turn one source document into a finished page.

    Args:
        source: The document being published.
        content: The document's raw text.
        template: The page template.
        version: Build version stamp.
        settings: Build settings (language, theme, labels).
        highlighter: Highlighting strategy.
        annotator: Annotation strategy.
        renderer: Template rendering strategy.

    Returns:
        The rendered HTML page.
    """
    markup, highlighted = highlight_or_passthrough(
        highlighter,
        content,
        settings.language,
        settings.theme,
        label=str(source.path),
    )
    # Rules target highlighter markup; the raw text is published as is.
    code = annotator.annotate(markup) if highlighted else markup

    fragments = build_fragments(
        source,
        code=code,
        version=version,
        site_label=settings.site_label,
        home_document=settings.home_document,
    )
    return renderer.render(template, fragments)


def write_page(path: Path, html: str) -> None:
    """Write a rendered page.

    Raises:
        OSError: If the file cannot be written.
    """
    Path(path).write_text(html, encoding="utf-8")


def build_site(
    settings: Settings | None = None,
    factory: ComponentFactory | None = None,
    now: datetime | None = None,
) -> BuildReport:
    """Publish every source file as an HTML page.

    Args:
        settings: Build settings. If None, uses global settings.
        factory: Component factory. If None, one is built from ``settings``.
        now: Build time used for the version stamp. Defaults to the current time.

    Returns:
        The build report.

    Raises:
        FileNotFoundError: If the source directory or template is missing.
        OSError: If the source directory or template cannot be read.
        RuleFileError: If the configured rule file is invalid.
    """
    settings = settings or get_settings()
    factory = factory or ComponentFactory(settings)

    version = version_stamp(now)
    logger.info(f"Starting site build {version}")

    sources = discover_sources(settings.source_dir, settings.source_extension)
    template = load_template(settings.template_path)

    highlighter = factory.get_highlighter()
    annotator = factory.get_annotator()
    renderer = factory.get_renderer()

    Path(settings.page_dir).mkdir(parents=True, exist_ok=True)

    report = BuildReport(version=version)

    for source in sources:
        target = output_path(settings.page_dir, source.name, settings.home_document)

        try:
            content = source.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Reading {source.path} failed: {e}")
            report.failed.append((target, str(e)))
            continue

        html = render_page(
            source,
            content,
            template=template,
            version=version,
            settings=settings,
            highlighter=highlighter,
            annotator=annotator,
            renderer=renderer,
        )

        try:
            write_page(target, html)
        except OSError as e:
            logger.error(f"Writing {target} failed: {e}")
            report.failed.append((target, str(e)))
            continue

        report.written.append(target)
        logger.info(f"Page {target} written")

    logger.info(
        f"Site build {version} finished: {len(report.written)} written, "
        f"{len(report.failed)} failed"
    )
    return report
