from __future__ import annotations

import logging
import shutil
import webbrowser
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from src.book.catalog import BookCatalog, BookSpec
from src.book.errors import NoBookSelectedError, OutputWriteError, ResourceReadError, SourceNotFoundError
from src.book.segmenter import SegmenterConfig, segment_document
from src.book.settings import BuildSettings, get_settings
from src.book.utils import strip_html_comments
from src.models.document import DocumentModel
from src.render.highlight import PygmentsHighlighter
from src.render.markdown import MarkdownRenderer
from src.render.template import TemplateRenderer


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildResult:
    """Summarizes one built book."""

    name: str
    output_path: Path
    section_count: int
    heading_count: int
    highlighted: Dict[str, int] = field(default_factory=dict)


class BookBuilder:
    """Turn one markdown book into a single self-contained HTML page."""

    def __init__(self, settings: BuildSettings | None = None, catalog: BookCatalog | None = None) -> None:
        self.settings = settings or get_settings()
        self.catalog = catalog or BookCatalog.load(self.settings.catalog_path, self.settings.books_dir)

    def source_path(self, name: str) -> Path:
        return self.settings.books_dir / f"{name}.md"

    def output_path(self, name: str) -> Path:
        return self.settings.output_dir / f"{name}.book.html"

    def build(self, name: Optional[str], *, open_browser: bool = False) -> BuildResult:
        if not name:
            raise NoBookSelectedError("No book name provided")
        spec = self.catalog.get(name)

        source = self.read_source(name)
        highlighter = PygmentsHighlighter(self.settings.highlight_style)
        model = self.segment(name, source, MarkdownRenderer(highlighter))
        self._log_highlight_summary(highlighter.stats)

        html = self.render(spec, model, highlighter)
        output_path = self.write(name, html)

        result = BuildResult(
            name=name,
            output_path=output_path,
            section_count=len(model.sections),
            heading_count=len(model.summary),
            highlighted=highlighter.stats,
        )
        logger.info("Book \"%s\" was successfully built in \"%s\"", name, output_path)

        if open_browser:
            logger.info("Opening book in the browser...")
            webbrowser.open(output_path.resolve().as_uri())
        return result

    def build_all(self) -> List[BuildResult]:
        """Build every catalogued book in order, stopping at the first failure."""

        results: List[BuildResult] = []
        for name in self.catalog.available():
            logger.info(">> Building book \"%s\"...", name)
            results.append(self.build(name))
        return results

    def clean(self) -> bool:
        output_dir = self.settings.output_dir
        if not output_dir.exists():
            return False
        shutil.rmtree(output_dir)
        return True

    def read_source(self, name: str) -> str:
        path = self.source_path(name)
        if not path.is_file():
            raise SourceNotFoundError(f"File not found for book \"{name}\"", path)
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceReadError(f"Failed to read file for book \"{name}\"", path) from exc
        return strip_html_comments(source)

    def segment(self, name: str, source: str, renderer: MarkdownRenderer) -> DocumentModel:
        logger.info("Generating summary and sections for \"%s\"...", name)
        config = SegmenterConfig(
            max_heading_depth=self.settings.max_heading_depth,
            deduplicate_slugs=self.settings.deduplicate_slugs,
        )
        return segment_document(source, renderer, config=config, source_name=name)

    def render(self, spec: BookSpec, model: DocumentModel, highlighter: PygmentsHighlighter) -> str:
        renderer = TemplateRenderer(self.settings.template_dir, release=self.settings.release)
        return renderer.render(model, book_title=spec.title, highlight_css=highlighter.stylesheet())

    def write(self, name: str, html: str) -> Path:
        output_path = self.output_path(name)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError("Failed to write output to the disk", output_path) from exc
        return output_path

    def _log_highlight_summary(self, stats: Dict[str, int]) -> None:
        if not stats:
            return
        logger.debug("====== Syntax highlighting summary =====")
        for language, size in stats.items():
            logger.debug("> Highlighted %.2f Kb of language \"%s\"", size / 1024, language)
        logger.debug("========================================")


__all__ = ["BookBuilder", "BuildResult"]
