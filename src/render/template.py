from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import minify_html
from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markupsafe import Markup

from src.book.errors import (
    BookError,
    CollaboratorError,
    ResourceReadError,
    TemplateNotFoundError,
    TemplateResourceNotFoundError,
)
from src.models.document import DocumentModel


logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates" / "book"
TEMPLATE_FILENAME = "index.html"


@dataclass(frozen=True, slots=True)
class ResourceWrapper:
    left: str
    right: str


RESOURCE_WRAPPERS: Dict[str, ResourceWrapper] = {
    "js": ResourceWrapper('<script type="text/javascript">', "</script>"),
    "css": ResourceWrapper('<style type="text/css">', "</style>"),
}


class TemplateRenderer:
    """Bind a DocumentModel into the book page template."""

    def __init__(self, template_dir: Path | None = None, *, release: bool = False) -> None:
        self.template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
        self.release = release

        if not self.template_dir.is_dir():
            raise TemplateNotFoundError("Template folder was not found", self.template_dir)

        self.template_path = self.template_dir / TEMPLATE_FILENAME
        if not self.template_path.is_file():
            raise TemplateNotFoundError("Template file was not found", self.template_path)

        try:
            self._source = self.template_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ResourceReadError("Failed to read template file", self.template_path) from exc

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html"], default_for_string=True),
        )
        self.env.globals["include"] = self.include

    def include(self, filename: str) -> Markup:
        """Inline a resource from the template folder, wrapping CSS and JS."""

        path = self.template_dir / filename
        if not path.is_file():
            raise TemplateResourceNotFoundError(f"Template's resource file \"{filename}\" was not found", path)
        try:
            resource = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ResourceReadError(f"Failed to read template's resource file \"{filename}\"", path) from exc

        wrapper = RESOURCE_WRAPPERS.get(path.suffix[1:].lower())
        if wrapper:
            resource = wrapper.left + resource + wrapper.right
        return Markup(resource)

    def render(self, model: DocumentModel, **extra: Any) -> str:
        logger.info("Transpiling template to HTML...")
        context: Dict[str, Any] = dict(extra)
        context.update(title=model.main_title, summary=model.summary, sections=model.sections)

        try:
            html = self.env.from_string(self._source).render(**context)
        except BookError:
            raise
        except TemplateError as exc:
            raise CollaboratorError("template", str(exc)) from exc

        if self.release:
            html = self.minify(html)
        return html

    def minify(self, html: str) -> str:
        logger.info("Minifying %.2f Kb of HTML...", len(html) / 1024)
        try:
            return minify_html.minify(html, minify_css=True, minify_js=True)
        except Exception as exc:
            raise CollaboratorError("minify", str(exc)) from exc


__all__ = ["DEFAULT_TEMPLATE_DIR", "RESOURCE_WRAPPERS", "TEMPLATE_FILENAME", "TemplateRenderer"]
