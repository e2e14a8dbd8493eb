"""Markdown, highlighting and page template collaborators."""

from .highlight import PygmentsHighlighter
from .markdown import MarkdownRenderer
from .template import TemplateRenderer

__all__ = ["MarkdownRenderer", "PygmentsHighlighter", "TemplateRenderer"]
