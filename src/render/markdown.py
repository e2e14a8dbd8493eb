from __future__ import annotations

from typing import Optional, Protocol

from markdown_it import MarkdownIt

from src.book.errors import BookError, CollaboratorError


class Highlighter(Protocol):
    def highlight(self, code: str, language: str) -> str: ...


class MarkdownRenderer:
    """Render buffered markdown to HTML, delegating fenced code to a highlighter."""

    def __init__(self, highlighter: Optional[Highlighter] = None, *, preset: str = "js-default") -> None:
        self.highlighter = highlighter
        options = {"highlight": self._highlight} if highlighter else {}
        self._md = MarkdownIt(preset, options or None)

    def render(self, text: str) -> str:
        try:
            return self._md.render(text)
        except BookError:
            raise
        except Exception as exc:
            raise CollaboratorError("markdown", str(exc)) from exc

    def render_inline(self, text: str) -> str:
        """Render without the ``<p>...</p>`` wrapping."""

        try:
            return self._md.renderInline(text)
        except Exception as exc:
            raise CollaboratorError("markdown", str(exc)) from exc

    def _highlight(self, code: str, language: str, attrs: str) -> str:
        # Empty string lets markdown-it escape untagged blocks itself
        if not language or self.highlighter is None:
            return ""
        return self.highlighter.highlight(code, language)


__all__ = ["Highlighter", "MarkdownRenderer"]
