from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

from src.book.errors import CollaboratorError


logger = logging.getLogger(__name__)

CODE_BLOCK_SELECTOR = "pre code"


class PygmentsHighlighter:
    """Highlight code blocks by language tag, keeping per-language statistics."""

    def __init__(self, style: str = "default") -> None:
        try:
            self.formatter = HtmlFormatter(style=style, nowrap=True)
        except ClassNotFound as exc:
            raise CollaboratorError("highlighting", f"unknown highlight style '{style}'") from exc
        self.style = style
        self._lexers: Dict[str, Lexer] = {}
        self._stats: Dict[str, int] = defaultdict(int)

    @property
    def stats(self) -> Dict[str, int]:
        """Characters highlighted per language tag."""

        return dict(self._stats)

    def highlight(self, code: str, language: str) -> str:
        logger.debug("Highlighting %.2f Kb of language \"%s\"", len(code) / 1024, language)
        self._stats[language] += len(code)
        try:
            return highlight(code, self._lexer_for(language), self.formatter)
        except Exception as exc:
            raise CollaboratorError("highlighting", f"language '{language}': {exc}") from exc

    def stylesheet(self) -> str:
        return self.formatter.get_style_defs(CODE_BLOCK_SELECTOR)

    def _lexer_for(self, language: str) -> Lexer:
        key = language.lower()
        if key not in self._lexers:
            try:
                self._lexers[key] = get_lexer_by_name(key)
            except ClassNotFound:
                logger.warning("No grammar for language \"%s\", leaving it unstyled", language)
                self._lexers[key] = TextLexer()
        return self._lexers[key]


__all__ = ["CODE_BLOCK_SELECTOR", "PygmentsHighlighter"]
