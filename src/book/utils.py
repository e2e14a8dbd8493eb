from __future__ import annotations

import re
from typing import List


_SLUG_PATTERN = re.compile(r"[^a-z0-9_-]")
_COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)
_NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")


def slugify(text: str) -> str:
    """Create an anchor-friendly slug from raw heading text.

    Spaces become dashes and anything outside ``[a-z0-9_-]`` is dropped, so the
    result is stable across runs but not unique across repeated headings.
    """

    return _SLUG_PATTERN.sub("", text.lower().replace(" ", "-"))


def strip_html_comments(source: str) -> str:
    return _COMMENT_PATTERN.sub("", source)


def split_lines(source: str) -> List[str]:
    """Split on any newline convention, keeping a trailing empty line."""

    return _NEWLINE_PATTERN.split(source)


__all__ = ["slugify", "split_lines", "strip_html_comments"]
