from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union


FENCE_MARKER = "```"
DEFAULT_MAX_HEADING_DEPTH = 7

_HEADING_PATTERN = re.compile(r"^(?P<hashes>#+)[ \t]+(?P<title>.*?\S)\s*$")


@dataclass(frozen=True, slots=True)
class FenceToggle:
    """A fence marker line; ``in_code_block`` is the state after the toggle."""

    line: str
    in_code_block: bool


@dataclass(frozen=True, slots=True)
class HeadingLine:
    line: str
    depth: int
    text: str


@dataclass(frozen=True, slots=True)
class ContentLine:
    line: str


ClassifiedLine = Union[FenceToggle, HeadingLine, ContentLine]


def classify_line(
    line: str,
    in_code_block: bool,
    *,
    max_depth: int = DEFAULT_MAX_HEADING_DEPTH,
) -> ClassifiedLine:
    """Decide whether a single source line is a fence, a heading or content.

    Lines starting with ``#`` that are not shaped like ``#... text`` (no space
    or no text) are plain content. Headings deeper than ``max_depth`` are
    clamped to it.
    """

    if line.startswith(FENCE_MARKER):
        return FenceToggle(line=line, in_code_block=not in_code_block)

    if not in_code_block and line.startswith("#"):
        match = _HEADING_PATTERN.match(line)
        if match:
            depth = min(len(match.group("hashes")), max_depth)
            return HeadingLine(line=line, depth=depth, text=match.group("title"))

    return ContentLine(line=line)


__all__ = [
    "ClassifiedLine",
    "ContentLine",
    "DEFAULT_MAX_HEADING_DEPTH",
    "FENCE_MARKER",
    "FenceToggle",
    "HeadingLine",
    "classify_line",
]
