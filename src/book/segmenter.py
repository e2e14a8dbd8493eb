from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol

from src.book.errors import ContentOutsideSectionError, DuplicateTitleError, MissingTitleError
from src.book.lines import DEFAULT_MAX_HEADING_DEPTH, FenceToggle, HeadingLine, classify_line
from src.book.numbering import NumberingCounter
from src.book.utils import slugify, split_lines
from src.models.document import ContentBlock, DocumentModel, Heading, Section, SectionItem


logger = logging.getLogger(__name__)


class BlockRenderer(Protocol):
    def render(self, text: str) -> str: ...

    def render_inline(self, text: str) -> str: ...


@dataclass(slots=True)
class SegmenterConfig:
    """Tuning knobs for the segmentation fold."""

    max_heading_depth: int = DEFAULT_MAX_HEADING_DEPTH
    deduplicate_slugs: bool = False


class DocumentSegmenter:
    """Fold a flat markdown line stream into a DocumentModel.

    Lines are fed one at a time with :meth:`feed`; :meth:`finalize` flushes the
    pending content buffer and the open section and returns the model. The
    first heading must be the depth-1 title, every later heading has depth 2 or
    more, and no non-blank content may appear before the first depth-2 heading.
    """

    def __init__(
        self,
        renderer: BlockRenderer,
        config: SegmenterConfig | None = None,
        *,
        source_name: Optional[str] = None,
    ) -> None:
        self.renderer = renderer
        self.config = config or SegmenterConfig()
        self.source_name = source_name

        self._counter = NumberingCounter(size=self.config.max_heading_depth + 1)
        self._in_code_block = False
        self._content_buffer: List[str] = []
        self._section_items: List[SectionItem] = []
        self._sections: List[Section] = []
        self._summary: List[Heading] = []
        self._main_title: Optional[Heading] = None
        self._last_section_slug: Optional[str] = None
        self._first_section = True
        self._slug_counts: Dict[str, int] = {}
        self._line_number = 0
        self._finalized = False

    @property
    def in_code_block(self) -> bool:
        return self._in_code_block

    def feed(self, line: str) -> None:
        if self._finalized:
            raise RuntimeError("DocumentSegmenter has already been finalized")

        self._line_number += 1
        classified = classify_line(
            line,
            self._in_code_block,
            max_depth=self.config.max_heading_depth,
        )

        if isinstance(classified, FenceToggle):
            self._in_code_block = classified.in_code_block
        elif isinstance(classified, HeadingLine):
            self._handle_heading(classified.depth, classified.text)
            return

        self._handle_content(line)

    def feed_many(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.feed(line)

    def finalize(self) -> DocumentModel:
        if self._finalized:
            raise RuntimeError("DocumentSegmenter has already been finalized")
        self._finalized = True

        if self._main_title is None:
            raise MissingTitleError(
                "Main title was not found: the document contains no heading",
                source_name=self.source_name,
            )

        self._flush_content()
        if not self._first_section:
            self._close_section()

        logger.debug(
            "Segmented %s: %d headings in %d sections",
            self.source_name or "document",
            len(self._summary),
            len(self._sections),
        )
        return DocumentModel(
            main_title=self._main_title,
            summary=tuple(self._summary),
            sections=tuple(self._sections),
        )

    def _handle_heading(self, depth: int, text: str) -> None:
        if not self._summary:
            if depth != 1:
                raise MissingTitleError(
                    f"Main title was not found: first heading '{text}' has depth {depth}",
                    line_number=self._line_number,
                    source_name=self.source_name,
                )
        elif depth == 1:
            raise DuplicateTitleError(
                f"Duplicate main title detected: '{text}'",
                line_number=self._line_number,
                source_name=self.source_name,
            )

        slug = self._make_slug(text)

        if depth >= 2:
            self._flush_content()

        if depth == 2:
            if self._first_section:
                self._first_section = False
            else:
                self._close_section()
            self._last_section_slug = slug

        heading = Heading(
            depth=depth,
            text=text,
            rendered_text=self.renderer.render_inline(text),
            slug=slug,
            section_slug=self._last_section_slug,
            numbering_label=self._counter.advance(depth),
        )
        self._summary.append(heading)

        if depth == 1:
            self._main_title = heading
        else:
            self._section_items.append(heading)

    def _handle_content(self, line: str) -> None:
        if len(self._summary) <= 1:
            if line.strip():
                raise ContentOutsideSectionError(
                    "Content not allowed outside sections (below ## titles and deeper)",
                    line_number=self._line_number,
                    source_name=self.source_name,
                )
            return
        self._content_buffer.append(line)

    def _flush_content(self) -> None:
        if not self._content_buffer:
            return
        html = self.renderer.render("\n".join(self._content_buffer))
        if html.strip():
            self._section_items.append(ContentBlock(html=html))
        self._content_buffer = []

    def _close_section(self) -> None:
        section = Section(slug=self._last_section_slug or "", items=tuple(self._section_items))
        logger.debug("Closing section '%s' with %d items", section.slug, len(section.items))
        self._sections.append(section)
        self._section_items = []

    def _make_slug(self, text: str) -> str:
        slug = slugify(text)
        if not self.config.deduplicate_slugs:
            return slug
        seen = self._slug_counts.get(slug, 0)
        self._slug_counts[slug] = seen + 1
        return slug if seen == 0 else f"{slug}-{seen + 1}"


def segment_document(
    source: str,
    renderer: BlockRenderer,
    *,
    config: SegmenterConfig | None = None,
    source_name: Optional[str] = None,
) -> DocumentModel:
    """Segment a whole markdown source into a DocumentModel."""

    segmenter = DocumentSegmenter(renderer, config, source_name=source_name)
    segmenter.feed_many(split_lines(source))
    return segmenter.finalize()


__all__ = ["BlockRenderer", "DocumentSegmenter", "SegmenterConfig", "segment_document"]
