from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple, Union


ROOT_LABEL = "0."


@dataclass(frozen=True, slots=True)
class Heading:
    """A titled structural marker at a given nesting depth."""

    depth: int
    text: str
    rendered_text: str
    slug: str
    section_slug: Optional[str]
    numbering_label: str
    kind: Literal["heading"] = field(default="heading", init=False)

    @property
    def is_main_title(self) -> bool:
        return self.depth == 1

    @property
    def is_section(self) -> bool:
        return self.depth == 2

    @property
    def is_subtitle(self) -> bool:
        return self.depth == 3

    @property
    def is_max_subtitle(self) -> bool:
        return self.depth <= 3

    @property
    def is_subsubtitle_or_more(self) -> bool:
        return self.depth > 3

    @property
    def depth_dec(self) -> int:
        return self.depth - 1


@dataclass(frozen=True, slots=True)
class ContentBlock:
    """Rendered body HTML buffered between two headings."""

    html: str
    kind: Literal["content"] = field(default="content", init=False)


SectionItem = Union[Heading, ContentBlock]


@dataclass(frozen=True, slots=True)
class Section:
    """A depth-2 heading and everything up to the next one."""

    slug: str
    items: Tuple[SectionItem, ...] = ()

    @property
    def headings(self) -> Tuple[Heading, ...]:
        return tuple(item for item in self.items if isinstance(item, Heading))

    @property
    def title(self) -> Optional[Heading]:
        """The depth-2 heading that opened this section."""

        for item in self.items:
            if isinstance(item, Heading) and item.depth == 2:
                return item
        return None


@dataclass(frozen=True, slots=True)
class DocumentModel:
    """Title, table-of-contents summary and sections of one book."""

    main_title: Heading
    summary: Tuple[Heading, ...]
    sections: Tuple[Section, ...]


__all__ = [
    "ROOT_LABEL",
    "ContentBlock",
    "DocumentModel",
    "Heading",
    "Section",
    "SectionItem",
]
