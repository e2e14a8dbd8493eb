"""Markdown book segmentation and single-page HTML builds."""

from .errors import (
    BookError,
    CollaboratorError,
    ContentOutsideSectionError,
    DuplicateTitleError,
    MissingTitleError,
    ResourceError,
    StructuralError,
)
from .lines import ContentLine, FenceToggle, HeadingLine, classify_line
from .numbering import NumberingCounter
from .segmenter import DocumentSegmenter, SegmenterConfig, segment_document
from .utils import slugify, strip_html_comments

__all__ = [
    "BookError",
    "CollaboratorError",
    "ContentLine",
    "ContentOutsideSectionError",
    "DocumentSegmenter",
    "DuplicateTitleError",
    "FenceToggle",
    "HeadingLine",
    "MissingTitleError",
    "NumberingCounter",
    "ResourceError",
    "SegmenterConfig",
    "StructuralError",
    "classify_line",
    "segment_document",
    "slugify",
    "strip_html_comments",
]
