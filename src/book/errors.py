from __future__ import annotations

from pathlib import Path
from typing import Optional


class BookError(Exception):
    """Base class for every failure that aborts a book build."""

    exit_code: int = 1


class NoBookSelectedError(BookError):
    exit_code = 6


class UnknownBookError(BookError, KeyError):
    exit_code = 7

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class StructuralError(BookError, ValueError):
    """The document breaks the one-title / content-inside-sections rules."""

    def __init__(self, message: str, *, line_number: Optional[int] = None, source_name: Optional[str] = None) -> None:
        location = []
        if source_name:
            location.append(f"book '{source_name}'")
        if line_number is not None:
            location.append(f"line {line_number}")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)
        self.line_number = line_number
        self.source_name = source_name


class MissingTitleError(StructuralError):
    exit_code = 9


class DuplicateTitleError(StructuralError):
    exit_code = 10


class ContentOutsideSectionError(StructuralError):
    exit_code = 11


class ResourceError(BookError):
    """A file the build depends on is missing, unreadable or unwritable."""

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(f"{message} (path: \"{path}\")")
        self.path = Path(path)


class SourceNotFoundError(ResourceError):
    exit_code = 8


class TemplateNotFoundError(ResourceError):
    exit_code = 12


class ResourceReadError(ResourceError):
    exit_code = 14


class TemplateResourceNotFoundError(ResourceError):
    exit_code = 15


class OutputWriteError(ResourceError):
    exit_code = 17


class CollaboratorError(BookError):
    """Failure inside the markdown, highlighting or template layer."""

    exit_code = 18

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(f"{stage} stage failed: {message}")
        self.stage = stage


__all__ = [
    "BookError",
    "CollaboratorError",
    "ContentOutsideSectionError",
    "DuplicateTitleError",
    "MissingTitleError",
    "NoBookSelectedError",
    "OutputWriteError",
    "ResourceError",
    "ResourceReadError",
    "SourceNotFoundError",
    "StructuralError",
    "TemplateNotFoundError",
    "TemplateResourceNotFoundError",
    "UnknownBookError",
]
