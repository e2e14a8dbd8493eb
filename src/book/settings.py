from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from src.book.lines import DEFAULT_MAX_HEADING_DEPTH
from src.render.template import DEFAULT_TEMPLATE_DIR

load_dotenv(override=False)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() not in {"", "0", "false", "no"}


class BuildSettings(BaseModel):
    """Runtime configuration for book builds."""

    books_dir: Path = Field(default_factory=lambda: Path(os.getenv("BOOKS_DIR", "docs/books")))
    output_dir: Path = Field(default_factory=lambda: Path(os.getenv("BOOK_OUTPUT_DIR", "build/books")))
    template_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("BOOK_TEMPLATE_DIR") or DEFAULT_TEMPLATE_DIR)
    )
    catalog_path: Path | None = Field(
        default_factory=lambda: Path(os.getenv("BOOKS_CATALOG", "books.yaml"))
    )
    release: bool = Field(default_factory=lambda: _env_flag("BOOK_RELEASE"))
    highlight_style: str = Field(default_factory=lambda: os.getenv("BOOK_HIGHLIGHT_STYLE", "default"))
    max_heading_depth: int = Field(
        default_factory=lambda: int(os.getenv("BOOK_MAX_HEADING_DEPTH", str(DEFAULT_MAX_HEADING_DEPTH)))
    )
    deduplicate_slugs: bool = Field(default_factory=lambda: _env_flag("BOOK_DEDUPLICATE_SLUGS"))

    model_config = {
        "frozen": True,
    }

    @field_validator("max_heading_depth")
    @classmethod
    def _check_depth(cls, value: int) -> int:
        if value < 2:
            raise ValueError("max_heading_depth must allow at least section headings (2)")
        return value


@lru_cache(maxsize=1)
def get_settings() -> BuildSettings:
    """Return a cached BuildSettings instance built from the environment."""

    return BuildSettings()


__all__ = ["BuildSettings", "get_settings"]
