from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator


class BookEntry(BaseModel):
    name: str
    title: str
    skill: str = Field(default="all levels", description="Intended audience, shown in the book listing")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("Book name must not be empty")
        return name


class BookCatalogConfig(BaseModel):
    books: List[BookEntry] = Field(default_factory=list)

    @field_validator("books")
    @classmethod
    def _unique_names(cls, value: List[BookEntry]) -> List[BookEntry]:
        seen: set[str] = set()
        for entry in value:
            key = entry.name.lower()
            if key in seen:
                raise ValueError(f"Book '{entry.name}' is listed more than once")
            seen.add(key)
        return value


__all__ = ["BookCatalogConfig", "BookEntry"]
