from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, MutableMapping

from src.book.config_loader import load_catalog_config
from src.book.errors import UnknownBookError


@dataclass(frozen=True, slots=True)
class BookSpec:
    """A book that can be built from ``<books_dir>/<name>.md``."""

    name: str
    title: str
    skill: str = "all levels"


class BookCatalog:
    """Ordered registry of the books known to the builder."""

    def __init__(self, specs: Iterable[BookSpec] = ()) -> None:
        self._books: MutableMapping[str, BookSpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: BookSpec, *, override: bool = False) -> None:
        if not override and spec.name in self._books:
            raise KeyError(f"Book '{spec.name}' already registered")
        self._books[spec.name] = spec

    def unregister(self, name: str) -> None:
        self._books.pop(name, None)

    def get(self, name: str) -> BookSpec:
        if name not in self._books:
            known = ", ".join(self._books) or "none"
            raise UnknownBookError(f"Unknown book \"{name}\". Available books: {known}")
        return self._books[name]

    def available(self) -> Mapping[str, BookSpec]:
        return dict(self._books)

    def __contains__(self, name: object) -> bool:
        return name in self._books

    def __len__(self) -> int:
        return len(self._books)

    @classmethod
    def from_config(cls, path: Path) -> "BookCatalog":
        config = load_catalog_config(path)
        return cls(BookSpec(name=entry.name, title=entry.title, skill=entry.skill) for entry in config.books)

    @classmethod
    def discover(cls, books_dir: Path) -> "BookCatalog":
        """Register every ``*.md`` file of ``books_dir``, titled after its stem."""

        if not books_dir.is_dir():
            return cls()
        paths = sorted(path for path in books_dir.glob("*.md") if path.is_file())
        return cls(BookSpec(name=path.stem, title=path.stem.replace("-", " ").title()) for path in paths)

    @classmethod
    def load(cls, catalog_path: Path | None, books_dir: Path) -> "BookCatalog":
        if catalog_path is not None and catalog_path.exists():
            return cls.from_config(catalog_path)
        return cls.discover(books_dir)


__all__ = ["BookCatalog", "BookSpec"]
