import pytest
from pydantic import ValidationError

from src.book.catalog import BookCatalog, BookSpec
from src.book.errors import UnknownBookError


def test_catalog_loads_yaml_config(tmp_path):
    config = tmp_path / "books.yaml"
    config.write_text(
        "books:\n  - name: hybrid\n    title: The Hybrid Book\n  - name: specs\n    title: Specs\n    skill: advanced users\n",
        encoding="utf-8",
    )

    catalog = BookCatalog.load(config, tmp_path)

    assert list(catalog.available()) == ["hybrid", "specs"]
    assert catalog.get("hybrid").skill == "all levels"
    assert catalog.get("specs") == BookSpec(name="specs", title="Specs", skill="advanced users")


def test_catalog_loads_toml_config(tmp_path):
    config = tmp_path / "books.toml"
    config.write_text('[[books]]\nname = "guide"\ntitle = "Guide"\n', encoding="utf-8")

    assert "guide" in BookCatalog.from_config(config)


def test_catalog_rejects_duplicate_names(tmp_path):
    config = tmp_path / "books.json"
    config.write_text('{"books": [{"name": "a", "title": "A"}, {"name": "A", "title": "B"}]}', encoding="utf-8")

    with pytest.raises(ValidationError):
        BookCatalog.from_config(config)


def test_catalog_discovers_markdown_files_without_config(tmp_path):
    (tmp_path / "second-book.md").write_text("# B\n", encoding="utf-8")
    (tmp_path / "first.md").write_text("# A\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    catalog = BookCatalog.load(tmp_path / "missing.yaml", tmp_path)

    assert list(catalog.available()) == ["first", "second-book"]
    assert catalog.get("second-book").title == "Second Book"


def test_unknown_book_lists_available_names():
    catalog = BookCatalog([BookSpec(name="guide", title="Guide")])

    with pytest.raises(UnknownBookError) as excinfo:
        catalog.get("other")

    assert "guide" in str(excinfo.value)
    with pytest.raises(KeyError):
        catalog.register(BookSpec(name="guide", title="Again"))
