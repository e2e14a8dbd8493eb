import pytest

from src.book.cli import main
from src.book.settings import get_settings


@pytest.fixture
def book_env(tmp_path, monkeypatch):
    books_dir = tmp_path / "books"
    books_dir.mkdir()
    monkeypatch.setenv("BOOKS_DIR", str(books_dir))
    monkeypatch.setenv("BOOK_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("BOOKS_CATALOG", str(tmp_path / "absent.yaml"))
    get_settings.cache_clear()
    yield books_dir
    get_settings.cache_clear()


def test_cli_builds_book(book_env, tmp_path, capsys):
    (book_env / "demo.md").write_text("# Demo\n## Part\ntext\n", encoding="utf-8")

    assert main(["demo"]) == 0

    assert (tmp_path / "out" / "demo.book.html").exists()
    assert "Build complete" in capsys.readouterr().out


def test_cli_output_option_overrides_settings(book_env, tmp_path):
    (book_env / "demo.md").write_text("# Demo\n## Part\n", encoding="utf-8")

    assert main(["--book", "demo", "--output", str(tmp_path / "elsewhere")]) == 0

    assert (tmp_path / "elsewhere" / "demo.book.html").exists()


def test_cli_maps_errors_to_exit_codes(book_env, capsys):
    (book_env / "dup.md").write_text("# One\n## Part\n# Two\n", encoding="utf-8")

    assert main(["dup"]) == 10
    assert "Duplicate main title" in capsys.readouterr().err
    assert main([]) == 6
    assert main(["unknown"]) == 7


def test_cli_lists_books(book_env, capsys):
    (book_env / "demo.md").write_text("# Demo\n", encoding="utf-8")

    assert main(["--list"]) == 0

    assert " * demo - Demo (for all levels)" in capsys.readouterr().out


def test_cli_open_flag_launches_browser(book_env, tmp_path, monkeypatch):
    (book_env / "demo.md").write_text("# Demo\n## Part\n", encoding="utf-8")
    opened = []
    monkeypatch.setattr("webbrowser.open", lambda url: opened.append(url))

    assert main(["demo"]) == 0
    assert opened == []

    assert main(["demo", "--open"]) == 0
    assert opened == [(tmp_path / "out" / "demo.book.html").resolve().as_uri()]
