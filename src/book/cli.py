from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from src.book.builder import BookBuilder
from src.book.errors import BookError
from src.book.settings import get_settings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a book as a single HTML page.")
    parser.add_argument("book", nargs="?", help="The book to build")
    parser.add_argument("-b", "--book", dest="book_option", metavar="NAME", help="The book to build")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output folder (default: build/books)")
    parser.add_argument("--open", action="store_true", help="Open the book in the browser")
    parser.add_argument("--release", action="store_true", help="Minify the generated page")
    parser.add_argument("--all", action="store_true", help="Build every available book")
    parser.add_argument("--clean", action="store_true", help="Remove the output folder and exit")
    parser.add_argument("--list", action="store_true", help="List available books and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
    return parser.parse_args(argv)


def _list_books(builder: BookBuilder) -> List[str]:
    lines = ["List of available books:", "========================", ""]
    for spec in builder.catalog.available().values():
        lines.append(f" * {spec.name} - {spec.title} (for {spec.skill})")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    updates = {}
    if args.output is not None:
        updates["output_dir"] = args.output
    if args.release:
        updates["release"] = True
    settings = get_settings().model_copy(update=updates)

    try:
        builder = BookBuilder(settings)
        if args.list:
            print("\n".join(_list_books(builder)))
            return 0
        if args.clean:
            removed = builder.clean()
            print(f"Removed {settings.output_dir}" if removed else f"Nothing to clean in {settings.output_dir}")
            return 0
        if args.all:
            results = builder.build_all()
        else:
            results = [builder.build(args.book_option or args.book, open_browser=args.open)]
    except BookError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return exc.exit_code

    for result in results:
        print(
            "Build complete",
            {
                "book": result.name,
                "output": str(result.output_path),
                "sections": result.section_count,
                "headings": result.heading_count,
            },
        )
    return 0


__all__ = ["main", "parse_args"]
