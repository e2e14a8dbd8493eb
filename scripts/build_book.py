from __future__ import annotations

from src.book.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
