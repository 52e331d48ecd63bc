"""Minimal runner for the reading list site generator.

This file is intentionally minimal: its single responsibility is to provide
a tiny entrypoint that delegates execution to
``readinglist.generate_site``.

Usage:
    python generate_site.py [--csv readingList.csv] [--output .site/index.html]

"""

from __future__ import annotations


def entry_point(argv: list[str] | None = None) -> int:
    """Run the site generator and return its exit status.

    Import is performed inside the function to avoid importing the whole
    application at module import time.
    """
    from readinglist.generate_site import main

    return main(argv)


if __name__ == "__main__":
    raise SystemExit(entry_point())
