"""Reading list site generation entrypoint.

Generates a standalone HTML page listing the articles from the reading list
CSV, grouped by month with the newest first. The script loads the CSV,
renders the listing into the bundled page template and writes
``.site/index.html``.

Exit status is ``0`` on success and ``1`` when any stage fails; the failing
stage and its cause are logged.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from readinglist.config import (
    LOG_DIR,
    LOG_FILENAME_GENERATE_SITE,
    LOG_FORMAT,
    OUTPUT_HTML_FILE,
    PAGE_TITLE,
    READING_LIST_CSV_PATH,
)
from readinglist.pipeline.site_generator.runner import run_from_config

logger = logging.getLogger(__name__)


def configure_logging(log_level: str = "INFO", enable_file: bool = True) -> None:
    r"""Configure logging for site generation.

    Sets up a console handler and, optionally, a file handler at
    ``LOG_DIR / LOG_FILENAME_GENERATE_SITE`` using ``LOG_FORMAT``. Existing
    root handlers are removed first, so repeated calls do not duplicate
    output. A log file that cannot be opened is reported on the console and
    otherwise ignored.

    Parameters
    ----------
    log_level : str, optional
        Logging level name, e.g. ``"DEBUG"``. Unknown names fall back to
        ``INFO``.
    enable_file : bool, optional
        Whether to also log to the log file.

    Examples
    --------
    >>> configure_logging("DEBUG", enable_file=False)
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    file_error: OSError | None = None
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0,
                logging.FileHandler(LOG_DIR / LOG_FILENAME_GENERATE_SITE, mode="a"),
            )
        except OSError as exc:
            file_error = exc
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
    if file_error is not None:
        logger.warning("File logging disabled: %s", file_error)


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments; every option has a default."""
    parser = argparse.ArgumentParser(
        description="Generate a static HTML page from the reading list CSV."
    )
    parser.add_argument("--csv", type=Path, default=READING_LIST_CSV_PATH)
    parser.add_argument("--output", type=Path, default=OUTPUT_HTML_FILE)
    parser.add_argument("--title", type=str, default=PAGE_TITLE)
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for site generation.

    Returns
    -------
    int
        Process exit status: ``0`` on success, ``1`` on failure.
    """
    args = parse_cli_args(argv)
    configure_logging(
        args.log_level,
        enable_file=not bool(os.environ.get("DISABLE_FILE_LOGS")),
    )
    ok = run_from_config(args.csv, args.output, page_title=args.title)
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
