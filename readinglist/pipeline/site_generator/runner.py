"""Generate the reading list site from the CSV input.

This module provides a headless runner that chains the pipeline stages:
load the CSV, group articles by month, render the listing, assemble the
page and write it. It is intended for programmatic invocation; the CLI in
``readinglist.generate_site`` wraps it.

Usage Examples
--------------
Typical programmatic usage with config defaults::

    from readinglist.pipeline.site_generator.runner import run_from_config
    result = run_from_config()

Explicit path usage::

    from pathlib import Path
    from readinglist.pipeline.site_generator.runner import generate_site

    count = generate_site(
        csv_path=Path("data/readingList.csv"),
        output_file=Path("public/index.html"),
    )

"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from readinglist.config import OUTPUT_HTML_FILE, PAGE_TITLE, READING_LIST_CSV_PATH
from readinglist.exceptions import AppError

from .data_loader import load_reading_list
from .grouping import group_records_by_month
from .markup import render_listing
from .page import build_title_bar, render_page
from .writer import write_site

logger = logging.getLogger(__name__)


def generate_site(
    csv_path: Path | None = None,
    output_file: Path | None = None,
    *,
    page_title: str | None = None,
    generated_on: date | None = None,
) -> int:
    """Run the whole pipeline and write the page.

    Parameters
    ----------
    csv_path : pathlib.Path or None, optional
        Reading list CSV. ``READING_LIST_CSV_PATH`` when ``None``.
    output_file : pathlib.Path or None, optional
        Destination HTML file. ``OUTPUT_HTML_FILE`` when ``None``.
    page_title : str or None, optional
        Page heading and document title. ``PAGE_TITLE`` when ``None``.
    generated_on : datetime.date or None, optional
        Date shown as "Last modified". Today when ``None``.

    Returns
    -------
    int
        Number of articles on the page.

    Raises
    ------
    FileAccessError
        If the CSV cannot be read or the page cannot be written.
    ParseError
        If the CSV is malformed.
    TemplateError
        If the page template is malformed.
    """
    csv_path = Path(csv_path) if csv_path is not None else READING_LIST_CSV_PATH
    output_file = Path(output_file) if output_file is not None else OUTPUT_HTML_FILE
    page_title = page_title if page_title is not None else PAGE_TITLE
    generated_on = generated_on if generated_on is not None else date.today()

    records = load_reading_list(csv_path)
    logger.info("Loaded %d articles from %s", len(records), csv_path)

    groups = group_records_by_month(records)
    logger.debug("Grouped articles into %d months", len(groups))

    listing = render_listing(groups)
    title_bar = build_title_bar(page_title, len(records), generated_on)
    document = render_page(page_title, title_bar, listing)

    write_site(document, output_file)
    return len(records)


def run_from_config(
    csv_path: Path | None = None,
    output_file: Path | None = None,
    page_title: str | None = None,
) -> bool:
    """Generate the site, logging failures instead of raising.

    If any argument is ``None``, project-level defaults from
    ``readinglist.config`` are used.

    Returns
    -------
    bool
        ``True`` if the page was written; ``False`` if any stage failed.
        Nothing is written on failure.

    Examples
    --------
    >>> from readinglist.pipeline.site_generator.runner import run_from_config
    >>> result = run_from_config()  # doctest: +SKIP
    >>> assert result in (True, False)  # doctest: +SKIP
    """
    try:
        count = generate_site(csv_path, output_file, page_title=page_title)
    except AppError as exc:
        logger.error(
            "Site generation failed during %s stage: %s", exc.stage, exc
        )
        logger.debug("Error details: %s", exc.to_dict())
        return False
    logger.info("Generated site with %d articles", count)
    return True


__all__ = ["generate_site", "run_from_config"]
