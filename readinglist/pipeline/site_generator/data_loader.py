"""Data loader for the reading list CSV.

This module is the ingestion stage of the site generator pipeline. It reads
the comma-delimited reading list with pandas, maps columns to record fields
by header name and parses the ``date`` column into timezone-aware datetimes.

Boundaries
----------
- Reads exactly one file; no rendering or output logic lives here.
- Column names and the CSV location come from ``readinglist.config``.
- Every failure is raised as ``FileAccessError`` or ``ParseError`` with
  ``stage="load"`` in its context; nothing is swallowed.

Examples
--------
>>> from pathlib import Path
>>> records = load_reading_list(Path("readingList.csv"))  # doctest: +SKIP
>>> records[0].title  # doctest: +SKIP
'Title A'
"""

from __future__ import annotations

import csv
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pandas as pd

from readinglist.config import READING_LIST_COLUMNS
from readinglist.exceptions import FileAccessError, ParseError

from .models import ArticleRecord

_ISO_DATE_PREFIX = re.compile(r"^\d{4}-?\d{2}-?\d{2}")


def check_table_shape(csv_path: Path) -> list[str]:
    """Check the raw CSV layout before it is loaded into a DataFrame.

    The header must be present and name each column once (after stripping
    surrounding whitespace). Every non-blank data row must have exactly as
    many fields as the header.

    Parameters
    ----------
    csv_path : Path
        Path to the UTF-8 CSV file.

    Returns
    -------
    list[str]
        The stripped header names, in file order.

    Raises
    ------
    FileAccessError
        If the file does not exist or cannot be read.
    ParseError
        If the header is missing or repeats a name, a row has the wrong
        number of fields, or the file is not valid UTF-8 CSV.
    """
    context: dict[str, Any] = {"stage": "load", "path": str(csv_path)}
    try:
        with Path(csv_path).open("r", encoding="utf-8-sig", newline="") as csvfile:
            reader = csv.reader(csvfile)
            header = next(reader, None)
            if not header:
                raise ParseError(
                    f"Reading list {csv_path} has no header row", context=context
                )
            header = [name.strip() for name in header]
            repeated = sorted({name for name in header if header.count(name) > 1})
            if repeated:
                raise ParseError(
                    f"Reading list {csv_path} repeats column {', '.join(repeated)} "
                    "in its header",
                    context=context,
                )
            row_number = 0
            for fields in reader:
                if not fields:
                    continue
                row_number += 1
                if len(fields) != len(header):
                    raise ParseError(
                        f"Reading list {csv_path} row {row_number} has "
                        f"{len(fields)} fields, expected {len(header)}",
                        context={**context, "row": row_number},
                    )
    except csv.Error as exc:
        raise ParseError(
            f"Reading list {csv_path} is not valid CSV: {exc}", context=context
        ) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(
            f"Reading list {csv_path} is not valid UTF-8: {exc}", context=context
        ) from exc
    except OSError as exc:
        raise FileAccessError(
            f"Cannot read reading list {csv_path}: {exc}", context=context
        ) from exc
    return header


def read_reading_list_csv(csv_path: Path) -> pd.DataFrame:
    """Read the reading list CSV into a DataFrame of strings.

    Every recognised column (``url``, ``title``, ``description``, ``image``,
    ``date``) is present in the result, in that order. Cells are strings;
    empty cells and columns missing from the file become ``""``. Unknown
    columns are dropped.

    Parameters
    ----------
    csv_path : Path
        Path to the UTF-8 CSV file. A byte-order mark is tolerated.

    Returns
    -------
    pd.DataFrame
        One row per article, possibly zero rows when the file only holds
        the header.

    Raises
    ------
    FileAccessError
        If the file does not exist or cannot be read.
    ParseError
        If the file is empty, cannot be decoded, or is not valid CSV (for
        example a row whose field count differs from the header).

    Examples
    --------
    >>> df = read_reading_list_csv(Path("readingList.csv"))  # doctest: +SKIP
    >>> list(df.columns)  # doctest: +SKIP
    ['url', 'title', 'description', 'image', 'date']
    """
    check_table_shape(csv_path)
    context = {"stage": "load", "path": str(csv_path)}
    try:
        dataframe = pd.read_csv(
            csv_path,
            dtype=str,
            index_col=False,
            keep_default_na=False,
            encoding="utf-8-sig",
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError as exc:
        raise ParseError(
            f"Reading list {csv_path} has no header row", context=context
        ) from exc
    except pd.errors.ParserError as exc:
        raise ParseError(
            f"Reading list {csv_path} is not valid CSV: {exc}", context=context
        ) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(
            f"Reading list {csv_path} is not valid UTF-8: {exc}", context=context
        ) from exc
    except OSError as exc:
        raise FileAccessError(
            f"Cannot read reading list {csv_path}: {exc}", context=context
        ) from exc
    dataframe.columns = [str(column).strip() for column in dataframe.columns]
    return dataframe.reindex(columns=READING_LIST_COLUMNS, fill_value="").fillna("")


def parse_article_date(value: str, row_number: int | None = None) -> datetime | None:
    """Parse a ``date`` cell into an aware datetime.

    Accepts ISO 8601 dates (``2023-01-05``) and RFC 3339 timestamps
    (``2023-01-05T10:00:00Z``, ``2023-01-05T10:00:00+02:00``). The offset of
    a timestamp is kept; values without one are taken to be UTC.

    Parameters
    ----------
    value : str
        Raw cell text.
    row_number : int | None, optional
        One-based position of the data row, used in the error message.

    Returns
    -------
    datetime | None
        Parsed datetime, or ``None`` for an empty cell.

    Raises
    ------
    ParseError
        If the text is not a recognised date.

    Examples
    --------
    >>> parse_article_date("2023-01-05")
    datetime.datetime(2023, 1, 5, 0, 0, tzinfo=datetime.timezone.utc)
    >>> parse_article_date("") is None
    True
    """
    text = value.strip()
    if not text:
        return None
    parsed: datetime | None = None
    if _ISO_DATE_PREFIX.match(text):
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            parsed = None
    if parsed is None:
        where = f" in row {row_number}" if row_number is not None else ""
        raise ParseError(
            f"Invalid date {text!r}{where}; expected YYYY-MM-DD or an RFC 3339 timestamp",
            context={"stage": "load", "row": row_number, "value": text},
        )
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_article_records(dataframe: pd.DataFrame) -> list[ArticleRecord]:
    """Convert loader rows into ``ArticleRecord`` objects, keeping file order."""
    records: list[ArticleRecord] = []
    for position, row in enumerate(dataframe.itertuples(index=False)):
        records.append(
            ArticleRecord(
                url=row.url,
                title=row.title,
                description=row.description,
                image=row.image,
                date=parse_article_date(row.date, position + 1),
            )
        )
    return records


def load_reading_list(csv_path: Path) -> list[ArticleRecord]:
    """Load the reading list file and return its articles in file order.

    Raises
    ------
    FileAccessError
        If the file cannot be read.
    ParseError
        If the file is not valid CSV or a date cannot be parsed.
    """
    return build_article_records(read_reading_list_csv(Path(csv_path)))
