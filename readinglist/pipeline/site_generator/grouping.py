"""Month grouping for reading list articles.

Buckets articles by calendar month and orders both the buckets and their
contents newest first. Grouping happens in insertion order; the explicit
sort pass afterwards is what makes the output order deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from .models import ZERO_DATE, ArticleRecord, MonthGroup


def month_key(date: datetime | None) -> datetime:
    """Return the first day of ``date``'s month at midnight UTC.

    The year and month are read from ``date`` as given, without converting
    it to UTC first. ``None`` maps to ``ZERO_DATE``.

    Examples
    --------
    >>> month_key(datetime(2023, 2, 10, 15, 30, tzinfo=timezone.utc))
    datetime.datetime(2023, 2, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if date is None:
        return ZERO_DATE
    return datetime(date.year, date.month, 1, tzinfo=timezone.utc)


def group_records_by_month(records: Iterable[ArticleRecord]) -> list[MonthGroup]:
    """Partition articles into month groups, newest month first.

    Within each group the articles are ordered by date, newest first.
    Both sorts are stable, so articles (or groups) with equal dates keep
    their input order. Articles without a date land in the ``ZERO_DATE``
    group, which sorts last.

    Parameters
    ----------
    records : Iterable[ArticleRecord]
        Articles in file order.

    Returns
    -------
    list[MonthGroup]
        Ordered groups; empty when ``records`` is empty.
    """
    groups: dict[datetime, MonthGroup] = {}
    for record in records:
        key = month_key(record.date)
        if key not in groups:
            groups[key] = MonthGroup(key=key)
        groups[key].entries.append(record)

    for group in groups.values():
        group.entries.sort(key=lambda record: record.sort_date, reverse=True)
    return sorted(groups.values(), key=lambda group: group.key, reverse=True)
