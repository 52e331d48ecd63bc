"""Tests for month grouping and ordering."""

from datetime import datetime, timedelta, timezone

from readinglist.pipeline.site_generator.grouping import (
    group_records_by_month,
    month_key,
)
from readinglist.pipeline.site_generator.models import ZERO_DATE, ArticleRecord


def _rec(title, date):
    return ArticleRecord(title=title, date=date)


def _utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def test_empty_input_yields_no_groups():
    assert group_records_by_month([]) == []


def test_month_key_zeroes_day_and_time():
    assert month_key(_utc(2023, 2, 28, 23, 59)) == _utc(2023, 2, 1)
    assert month_key(None) == ZERO_DATE


def test_month_key_uses_the_dates_own_offset():
    early_february = datetime(2023, 2, 1, 0, 30, tzinfo=timezone(timedelta(hours=2)))
    assert month_key(early_february) == _utc(2023, 2, 1)


def test_grouping_is_a_partition_ordered_newest_first():
    records = [
        _rec("jan-5", _utc(2023, 1, 5)),
        _rec("mar-1", _utc(2023, 3, 1)),
        _rec("jan-20", _utc(2023, 1, 20)),
        _rec("dec-31", _utc(2022, 12, 31)),
        _rec("mar-15", _utc(2023, 3, 15)),
    ]
    groups = group_records_by_month(records)

    assert [g.key for g in groups] == [
        _utc(2023, 3, 1),
        _utc(2023, 1, 1),
        _utc(2022, 12, 1),
    ]
    flattened = [r for g in groups for r in g.entries]
    assert sorted(flattened, key=lambda r: r.title) == sorted(
        records, key=lambda r: r.title
    )
    assert len(flattened) == len(records)

    for group in groups:
        dates = [r.date for r in group.entries]
        assert dates == sorted(dates, reverse=True)
        assert all(month_key(d) == group.key for d in dates)

    assert [r.title for r in groups[0].entries] == ["mar-15", "mar-1"]
    assert [r.title for r in groups[1].entries] == ["jan-20", "jan-5"]


def test_equal_dates_keep_input_order():
    day = _utc(2023, 5, 10)
    records = [_rec("first", day), _rec("second", day), _rec("third", day)]
    (group,) = group_records_by_month(records)
    assert [r.title for r in group.entries] == ["first", "second", "third"]


def test_duplicates_are_kept():
    rec = _rec("same", _utc(2023, 5, 10))
    (group,) = group_records_by_month([rec, rec])
    assert group.entries == [rec, rec]


def test_records_without_date_collapse_into_zero_group_last():
    records = [
        _rec("undated-1", None),
        _rec("dated", _utc(2023, 1, 5)),
        _rec("undated-2", None),
    ]
    groups = group_records_by_month(records)
    assert [g.key for g in groups] == [_utc(2023, 1, 1), ZERO_DATE]
    assert [r.title for r in groups[-1].entries] == ["undated-1", "undated-2"]
