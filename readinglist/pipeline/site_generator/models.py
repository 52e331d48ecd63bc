"""Record types shared by the site generator stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

# Zero calendar value; records without a date are grouped under it.
ZERO_DATE: datetime = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class ArticleRecord:
    """One article entry loaded from the reading list.

    Attributes
    ----------
    url : str
        Link to the article.
    title : str
        Article title, shown as the link text.
    description : str
        Free-text description; may be empty.
    image : str
        Image URL; may be empty.
    date : datetime | None
        Timezone-aware date the article was read, or ``None`` when the
        cell was empty.
    """

    url: str = ""
    title: str = ""
    description: str = ""
    image: str = ""
    date: datetime | None = None

    @property
    def sort_date(self) -> datetime:
        """Return the date used for ordering, substituting ``ZERO_DATE``."""
        return self.date if self.date is not None else ZERO_DATE


@dataclass
class MonthGroup:
    """Articles sharing the same calendar month.

    ``key`` is the first day of the month at midnight UTC.
    """

    key: datetime
    entries: list[ArticleRecord] = field(default_factory=list)
