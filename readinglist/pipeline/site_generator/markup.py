"""HTML markup rendering for the reading list listing.

This module turns ordered month groups into the HTML fragment placed inside
the page template. Markup is assembled with a small element builder that
escapes every plain ``str`` it receives. Program-built markup is wrapped in
``TrustedHTML`` and inserted as-is; text loaded from the reading list never
is.

System Boundaries
-----------------
- Pure functions only: no file access and no logging.
- Texts and sizes (placeholder description, image width, header level,
  date format) come from ``readinglist.config``.

Example
-------
>>> from readinglist.pipeline.site_generator.markup import element, render_anchor
>>> element("p", "<b>", element("br"))
'<p>&lt;b&gt;<br></p>'
>>> render_anchor("Title A", "https://a.example")
'<a href="https://a.example" rel="noopener">Title A</a>'
"""

from __future__ import annotations

import calendar
import html
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Union

from readinglist.config import (
    IMAGE_MAX_WIDTH,
    MISSING_DESCRIPTION_TEXT,
    MONTH_HEADER_LEVEL,
)

from .models import ZERO_DATE, ArticleRecord, MonthGroup

VOID_ELEMENTS: frozenset[str] = frozenset({"br", "img"})


class TrustedHTML(str):
    """Markup built by the program itself; inserted without escaping.

    Only the element builders in this module and the page assembler
    construct instances. Never wrap values read from the reading list.
    """

    __slots__ = ()


Child = Union[str, TrustedHTML, Iterable["Child"], None]


def escape(value: str) -> TrustedHTML:
    """Escape ``value`` unless it is already ``TrustedHTML``."""
    if isinstance(value, TrustedHTML):
        return value
    return TrustedHTML(html.escape(str(value), quote=True))


def _render_children(children: Iterable[Child]) -> str:
    parts: list[str] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, str):
            parts.append(escape(child))
        else:
            parts.append(_render_children(child))
    return "".join(parts)


def element(
    tag: str, *children: Child, attrs: Mapping[str, str] | None = None
) -> TrustedHTML:
    """Build one HTML element.

    Parameters
    ----------
    tag : str
        Element name, e.g. ``"div"``.
    *children : Child
        Child content. Plain strings are escaped, ``TrustedHTML`` is kept
        verbatim, lists are flattened and ``None`` is skipped.
    attrs : Mapping[str, str] | None, optional
        Attributes in output order. Values are escaped.

    Returns
    -------
    TrustedHTML
        The rendered element. Void elements (``br``, ``img``) have no
        closing tag and ignore ``children``.
    """
    rendered_attrs = "".join(
        f' {name}="{html.escape(str(value), quote=True)}"'
        for name, value in (attrs or {}).items()
    )
    if tag in VOID_ELEMENTS:
        return TrustedHTML(f"<{tag}{rendered_attrs}>")
    return TrustedHTML(f"<{tag}{rendered_attrs}>{_render_children(children)}</{tag}>")


def _anchor_attrs(url: str, new_tab: bool) -> dict[str, str]:
    attrs = {"href": url, "rel": "noopener"}
    if new_tab:
        attrs["target"] = "_blank"
    return attrs


def render_anchor(text: str, url: str, new_tab: bool = False) -> TrustedHTML:
    """Render a link whose text is escaped."""
    return element("a", escape(text), attrs=_anchor_attrs(url, new_tab))


def render_trusted_anchor(
    label: TrustedHTML, url: str, new_tab: bool = False
) -> TrustedHTML:
    """Render a link whose label is program-built markup.

    Raises
    ------
    TypeError
        If ``label`` is not ``TrustedHTML``.
    """
    if not isinstance(label, TrustedHTML):
        raise TypeError("render_trusted_anchor requires a TrustedHTML label")
    return element("a", label, attrs=_anchor_attrs(url, new_tab))


def format_date(date: datetime | None) -> str:
    """Format a date as ``YYYY-MM-DD``, zero padding the year.

    >>> format_date(None)
    '0001-01-01'
    """
    if date is None:
        date = ZERO_DATE
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


def month_heading(key: datetime) -> str:
    """Return the group heading text, e.g. ``"January 2023"``."""
    return f"{calendar.month_name[key.month]} {key.year}"


def render_article(record: ArticleRecord) -> TrustedHTML:
    """Render one article as a collapsible list item."""
    title_line = element(
        "summary",
        render_anchor(record.title, record.url),
        " - " + format_date(record.date),
    )

    details: list[TrustedHTML] = [
        element(
            "div",
            "Description:",
            element("i", record.description or MISSING_DESCRIPTION_TEXT),
        )
    ]
    if record.image:
        details.append(
            element(
                "div",
                "Image:",
                element("br"),
                element(
                    "img",
                    attrs={
                        "src": record.image,
                        "loading": "lazy",
                        "style": f"max-width: {IMAGE_MAX_WIDTH};",
                    },
                ),
            )
        )

    body = element("div", details, attrs={"class": "description"})
    return element("li", element("details", title_line, body))


def render_month_group(group: MonthGroup) -> TrustedHTML:
    """Render a month heading followed by the month's article list."""
    header = element(MONTH_HEADER_LEVEL, month_heading(group.key))
    items = [render_article(record) for record in group.entries]
    return TrustedHTML(header + element("ul", items))


def render_listing(groups: Iterable[MonthGroup]) -> TrustedHTML:
    """Render every month group into the listing fragment.

    Returns an empty fragment when there are no groups.
    """
    parts = [render_month_group(group) for group in groups]
    if not parts:
        return TrustedHTML("")
    return element("div", parts)
