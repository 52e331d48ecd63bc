"""Page assembly for the generated site.

Builds the page heading and wraps the rendered listing into a complete HTML
document using the bundled page template. The template is read once per
process and validated before use.

Placeholders are ``{Name}`` tokens. The template must contain exactly the
names in ``PAGE_TEMPLATE_PLACEHOLDERS``: ``{Title}``, ``{PageTitleBar}``,
``{Content}`` and ``{ExtraHeadContent}``.
"""

from __future__ import annotations

import functools
import html
import re
from datetime import date
from pathlib import Path

from readinglist.config import (
    DATE_FORMAT,
    PAGE_INTRO_TEXT,
    PAGE_TEMPLATE_PATH,
    PAGE_TEMPLATE_PLACEHOLDERS,
    SOURCE_REPO_LABEL,
    SOURCE_REPO_URL,
)
from readinglist.exceptions import TemplateError

from .markup import TrustedHTML, element, escape, render_trusted_anchor

PLACEHOLDER_PATTERN = re.compile(r"\{([a-zA-Z0-9_/]+)\}")


def extract_placeholders_from_template(content: str) -> list[str]:
    """Return a sorted list of unique placeholders found in the template."""
    return sorted(set(PLACEHOLDER_PATTERN.findall(content)))


def validate_page_template(content: str, source: str = "<string>") -> str:
    """Check that ``content`` holds exactly the page placeholders.

    Parameters
    ----------
    content : str
        Template text.
    source : str, optional
        Where the template came from, for error messages.

    Returns
    -------
    str
        ``content`` unchanged.

    Raises
    ------
    TemplateError
        If a required placeholder is missing or an unknown one is present.
    """
    found = set(extract_placeholders_from_template(content))
    missing = sorted(PAGE_TEMPLATE_PLACEHOLDERS - found)
    unknown = sorted(found - PAGE_TEMPLATE_PLACEHOLDERS)
    if missing or unknown:
        problems = []
        if missing:
            problems.append(f"missing {', '.join(missing)}")
        if unknown:
            problems.append(f"unknown {', '.join(unknown)}")
        raise TemplateError(
            f"Page template {source} is malformed: {'; '.join(problems)}",
            context={"stage": "render", "template": source},
        )
    return content


@functools.lru_cache(maxsize=None)
def load_page_template(path: Path = PAGE_TEMPLATE_PATH) -> str:
    """Read and validate the page template, caching it for the process.

    Raises
    ------
    TemplateError
        If the file cannot be read or fails validation.
    """
    try:
        with Path(path).open("r", encoding="utf-8") as fh:
            content = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateError(
            f"Cannot read page template {path}: {exc}",
            context={"stage": "render", "template": str(path)},
        ) from exc
    return validate_page_template(content, str(path))


def render_page(
    title: str,
    title_bar: str,
    content: str,
    extra_head_content: str = "",
    template: str | None = None,
) -> str:
    """Substitute the page parts into the template.

    Substitution is a single pass over the template, so placeholder-like
    text inside the inserted fragments is left alone. ``title`` is always
    escaped; the fragments are inserted verbatim only when they are
    ``TrustedHTML``.

    Parameters
    ----------
    title : str
        Document title for the ``<title>`` element.
    title_bar : str
        Page heading fragment, usually from ``build_title_bar``.
    content : str
        Listing fragment, usually from ``render_listing``.
    extra_head_content : str, optional
        Additional markup for ``<head>``.
    template : str | None, optional
        Template text; the bundled template when ``None``.

    Returns
    -------
    str
        The complete HTML document.

    Raises
    ------
    TemplateError
        If the template is unreadable or malformed.
    """
    if template is None:
        template = load_page_template()
    else:
        validate_page_template(template)

    values = {
        "Title": html.escape(str(title), quote=True),
        "PageTitleBar": escape(title_bar),
        "Content": escape(content),
        "ExtraHeadContent": escape(extra_head_content),
    }
    return PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(1)], template)


def build_title_bar(
    page_title: str, article_count: int, generated_on: date
) -> TrustedHTML:
    """Build the page heading with the article count and repository credit.

    Examples
    --------
    >>> bar = build_title_bar("Reading", 2, date(2024, 3, 1))
    >>> "There are currently 2 entries in the list" in bar
    True
    """
    credit = render_trusted_anchor(
        element("code", SOURCE_REPO_LABEL), SOURCE_REPO_URL
    )
    line_break = element("br")
    information = TrustedHTML(
        line_break.join(
            [
                escape(PAGE_INTRO_TEXT),
                escape(f"There are currently {article_count} entries in the list"),
                escape(f"Last modified {generated_on.strftime(DATE_FORMAT)}"),
                TrustedHTML(escape("Repo: ") + credit),
            ]
        )
    )
    return element(
        "div",
        element("h1", page_title),
        element("p", information, attrs={"class": "information"}),
        attrs={"class": "heading"},
    )
