"""Site generator pipeline.

Exposes the stages that turn the reading list CSV into the static page:
``data_loader`` (CSV to records), ``grouping`` (records to month groups),
``markup`` (groups to the listing fragment), ``page`` (fragment to full
document), ``writer`` (document to disk) and ``runner`` (all of the above).
No logic lives in this initializer.
"""

from .data_loader import load_reading_list, read_reading_list_csv
from .grouping import group_records_by_month
from .markup import TrustedHTML, render_listing
from .models import ArticleRecord, MonthGroup
from .page import build_title_bar, load_page_template, render_page
from .runner import generate_site, run_from_config
from .writer import write_site

__all__ = [
    "ArticleRecord",
    "MonthGroup",
    "TrustedHTML",
    "build_title_bar",
    "generate_site",
    "group_records_by_month",
    "load_page_template",
    "load_reading_list",
    "read_reading_list_csv",
    "render_listing",
    "render_page",
    "run_from_config",
    "write_site",
]
