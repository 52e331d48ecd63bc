"""Global configuration constants for the project.

Defines paths, filenames and page texts used across the site generator.
Input and output paths are relative to the current working directory.
"""

from __future__ import annotations

from pathlib import Path

# Package directories
PACKAGE_DIR: Path = Path(__file__).resolve().parent
TEMPLATES_DIR: Path = PACKAGE_DIR / "templates"
LOG_DIR: Path = Path("logs")

# Input / output
READING_LIST_CSV_PATH: Path = Path("readingList.csv")
OUTPUT_DIR: Path = Path(".site")
OUTPUT_HTML_FILE: Path = OUTPUT_DIR / "index.html"

# CSV columns recognised by the loader, in record field order
READING_LIST_COLUMNS: list[str] = ["url", "title", "description", "image", "date"]

# Page template
PAGE_TEMPLATE_PATH: Path = TEMPLATES_DIR / "page.template.html"
PAGE_TEMPLATE_PLACEHOLDERS: frozenset[str] = frozenset(
    {"Title", "PageTitleBar", "Content", "ExtraHeadContent"}
)

# Page texts
PAGE_TITLE: str = "akp's reading list"
PAGE_INTRO_TEXT: str = "A mostly complete list of articles I've read"
SOURCE_REPO_LABEL: str = "codemicro/readingList"
SOURCE_REPO_URL: str = "https://github.com/codemicro/readingList"

# Rendering defaults
DATE_FORMAT: str = "%Y-%m-%d"
MONTH_HEADER_LEVEL: str = "h2"
MISSING_DESCRIPTION_TEXT: str = "<none>"
IMAGE_MAX_WIDTH: str = "256px"

# Logging
LOG_FILENAME_GENERATE_SITE: str = "generate_site.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
