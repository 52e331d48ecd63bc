"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides small CSV-building fixtures shared by the pipeline tests.
"""

import os
import signal
import sys

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests
from pathlib import Path

import pandas as pd
import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from readinglist.pipeline.site_generator.page import load_page_template  # noqa: E402

_TEST_TIMEOUT = int(os.environ.get("PYTEST_TEST_TIMEOUT", "10"))


def _timeout_handler(signum, frame):
    """Test Timeout handler."""
    raise TimeoutError(f"Test exceeded {_TEST_TIMEOUT} seconds timeout")


def pytest_runtest_setup(item):
    """Arm a per-test alarm where SIGALRM exists."""
    if hasattr(signal, "SIGALRM"):
        signal.signal(signal.SIGALRM, _timeout_handler)
        signal.alarm(_TEST_TIMEOUT)


def pytest_runtest_teardown(item, nextitem):
    """Disarm the per-test alarm."""
    if hasattr(signal, "SIGALRM"):
        signal.alarm(0)


@pytest.fixture(autouse=True)
def _fresh_page_template():
    """Drop the cached page template so each test reads its own."""
    load_page_template.cache_clear()
    yield
    load_page_template.cache_clear()


@pytest.fixture
def write_reading_list(tmp_path: Path):
    """Return a helper writing rows to a reading list CSV in ``tmp_path``.

    Rows are dicts keyed by column name; the header comes from ``columns``
    (all five recognised columns by default).
    """

    def _write(rows, columns=None, name="readingList.csv") -> Path:
        columns = columns or ["url", "title", "description", "image", "date"]
        csv_path = tmp_path / name
        pd.DataFrame(rows, columns=columns).to_csv(csv_path, index=False)
        return csv_path

    return _write
