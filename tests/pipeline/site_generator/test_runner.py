"""Tests for the headless site generation runner."""

import logging
import re
from datetime import date
from pathlib import Path

import pytest

from readinglist.exceptions import ParseError, TemplateError
from readinglist.pipeline.site_generator import page, runner


def _example_rows():
    return [
        {
            "url": "https://a.example",
            "title": "Title A",
            "description": "",
            "image": "",
            "date": "2023-01-05",
        },
        {
            "url": "https://b.example",
            "title": "Title B",
            "description": "Desc B",
            "image": "https://img.example/x.png",
            "date": "2023-02-10",
        },
    ]


def test_generate_site_end_to_end(write_reading_list, tmp_path: Path):
    csvp = write_reading_list(_example_rows())
    out = tmp_path / ".site" / "index.html"

    count = runner.generate_site(csvp, out, generated_on=date(2024, 6, 1))

    assert count == 2
    html = out.read_text(encoding="utf-8")
    assert html.index("February 2023") < html.index("January 2023")
    february, january = html.split("<h2>January 2023</h2>")
    assert february.count("<li>") == 1
    assert january.count("<li>") == 1
    assert "<i>Desc B</i>" in february
    assert "Image:" in february
    assert "<i>&lt;none&gt;</i>" in january
    assert "Image:" not in january
    assert "There are currently 2 entries in the list" in html
    assert "Last modified 2024-06-01" in html


def test_generate_site_empty_list(write_reading_list, tmp_path: Path):
    csvp = write_reading_list([])
    out = tmp_path / ".site" / "index.html"
    assert runner.generate_site(csvp, out) == 0
    html = out.read_text(encoding="utf-8")
    assert "There are currently 0 entries in the list" in html
    assert "<ul>" not in html
    assert re.search(r"<main>\s*</main>", html)


def test_generate_site_escapes_script_title(write_reading_list, tmp_path: Path):
    csvp = write_reading_list(
        [{"url": "https://x.example", "title": "<script>", "date": "2023-01-01"}]
    )
    out = tmp_path / "index.html"
    runner.generate_site(csvp, out)
    html = out.read_text(encoding="utf-8")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_generate_site_parse_error_writes_nothing(write_reading_list, tmp_path: Path):
    csvp = write_reading_list([{"title": "bad", "date": "not a date"}])
    out = tmp_path / ".site" / "index.html"
    with pytest.raises(ParseError):
        runner.generate_site(csvp, out)
    assert not out.exists()
    assert not out.parent.exists()


def test_generate_site_template_error_writes_nothing(
    monkeypatch, write_reading_list, tmp_path: Path
):
    bad_template = tmp_path / "bad.html"
    bad_template.write_text("<html>{Title}</html>", encoding="utf-8")

    def render_with_bad_template(*args, **kwargs):
        return page.render_page(*args, template=bad_template.read_text(encoding="utf-8"))

    monkeypatch.setattr(runner, "render_page", render_with_bad_template)
    csvp = write_reading_list(_example_rows())
    out = tmp_path / ".site" / "index.html"
    with pytest.raises(TemplateError):
        runner.generate_site(csvp, out)
    assert not out.exists()


def test_run_from_config_success(write_reading_list, tmp_path: Path):
    csvp = write_reading_list(_example_rows())
    out = tmp_path / "site" / "index.html"
    assert runner.run_from_config(csvp, out, page_title="Mine") is True
    assert "<title>Mine</title>" in out.read_text(encoding="utf-8")


def test_run_from_config_logs_stage_on_failure(tmp_path: Path, caplog):
    with caplog.at_level(logging.ERROR):
        ok = runner.run_from_config(tmp_path / "missing.csv", tmp_path / "index.html")
    assert ok is False
    assert "load stage" in caplog.text
    assert "IO_ERROR" in caplog.text


def test_run_from_config_uses_cwd_defaults(monkeypatch, write_reading_list, tmp_path: Path):
    write_reading_list(_example_rows())
    monkeypatch.chdir(tmp_path)
    assert runner.run_from_config() is True
    assert (tmp_path / ".site" / "index.html").is_file()
