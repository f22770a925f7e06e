"""Testy tcrawl.pipeline — przebieg na prawdziwym (wygenerowanym) pliku PDF."""

import fitz
import pytest

from data_model.errors import DownloadError
from pdf.task_patterns import build_patterns
from tcrawl._config import Settings
from tcrawl.pipeline import crawl_tasks


@pytest.fixture
def settings(tmp_path):
    return Settings(
        default_url="https://example.com/book.pdf",
        base_dir=tmp_path,
        max_redirects=10,
        timeout=None,
        user_agent=None,
    )


@pytest.fixture
def book(tmp_path):
    doc = fitz.open()
    for lines in (
        ["Chapter 1", "1) Compute the sum.", "of 2 and 2.", "2) Compute the product."],
        ["Introduction only"],
        ["Task 7 Prove it."],
    ):
        page = doc.new_page()
        for i, line in enumerate(lines):
            page.insert_text((72, 72 + 20 * i), line)
    path = tmp_path / "book.pdf"
    doc.save(str(path))
    doc.close()
    return path


def test_crawl_local_pdf(book, settings):
    stages = []
    result = crawl_tasks(str(book), settings, on_stage=stages.append)
    assert result.page_count == 3
    assert [(t.page, t.index, t.id, t.text) for t in result.tasks] == [
        (1, 1, "1", "1) Compute the sum.\nof 2 and 2."),
        (1, 2, "2", "2) Compute the product."),
    ]
    assert stages[0].startswith("Pobieranie PDF")


def test_crawl_with_custom_keywords(book, settings):
    result = crawl_tasks(str(book), settings, build_patterns(["Task"]))
    assert [(t.page, t.id) for t in result.tasks] == [(1, "1"), (1, "2"), (3, "7")]


def test_crawl_missing_file(tmp_path, settings):
    with pytest.raises(DownloadError):
        crawl_tasks(str(tmp_path / "missing.pdf"), settings)
