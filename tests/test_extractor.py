"""Testy pdf.extractor — ekstrakcja tekstu PyMuPDF z bajtów w pamięci."""

import fitz
import pytest

from data_model.errors import ExtractionError
from pdf.extractor import PAGE_SEPARATOR, extract_text


def _make_pdf(pages: list[list[str]]) -> bytes:
    doc = fitz.open()
    for lines in pages:
        page = doc.new_page()
        y = 72
        for line in lines:
            page.insert_text((72, y), line)
            y += 20
    data = doc.tobytes()
    doc.close()
    return data


def test_pages_joined_with_form_feed():
    data = _make_pdf([["1) Compute the sum."], ["2) Compute the product."]])
    text = extract_text(data)
    parts = text.split(PAGE_SEPARATOR)
    assert len(parts) == 2
    assert "1) Compute the sum." in parts[0]
    assert "2) Compute the product." in parts[1]


def test_lines_are_preserved():
    text = extract_text(_make_pdf([["1) First line", "second line"]]))
    lines = [l.strip() for l in text.splitlines() if l.strip()]
    assert lines == ["1) First line", "second line"]


def test_garbage_bytes_raise_extraction_error():
    with pytest.raises(ExtractionError):
        extract_text(b"this is not a pdf")


def test_empty_bytes_raise_extraction_error():
    with pytest.raises(ExtractionError):
        extract_text(b"")
