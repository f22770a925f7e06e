"""
pdf/extractor.py — ekstrakcja surowego tekstu z bajtów PDF (PyMuPDF).

Architektura:
  bajty PDF → fitz.open(stream=...) → strony → page.get_text("text")
  → teksty stron złączone znakiem \f (granica strony dla page_splitter)

Kluczowe funkcje publiczne:
  extract_text(pdf_bytes) -> str
"""

from __future__ import annotations

import fitz  # PyMuPDF

from data_model.errors import ExtractionError

PAGE_SEPARATOR = "\f"


def extract_text(pdf_bytes: bytes) -> str:
    """
    Zwraca cały tekst dokumentu jako jeden ciąg.

    Uszkodzone lub nieobsługiwane dane → ExtractionError.
    """
    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except (RuntimeError, ValueError) as e:
        # FileDataError / EmptyFileError dziedziczą po RuntimeError
        raise ExtractionError(f"Nie można otworzyć PDF: {e}") from e

    try:
        return PAGE_SEPARATOR.join(_page_texts(doc))
    except (RuntimeError, ValueError) as e:
        raise ExtractionError(f"Błąd ekstrakcji tekstu: {e}") from e
    finally:
        doc.close()


def _page_texts(doc: fitz.Document) -> list[str]:
    return [page.get_text("text") for page in doc]
