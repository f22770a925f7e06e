"""
pdf/page_splitter.py — heurystyczny podział tekstu dokumentu na strony.

Granica strony to znak form feed (\f) albo co najmniej dwie puste linie
z rzędu (białe znaki między znakami nowej linii są dozwolone). To nie jest
model fizycznych stron: dokument bez takich przerw zostanie podzielony
błędnie i jest to akceptowane przybliżenie.
"""

from __future__ import annotations

import re

# \f albo trzy (lub więcej) znaki nowej linii z białymi znakami pomiędzy.
_PAGE_BREAK_RE = re.compile(r"\f|\n\s*\n\s*\n+")


def split_into_pages(raw_text: str) -> list[str]:
    """
    Zwraca niepuste, przycięte bloki tekstu w kolejności dokumentu.

    Gdy podział nic nie daje, cały tekst wejściowy jest jedyną stroną,
    więc wynik ma zawsze co najmniej jeden element.
    """
    pages = [p.strip() for p in _PAGE_BREAK_RE.split(raw_text)]
    pages = [p for p in pages if p]
    return pages if pages else [raw_text]
