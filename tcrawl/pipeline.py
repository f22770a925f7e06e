"""
tcrawl/pipeline.py — przebieg: pobranie → ekstrakcja → strony → zadania.

Wszystkie etapy są sekwencyjne, cały dokument trzymany w pamięci.
Błędy (TaskCrawlError) propagują do warstwy komend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from data_model.tasks import TaskList
from downloader.fetcher import fetch_pdf
from pdf.aggregator import aggregate
from pdf.extractor import extract_text
from pdf.page_splitter import split_into_pages
from pdf.task_patterns import DEFAULT_PATTERNS, TaskPattern
from tcrawl._config import Settings


@dataclass(slots=True)
class CrawlResult:
    source: str
    page_count: int
    tasks: TaskList


def crawl_tasks(
    source: str,
    settings: Settings,
    patterns: Sequence[TaskPattern] = DEFAULT_PATTERNS,
    on_stage: Callable[[str], None] | None = None,
) -> CrawlResult:
    """Pobiera dokument i zwraca zadania ze wszystkich stron."""
    def _stage(msg: str) -> None:
        if on_stage is not None:
            on_stage(msg)

    _stage(f"Pobieranie PDF: {source}")
    data = fetch_pdf(
        source,
        max_redirects=settings.max_redirects,
        timeout=settings.timeout,
        user_agent=settings.user_agent,
    )

    _stage(f"Parsowanie PDF ({len(data)} B) …")
    raw_text = extract_text(data)
    pages = split_into_pages(raw_text)

    tasks = aggregate(pages, patterns)
    return CrawlResult(source=source, page_count=len(pages), tasks=tasks)
