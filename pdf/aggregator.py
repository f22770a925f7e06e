"""pdf/aggregator.py — segmentacja wszystkich stron i numeracja (page, index)."""

from __future__ import annotations

from typing import Sequence

from data_model.tasks import TaskList, TaskRecord
from pdf.segmenter import segment_page
from pdf.task_patterns import DEFAULT_PATTERNS, TaskPattern


def aggregate(
    pages: Sequence[str],
    patterns: Sequence[TaskPattern] = DEFAULT_PATTERNS,
) -> TaskList:
    """
    Uruchamia segmenter na każdej stronie i nadaje numery.

    page  — numer strony (1-based, kolejność listy pages)
    index — pozycja zadania na stronie (1-based)

    Zadania rozcięte granicą strony nie są scalane.
    """
    result: TaskList = []
    for page_no, page_text in enumerate(pages, start=1):
        for index, task in enumerate(segment_page(page_text, patterns), start=1):
            result.append(TaskRecord(
                page=page_no,
                index=index,
                id=task.id,
                text=task.text,
            ))
    return result
