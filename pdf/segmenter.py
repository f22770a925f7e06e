"""
pdf/segmenter.py — podział tekstu jednej strony na zadania.

Architektura:
  tekst strony → linie (strip, bez pustych)
  → match_marker() dla każdej linii
  → bufor bieżącego zadania + current_id
  → lista SegmentedTask w kolejności występowania

Reguły:
  - linia-marker zamyka bieżące zadanie i otwiera nowe (marker jest jego
    pierwszą linią),
  - linie przed pierwszym markerem (preambuła) są pomijane,
  - pozostałe linie doklejane są do bieżącego zadania.

Kluczowe funkcje publiczne:
  segment_page(text, patterns) -> list[SegmentedTask]
"""

from __future__ import annotations

import re
from typing import Sequence

from data_model.tasks import SegmentedTask
from pdf.task_patterns import DEFAULT_PATTERNS, TaskPattern, match_marker

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def _split_lines(text: str) -> list[str]:
    return [s for s in (line.strip() for line in _LINE_SPLIT_RE.split(text)) if s]


def segment_page(
    text: str,
    patterns: Sequence[TaskPattern] = DEFAULT_PATTERNS,
) -> list[SegmentedTask]:
    """
    Dzieli tekst strony na zadania.

    Strona bez żadnej linii-markera daje pustą listę.
    """
    tasks: list[SegmentedTask] = []
    buffer: list[str] = []
    current_id: str | None = None

    def _flush() -> None:
        nonlocal buffer, current_id
        if buffer:
            tasks.append(SegmentedTask(id=current_id, text="\n".join(buffer)))
            buffer = []
            current_id = None

    for line in _split_lines(text):
        marker = match_marker(line, patterns)
        if marker is not None:
            _flush()
            current_id = marker.task_id
            buffer.append(line)
        elif buffer:
            buffer.append(line)
        # else: preambuła przed pierwszym zadaniem

    _flush()
    return tasks
