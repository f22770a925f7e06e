"""
data_model/tasks.py — model zadań wyodrębnionych z podręcznika.

SegmentedTask to wynik segmentacji jednej strony (bez numeru strony);
TaskRecord to rekord końcowy z numerem strony i indeksem na stronie.
Para (page, index) jest unikalna w obrębie jednego przebiegu.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SegmentedTask:
    id: str | None       # numer zadania np. "12" lub None
    text: str            # linie zadania złączone "\n" (pierwsza = linia-marker)


@dataclass(frozen=True, slots=True)
class TaskRecord:
    # Kolejność pól = kolejność kluczy w JSON i kolumn w CSV.
    page: int            # 1-based
    index: int           # 1-based, liczony osobno na każdej stronie
    id: str | None
    text: str


# Rekordy w kolejności (page, index).
type TaskList = list[TaskRecord]
