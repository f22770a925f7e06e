"""
export/serializer.py — zapis listy zadań do JSON / CSV.

JSON: tablica obiektów {page, index, id, text}, wcięcie 2 spacje, UTF-8.
CSV : nagłówek page,index,id,text; każde pole w cudzysłowie (cudzysłowy
      podwajane); id puste gdy None; znaki nowej linii w text zamienione
      na spację; wiersze rozdzielone "\n", bez końcowego znaku nowej linii.

Nagłówek i kolejność kolumn są stałe (kompatybilność z istniejącymi
plikami wynikowymi).
"""

from __future__ import annotations

import csv
import io
import json
import re
from dataclasses import asdict
from pathlib import Path
from typing import Literal

from data_model.errors import FilesystemError
from data_model.tasks import TaskList

OutputFormat = Literal["json", "csv"]

FORMATS: tuple[str, ...] = ("json", "csv")
CSV_HEADER: tuple[str, ...] = ("page", "index", "id", "text")

_NEWLINE_RE = re.compile(r"\r?\n")


def infer_format(out_path: str | Path) -> OutputFormat:
    """".csv" → csv, każde inne rozszerzenie → json."""
    return "csv" if str(out_path).lower().endswith(".csv") else "json"


def to_json(tasks: TaskList) -> str:
    return json.dumps([asdict(t) for t in tasks], ensure_ascii=False, indent=2)


def to_csv(tasks: TaskList) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for t in tasks:
        writer.writerow([
            t.page,
            t.index,
            t.id if t.id is not None else "",
            _NEWLINE_RE.sub(" ", t.text).strip(),
        ])
    # bez końcowego "\n" po ostatnim wierszu
    return buf.getvalue().removesuffix("\n")


def render(tasks: TaskList, fmt: str) -> str:
    if fmt == "csv":
        return to_csv(tasks)
    if fmt == "json":
        return to_json(tasks)
    raise ValueError(f"Nieznany format wyjścia: '{fmt}' (dozwolone: {', '.join(FORMATS)})")


def write_output(tasks: TaskList, out_path: Path, fmt: str) -> Path:
    """
    Renderuje zadania i zapisuje plik jednym zapisem (katalogi tworzone w razie potrzeby).

    Błąd systemu plików → FilesystemError.
    """
    content = render(tasks, fmt)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(content, encoding="utf-8", newline="")
    except OSError as e:
        raise FilesystemError(f"Nie można zapisać {out_path}: {e}") from e
    return out_path
