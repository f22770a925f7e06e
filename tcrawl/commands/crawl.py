"""Komenda: tcrawl — pobiera podręcznik PDF i zapisuje wyodrębnione zadania do JSON / CSV."""

from __future__ import annotations

import argparse
from dataclasses import replace

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from data_model.errors import TaskCrawlError
from data_model.tasks import TaskList
from export.serializer import FORMATS, infer_format, write_output
from pdf.task_patterns import build_patterns
from tcrawl._config import DEFAULT_OUT, get_settings, resolve_out_path
from tcrawl.pipeline import crawl_tasks

# Komunikaty diagnostyczne idą na stderr; plik wynikowy jest jedynym produktem.
console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(tasks: TaskList) -> None:
    if not tasks:
        console.print("[yellow]Brak zadań.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("STR.",  justify="right", no_wrap=True, style="dim")
    table.add_column("NR",    justify="right", no_wrap=True)
    table.add_column("ID",    no_wrap=True, style="bold cyan")
    table.add_column("LEN",   justify="right", no_wrap=True)
    table.add_column("TREŚĆ", no_wrap=False, max_width=70)

    for t in tasks:
        first_line = t.text.split("\n", 1)[0]
        table.add_row(
            str(t.page),
            str(t.index),
            escape(t.id or "-"),
            str(len(t.text)),
            escape(first_line[:100]),
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(tasks)} zadań[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def _stage(msg: str) -> None:
    console.print(escape(msg))


def run(args: argparse.Namespace) -> None:
    try:
        settings = get_settings()
    except ValueError as e:
        console.print(f"[red]Błędna konfiguracja (TCRAWL_*):[/red] {escape(str(e))}")
        raise SystemExit(1)

    source: str = args.url or settings.default_url
    out_path = resolve_out_path(args.out or DEFAULT_OUT, settings.base_dir)
    fmt: str = args.format or infer_format(out_path)

    if args.max_redirects is not None:
        settings = replace(settings, max_redirects=args.max_redirects)

    try:
        patterns = build_patterns(args.keyword)
    except ValueError as e:
        console.print(f"[red]Błędne słowa kluczowe:[/red] {escape(str(e))}")
        raise SystemExit(1)

    try:
        result = crawl_tasks(source, settings, patterns, on_stage=_stage)
        write_output(result.tasks, out_path, fmt)
    except TaskCrawlError as e:
        console.print(f"[red]{type(e).__name__}:[/red] {escape(str(e))}")
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Nieoczekiwany błąd:[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print(
        f"[green]Zapisano {len(result.tasks)} zadań[/green] do {escape(str(out_path))} "
        f"([dim]{result.page_count} stron, format {fmt}[/dim])"
    )

    if args.show:
        _show_table(result.tasks)


# ---------------------------------------------------------------------------
# Rejestracja argumentów
# ---------------------------------------------------------------------------

def add_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "url",
        metavar="URL",
        nargs="?",
        default=None,
        help="Adres PDF (lub ścieżka do pliku lokalnego). Domyślnie: TCRAWL_DEFAULT_URL / podręcznik algebry 7 kl.",
    )
    p.add_argument(
        "out",
        metavar="OUT",
        nargs="?",
        default=None,
        help=f"Plik wynikowy (domyślnie: {DEFAULT_OUT}); ścieżka względna liczona od TCRAWL_BASE_DIR.",
    )
    p.add_argument(
        "format",
        metavar="FORMAT",
        nargs="?",
        choices=FORMATS,
        default=None,
        help="json lub csv (domyślnie: wg rozszerzenia OUT; .csv → csv, inaczej json).",
    )
    p.add_argument(
        "--keyword",
        metavar="SŁOWO",
        action="append",
        default=None,
        help="Słowo kluczowe otwierające zadanie (można powtarzać; zastępuje listę domyślną).",
    )
    p.add_argument(
        "--max-redirects",
        metavar="N",
        type=int,
        default=None,
        help="Limit przekierowań HTTP (domyślnie: TCRAWL_MAX_REDIRECTS lub 10).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę zadań w terminalu po zapisie.",
    )
    p.set_defaults(func=run)
