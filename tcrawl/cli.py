"""
tcrawl — wyodrębnianie zadań (ćwiczeń) z podręczników PDF.

Użycie:
  tcrawl [URL] [OUT] [FORMAT] [opcje]

Argumenty pozycyjne (wszystkie opcjonalne):
  URL      adres PDF lub ścieżka do pliku lokalnego
  OUT      plik wynikowy (domyślnie out/tasks.json)
  FORMAT   json | csv (domyślnie wg rozszerzenia OUT)
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby cyrylica
# w treści zadań i polskie znaki w komunikatach były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from tcrawl.commands import crawl as cmd_crawl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tcrawl",
        description="tcrawl — pobiera podręcznik PDF i dzieli jego tekst na zadania.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Przykłady:
  tcrawl
  tcrawl https://example.com/algebra.pdf out/algebra.csv
  tcrawl podrecznik.pdf /tmp/zadania.json json --show
  tcrawl https://example.com/geometria.pdf --keyword Задача --keyword Вправа
        """,
    )
    parser.add_argument(
        "--version", action="version", version="tcrawl 0.1.0"
    )
    cmd_crawl.add_arguments(parser)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
