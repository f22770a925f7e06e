"""
Konfiguracja tcrawl — zmienne środowiskowe (opcjonalnie z pliku .env).

Zmienne:
  TCRAWL_DEFAULT_URL     domyślny adres podręcznika
  TCRAWL_BASE_DIR        katalog bazowy dla względnych ścieżek wyjścia (domyślnie: cwd)
  TCRAWL_MAX_REDIRECTS   limit przekierowań HTTP (domyślnie 10)
  TCRAWL_TIMEOUT         timeout żądania w sekundach (domyślnie: brak)
  TCRAWL_USER_AGENT      nagłówek User-Agent
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_URL = "https://lib.imzo.gov.ua/wa-data/public/site/books2/7-kl-nush/7kl_Algebra_2024.pdf"
DEFAULT_OUT = "out/tasks.json"


@dataclass(frozen=True, slots=True)
class Settings:
    default_url: str
    base_dir: Path
    max_redirects: int
    timeout: float | None
    user_agent: str | None


def _optional_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value)


def get_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True), override=False)
    base_dir = os.getenv("TCRAWL_BASE_DIR")
    return Settings(
        default_url   = os.getenv("TCRAWL_DEFAULT_URL") or DEFAULT_URL,
        base_dir      = Path(base_dir) if base_dir else Path.cwd(),
        max_redirects = int(os.getenv("TCRAWL_MAX_REDIRECTS") or "10"),
        timeout       = _optional_float(os.getenv("TCRAWL_TIMEOUT")),
        user_agent    = os.getenv("TCRAWL_USER_AGENT") or None,
    )


def resolve_out_path(out: str, base_dir: Path) -> Path:
    """Ścieżka bezwzględna zostaje bez zmian; względna liczona od base_dir."""
    path = Path(out)
    return path if path.is_absolute() else base_dir / path
