"""
data_model/errors.py — hierarchia błędów przebiegu tcrawl.

Każdy błąd jest fatalny: warstwa komend wypisuje go i kończy z kodem 1.
"""

from __future__ import annotations


class TaskCrawlError(Exception):
    """Bazowy błąd — łapany w warstwie CLI."""


class NetworkError(TaskCrawlError):
    """Błąd transportu przy pobieraniu (DNS, TLS, odmowa połączenia, timeout)."""


class DownloadError(TaskCrawlError):
    """Odpowiedź końcowa inna niż 200 albo zbyt wiele przekierowań."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ExtractionError(TaskCrawlError):
    """PyMuPDF nie potrafi odczytać dokumentu."""


class FilesystemError(TaskCrawlError):
    """Nie da się utworzyć katalogu wyjściowego lub zapisać pliku."""
