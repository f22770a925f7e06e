"""downloader — pobieranie dokumentów źródłowych."""

from .fetcher import DEFAULT_MAX_REDIRECTS, fetch_pdf, is_remote

__all__ = ["DEFAULT_MAX_REDIRECTS", "fetch_pdf", "is_remote"]
