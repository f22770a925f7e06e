"""downloader/fetcher.py — pobieranie dokumentu PDF (HTTP z przekierowaniami lub plik lokalny)."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urljoin, urlparse
from urllib.request import url2pathname

import requests

from data_model.errors import DownloadError, NetworkError

DEFAULT_MAX_REDIRECTS = 10

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
}


def is_remote(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def fetch_pdf(
    source: str,
    *,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    timeout: float | None = None,
    user_agent: str | None = None,
    session: requests.Session | None = None,
) -> bytes:
    """
    Zwraca bajty dokumentu spod URL (lub z pliku lokalnego).

    Przekierowania 3xx z nagłówkiem Location są obsługiwane ręcznie, najwyżej
    max_redirects razy. Brak ponowień: pierwszy błąd trafia do wywołującego.

    Raises:
        NetworkError:  błąd transportu (DNS, TLS, odmowa połączenia, timeout).
        DownloadError: status końcowy różny od 200 lub zbyt wiele przekierowań.
    """
    if not is_remote(source):
        return _read_local(source)

    headers = dict(_DEFAULT_HEADERS)
    if user_agent:
        headers["User-Agent"] = user_agent

    own_session = session is None
    sess = session if session is not None else requests.Session()
    try:
        return _follow(sess, source, headers, max_redirects, timeout)
    finally:
        if own_session:
            sess.close()


def _follow(
    sess: requests.Session,
    url: str,
    headers: dict[str, str],
    max_redirects: int,
    timeout: float | None,
) -> bytes:
    redirects = 0
    while True:
        try:
            resp = sess.get(url, headers=headers, timeout=timeout, allow_redirects=False)
        except requests.RequestException as e:
            raise NetworkError(f"Błąd sieci dla {url}: {e}") from e

        location = resp.headers.get("Location")
        if 300 <= resp.status_code < 400 and location:
            if redirects >= max_redirects:
                raise DownloadError(
                    f"Zbyt wiele przekierowań (limit {max_redirects}): {url}",
                    url=url,
                    status_code=resp.status_code,
                )
            redirects += 1
            url = urljoin(url, location)
            continue

        if resp.status_code != 200:
            raise DownloadError(
                f"Nie udało się pobrać dokumentu: HTTP {resp.status_code} ({url})",
                url=url,
                status_code=resp.status_code,
            )
        return resp.content


def _read_local(source: str) -> bytes:
    parsed = urlparse(source)
    # url2pathname dekoduje %XX (cyrylica, spacje w nazwach plików)
    path = Path(url2pathname(parsed.path)) if parsed.scheme == "file" else Path(source)
    try:
        return path.read_bytes()
    except OSError as e:
        raise DownloadError(f"Nie można odczytać pliku {path}: {e}", url=source) from e
