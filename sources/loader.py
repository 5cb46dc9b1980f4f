"""
sources/loader.py — pobieranie surowego tekstu reguł z pliku lub URL.

Zmienna środowiskowa:
  RCAT_HTTP_TIMEOUT   limit czasu żądania HTTP w sekundach (domyślnie 30)
"""

from __future__ import annotations

import os
from pathlib import Path

import requests

DEFAULT_TIMEOUT = 30.0
_ENV_TIMEOUT    = "RCAT_HTTP_TIMEOUT"
_BOM            = "\ufeff"

_HEADERS = {
    "User-Agent": "rulecat/0.1 (+rules-text loader)",
    "Accept": "text/plain, */*;q=0.5",
}


class SourceError(Exception):
    """Nie udało się odczytać tekstu reguł ze wskazanego źródła."""


def is_url(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


def http_timeout() -> float:
    raw = os.getenv(_ENV_TIMEOUT)
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def fetch_rules_text(url: str, timeout: float | None = None) -> str:
    """Pobiera tekst reguł przez HTTP(S); brak kodowania w odpowiedzi → UTF-8."""
    try:
        resp = requests.get(url, timeout=timeout or http_timeout(), headers=_HEADERS)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise SourceError(f"Nie można pobrać {url}: {e}") from e
    resp.encoding = resp.encoding or "utf-8"
    return resp.text.removeprefix(_BOM)


def read_rules_file(path: str | Path) -> str:
    p = Path(path)
    if not p.is_file():
        raise SourceError(f"Plik nie istnieje: {p}")
    try:
        return p.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Nie można odczytać {p}: {e}") from e


def read_rules_text(location: str | Path, timeout: float | None = None) -> str:
    """Plik lokalny albo URL http(s)://."""
    if isinstance(location, str) and is_url(location):
        return fetch_rules_text(location, timeout)
    return read_rules_file(location)
