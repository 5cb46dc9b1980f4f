"""
sources — odczyt surowego tekstu reguł (plik lokalny / HTTP).

Publiczne API:
  read_rules_text(location, timeout) -> str
  fetch_rules_text(url, timeout)     -> str
  read_rules_file(path)              -> str
  SourceError
"""

from .loader import (
    DEFAULT_TIMEOUT,
    SourceError,
    fetch_rules_text,
    http_timeout,
    is_url,
    read_rules_file,
    read_rules_text,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "SourceError",
    "fetch_rules_text",
    "http_timeout",
    "is_url",
    "read_rules_file",
    "read_rules_text",
]
