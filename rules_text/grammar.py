"""
rules_text/grammar.py — wzorce regex gramatyki tekstu reguł.

Linia pola:
  ?KOD[ etykieta]:[ogon]      KOD = 1–3 wielkie litery łacińskie + opcjonalna cyfra
  #[etykieta]:[ogon]          wartownik pętli (lub samo "#")
  $[etykieta]:[ogon]          wartownik sumy  (lub samo "$")

Ogon dzielony jest po kropce środkowej (U+00B7).
"""

from __future__ import annotations

import re

MIDDLE_DOT = "·"

FIELD_RE = re.compile(
    r"^\?\s*(?P<code>[A-Z]{1,3}\d?)(?:\s+(?P<label>[^:]*?))?\s*:(?P<tail>.*)$"
)

SENTINEL_RE = re.compile(r"^(?P<code>[#$])(?P<label>[^:]*):(?P<tail>.*)$")

BARE_SENTINEL_RE = re.compile(r"^[#$]$")

# Linia meta (kontynuacja): zaczyna się literą, cyfrą, '$' albo '#'
META_START_RE = re.compile(r"^(?:[^\W_]|[$#])")

# Segment ogona: kod referencji i jego argument
REF_CODE_RE = re.compile(r"^[A-Z]{1,3}$")
REF_ARG_RE  = re.compile(r"^[A-Z0-9]+$", re.IGNORECASE)

# Token wyglądający jak kod klauzuli (1–2 wielkie litery): granica parametrów
CODE_TOKEN_RE = re.compile(r"^[A-Z]{1,2}$")

# Liczba ze znakiem; przecinek albo kropka jako separator dziesiętny
NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:[.,]\d*)?|[.,]\d+)$")

# Znaki sterujące usuwane z treści linii (tabulator zamieniany osobno na spację)
CONTROL_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")


def is_field_line(text: str) -> bool:
    return bool(
        FIELD_RE.match(text)
        or SENTINEL_RE.match(text)
        or BARE_SENTINEL_RE.match(text)
    )
