"""
rules_text/tokenizer.py — rozbiór linii pola i ogona metadanych.

Publiczne API:
  parse_field_line(text) -> FieldParts | None
  parse_meta_tail(tail)  -> MetaTail
  normalize_key(label)   -> str

Reguły ogona (segmenty po '·', obcięte, niepuste), w kolejności:
  1. 1–3 wielkie litery + następny segment [A-Z0-9]+  → para ref, skok o 2
  2. liczba ze znakiem (',' lub '.')                → numbers (z kropką)
  3. cokolwiek innego                               → text
Wszystkie skonsumowane segmenty trafiają też do `tokens`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from data_model import MetaTail, RefPair

from .grammar import (
    BARE_SENTINEL_RE,
    FIELD_RE,
    MIDDLE_DOT,
    NUMBER_RE,
    REF_ARG_RE,
    REF_CODE_RE,
    SENTINEL_RE,
)

FALLBACK_KEY = "field"

_KEY_STRIP_RE = re.compile(r"[^\w\s]")
_WS_RE        = re.compile(r"\s+")


@dataclass(slots=True)
class FieldParts:
    """Surowe składniki pola, przed wyprowadzeniem specyfikacji."""
    code: str
    label: str
    key: str
    meta: MetaTail


def normalize_key(label: str) -> str:
    """
    Etykieta → identyfikator: małe litery, bez znaków innych niż litery /
    cyfry (Unicode) / '_', białe znaki zwinięte do '_'. Pusty wynik → "field".

    Funkcja jest idempotentna: normalize_key(normalize_key(x)) == normalize_key(x).
    """
    s = _KEY_STRIP_RE.sub("", label.lower())
    s = _WS_RE.sub("_", s.strip())
    return s or FALLBACK_KEY


def parse_meta_tail(tail: str) -> MetaTail:
    raw = (tail or "").strip()
    segments = [s.strip() for s in raw.split(MIDDLE_DOT)]
    segments = [s for s in segments if s]

    meta = MetaTail(raw=raw)
    i = 0
    while i < len(segments):
        seg = segments[i]
        nxt = segments[i + 1] if i + 1 < len(segments) else None
        if REF_CODE_RE.match(seg) and nxt is not None and REF_ARG_RE.match(nxt):
            pair = RefPair(seg, nxt)
            if pair not in meta.refs:
                meta.refs.append(pair)
            meta.tokens.extend((seg, nxt))
            i += 2
            continue
        if NUMBER_RE.match(seg):
            meta.numbers.append(seg.replace(",", "."))
        else:
            meta.text.append(seg)
        meta.tokens.append(seg)
        i += 1
    return meta


def parse_field_line(text: str) -> FieldParts | None:
    """
    Rozbiera oczyszczoną linię pola. Zwraca None, gdy linia nie pasuje
    do gramatyki (wywołujący traktuje ją wtedy jako meta).
    """
    m = FIELD_RE.match(text) or SENTINEL_RE.match(text)
    if m:
        code = m.group("code")
        label = (m.group("label") or "").strip()
        tail = m.group("tail") or ""
    elif BARE_SENTINEL_RE.match(text):
        code, label, tail = text, "", ""
    else:
        return None

    label = label or code
    return FieldParts(
        code=code,
        label=label,
        key=normalize_key(label),
        meta=parse_meta_tail(tail),
    )
