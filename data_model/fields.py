"""
data_model/fields.py — pola formularza i rozłożony ogon metadanych.

Linia pola:  ?KOD etykieta: ogon·z·kropkami·środkowymi
  code  → 1–3 wielkie litery (+ opcjonalna cyfra) albo wartownik "#" / "$"
  label → etykieta (domyślnie = code)
  key   → znormalizowany identyfikator z etykiety
  meta  → MetaTail (ogon po dwukropku)
  spec  → dominująca specyfikacja (pierwsza z `specs`)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .specs import FieldSpec, OpenSpec, SpecClause


@dataclass(slots=True, frozen=True)
class RefPair:
    """Para referencji: krótki kod + argument alfanumeryczny, np. R·37."""
    code: str
    arg: str


@dataclass(slots=True)
class MetaTail:
    """
    Ogon metadanych pola rozłożony na tokeny.

    - raw:     oryginalny ogon (po strip)
    - tokens:  wszystkie segmenty w kolejności konsumpcji
    - refs:    pary (kod, argument), bez duplikatów, w kolejności wystąpienia
    - numbers: literały liczbowe z kropką jako separatorem dziesiętnym
    - text:    pozostałe segmenty tekstowe
    """
    raw: str = ""
    tokens: list[str] = field(default_factory=list)
    refs: list[RefPair] = field(default_factory=list)
    numbers: list[str] = field(default_factory=list)
    text: list[str] = field(default_factory=list)


@dataclass(slots=True)
class Field:
    code: str
    label: str
    key: str
    meta: MetaTail
    spec: FieldSpec = field(default_factory=OpenSpec)
    specs: list[FieldSpec] = field(default_factory=list)
    clauses: list[SpecClause] = field(default_factory=list)
    line_no: int = 0        # 1-based numer linii w tekście źródłowym
