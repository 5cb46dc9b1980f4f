"""
data_model/specs.py — semantyczne specyfikacje pól formularza.

Specyfikacja pola to unia tagowana: każdy wariant jest osobną klasą
z atrybutem klasowym `kind`. Konsumenci dopasowują wariant przez
`match spec: case NumberSpec(...)`, zamiast czytać opcjonalne pola
z jednego otwartego rekordu.

Priorytet (pierwszy pasujący wygrywa jako `Field.spec`):
  sum → loop → run (readonly) → run (editable) → select → string → number → open
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar


class SpecKind(StrEnum):
    """Rodzaj specyfikacji pola."""
    SUM    = "sum"
    LOOP   = "loop"
    RUN    = "run"
    SELECT = "select"
    STRING = "string"
    NUMBER = "number"
    OPEN   = "open"


# ---------------------------------------------------------------------------
# Klauzule ogona metadanych
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class SpecClause:
    """
    Jedna klauzula ogona: kod sterujący + jego parametry.

    - code:   "R", "X", "C", "S", "N", "#", "MULTILINE" lub "OPEN"
              (ciąg tokenów bez rozpoznanego kodu)
    - params: tokeny pobrane zachłannie do następnego rozpoznanego kodu
    """
    code: str
    params: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Warianty specyfikacji
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class SumSpec:
    """Suma liczbowa (`$`), nieedytowalna."""
    kind: ClassVar[SpecKind] = SpecKind.SUM


@dataclass(slots=True)
class LoopSpec:
    """Pętla (`#`): surowe deskryptory kolumn / pozycji."""
    kind: ClassVar[SpecKind] = SpecKind.LOOP
    params: list[str] = field(default_factory=list)


@dataclass(slots=True)
class RunSpec:
    """
    Akcje do wykonania (`R` — tylko odczyt, `X` — edytowalne).

    Parser niczego nie wykonuje; `actions` to klauzule R/X w kolejności ogona.
    """
    kind: ClassVar[SpecKind] = SpecKind.RUN
    actions: list[SpecClause] = field(default_factory=list)
    editable: bool = False


@dataclass(slots=True)
class SelectSpec:
    """Lista wyboru (`C`): tytuł menu + opcje."""
    kind: ClassVar[SpecKind] = SpecKind.SELECT
    menu_title: str = ""
    options: list[str] = field(default_factory=list)


@dataclass(slots=True)
class StringSpec:
    kind: ClassVar[SpecKind] = SpecKind.STRING
    default: str | None = None
    max_length: int | None = None
    multiline: bool = False


@dataclass(slots=True)
class NumberSpec:
    """Liczba: wartości nieliczbowe zostają None (nieustawione)."""
    kind: ClassVar[SpecKind] = SpecKind.NUMBER
    default: float | None = None
    min: float | None = None
    max: float | None = None


@dataclass(slots=True)
class OpenSpec:
    """Fallback: surowe tokeny ogona, tylko do wyświetlenia."""
    kind: ClassVar[SpecKind] = SpecKind.OPEN
    params: list[str] = field(default_factory=list)


type FieldSpec = SumSpec | LoopSpec | RunSpec | SelectSpec | StringSpec | NumberSpec | OpenSpec
