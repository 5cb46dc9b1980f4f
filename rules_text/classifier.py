"""
rules_text/classifier.py — klasyfikacja pojedynczej linii tekstu reguł.

Głębokość:
  liczba wiodących znaków sterujących (0x00–0x1F, 0x7F)
  + kolumny wcięcia (spacja = 1, tabulator = tab_width) // indent_width

Tabulator (0x09) liczony jest jako wcięcie, nie jako znak sterujący.
Po wyliczeniu głębokości znaki sterujące są usuwane z całej linii —
nigdy nie trafiają do tytułów, etykiet ani metadanych.

Klasy:
  BLANK   — pusta po oczyszczeniu (także trasa z pustym tytułem)
  ROUTE   — kończy się ':' i nie zaczyna od '?'
  FIELD   — pasuje do gramatyki pola
  META    — zaczyna się literą / cyfrą / '$' / '#'
  DROPPED — cała reszta
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .config import DEFAULT_CONFIG, ParserConfig
from .grammar import CONTROL_RE, META_START_RE, is_field_line
from .issues import IssueCode


class LineKind(StrEnum):
    BLANK   = "blank"
    ROUTE   = "route"
    FIELD   = "field"
    META    = "meta"
    DROPPED = "dropped"


@dataclass(slots=True, frozen=True)
class ClassifiedLine:
    """
    Sklasyfikowana linia.

    - text:  tytuł trasy (bez ':') albo oczyszczona treść pola / meta
    - depth: głębokość (istotna dla tras i pól)
    - issue: powód pominięcia / degradacji, jeśli dotyczy
    """
    kind: LineKind
    text: str = ""
    depth: int = 0
    line_no: int = 0
    issue: IssueCode | None = None


def compute_depth(raw: str, config: ParserConfig = DEFAULT_CONFIG) -> tuple[int, int]:
    """Zwraca (głębokość, długość prefiksu sterującego/wcięcia)."""
    ctrl = 0
    columns = 0
    consumed = 0
    for ch in raw:
        if ch == "\t":
            columns += config.tab_width
        elif ch == " ":
            columns += 1
        elif ord(ch) <= 0x1F or ord(ch) == 0x7F:
            ctrl += 1
        else:
            break
        consumed += 1
    return ctrl + columns // config.indent_width, consumed


def clean_text(text: str) -> str:
    """Usuwa znaki sterujące, tabulatory zamienia na spacje, obcina brzegi."""
    return CONTROL_RE.sub("", text).replace("\t", " ").strip()


def classify_line(
    raw: str,
    line_no: int = 0,
    config: ParserConfig = DEFAULT_CONFIG,
) -> ClassifiedLine:
    depth, prefix = compute_depth(raw, config)
    text = clean_text(raw[prefix:])

    if not text:
        return ClassifiedLine(LineKind.BLANK, depth=depth, line_no=line_no)

    if text.endswith(":") and not text.startswith("?"):
        title = text[:-1].strip()
        if not title:
            return ClassifiedLine(
                LineKind.BLANK, text=text, depth=depth, line_no=line_no,
                issue=IssueCode.EMPTY_ROUTE_TITLE,
            )
        return ClassifiedLine(LineKind.ROUTE, text=title, depth=depth, line_no=line_no)

    if is_field_line(text):
        return ClassifiedLine(LineKind.FIELD, text=text, depth=depth, line_no=line_no)

    if text.startswith("?"):
        # '?' bez poprawnego kodu: meta, jeśli dalej jest czytelny tekst
        if META_START_RE.match(text[1:].lstrip()):
            return ClassifiedLine(
                LineKind.META, text=text, depth=depth, line_no=line_no,
                issue=IssueCode.MALFORMED_FIELD_CODE,
            )
        return ClassifiedLine(
            LineKind.DROPPED, text=text, depth=depth, line_no=line_no,
            issue=IssueCode.MALFORMED_FIELD_CODE,
        )

    if META_START_RE.match(text):
        return ClassifiedLine(LineKind.META, text=text, depth=depth, line_no=line_no)

    return ClassifiedLine(
        LineKind.DROPPED, text=text, depth=depth, line_no=line_no,
        issue=IssueCode.UNRECOGNIZED_LINE,
    )
