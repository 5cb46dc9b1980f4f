"""
rules_text/issues.py — diagnostyka parsowania (błędy lokalne dla linii).

Żaden z tych przypadków nie przerywa parsowania: linia jest pomijana,
degradowana do meta albo ograniczenie pola zostaje nieustawione.
ParseReport zbiera drzewo i listę problemów w kolejności linii.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from data_model import RuleNode


class IssueCode(StrEnum):
    """Stałe kody problemów parsera."""

    UNRECOGNIZED_LINE    = "W_UNRECOGNIZED_LINE"     # nie pasuje do trasy/pola/meta → pominięta
    MALFORMED_FIELD_CODE = "W_MALFORMED_FIELD_CODE"  # '?' bez poprawnego kodu → meta lub pominięta
    UNPARSABLE_NUMBER    = "W_UNPARSABLE_NUMBER"     # parametr liczbowy nieliczbowy → nieustawiony
    ORPHAN_FIELD         = "W_ORPHAN_FIELD"          # pole przed pierwszą trasą
    ORPHAN_META          = "W_ORPHAN_META"           # meta bez pola/trasy przed nią → pominięta
    EMPTY_ROUTE_TITLE    = "W_EMPTY_ROUTE_TITLE"     # ":" bez tytułu → pominięta
    DUPLICATE_KEY        = "W_DUPLICATE_KEY"         # dwa pola z tym samym key w formularzu


@dataclass(slots=True)
class LineIssue:
    """
    Pojedynczy problem w tekście źródłowym.

    - code:    IssueCode
    - line_no: 1-based numer linii
    - message: czytelny opis
    - text:    oczyszczona treść linii (bez znaków sterujących)
    """

    code: IssueCode
    line_no: int
    message: str
    text: str = ""


@dataclass(slots=True)
class ParseReport:
    """Wynik parsowania: korzeń drzewa + problemy (nigdy wyjątki)."""

    root: RuleNode
    issues: list[LineIssue] = field(default_factory=list)

    @property
    def route_count(self) -> int:
        count = 0
        stack = list(self.root.children)
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count

    @property
    def field_count(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.form is not None:
                count += len(node.form.fields)
            stack.extend(node.children)
        return count

    def issues_by_code(self) -> dict[IssueCode, list[LineIssue]]:
        grouped: dict[IssueCode, list[LineIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.code, []).append(issue)
        return grouped
