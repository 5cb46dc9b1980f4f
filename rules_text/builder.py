"""
rules_text/builder.py — budowa drzewa tras z sklasyfikowanych linii.

Stan (lokalny dla jednej instancji — każde parsowanie ma własny):
  stos otwartych tras (na dnie syntetyczny korzeń, depth = -1)
  kursor "ostatni posiadacz pól" — trasa, do której trafiają linie meta

Algorytm dla linii:
  ROUTE — zdejmuj ze stosu trasy o depth >= depth linii, dołącz nową trasę
          do wierzchołka, połóż ją na stosie; staje się posiadaczem pól
  FIELD — pole do formularza wierzchołka stosu (formularz tworzony leniwie)
  META  — tekst do formularza posiadacza pól; bez posiadacza → pominięta

Skoki głębokości (np. 0 → 3) są dozwolone i nie tworzą węzłów pośrednich.
"""

from __future__ import annotations

from collections.abc import Iterable

from data_model import Field, RuleNode, make_root

from .classifier import ClassifiedLine, LineKind
from .config import DEFAULT_CONFIG, OrphanPolicy, ParserConfig
from .issues import IssueCode, LineIssue
from .paths import annotate_paths
from .spec_deriver import derive_specs
from .tokenizer import parse_field_line

_ISSUE_MESSAGES: dict[IssueCode, str] = {
    IssueCode.UNRECOGNIZED_LINE:    "Linia nie pasuje do trasy, pola ani meta — pominięta.",
    IssueCode.MALFORMED_FIELD_CODE: "Niepoprawny kod pola po '?' — linia nie jest polem.",
    IssueCode.EMPTY_ROUTE_TITLE:    "Trasa bez tytułu — pominięta.",
}


class TreeBuilder:
    """
    Użycie:
        builder = TreeBuilder(config)
        for line in classified_lines:
            builder.feed(line)
        root = builder.finish()
    """

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG) -> None:
        self._config = config
        self.root: RuleNode = make_root()
        self.issues: list[LineIssue] = []
        self._stack: list[RuleNode] = [self.root]
        self._holder: RuleNode | None = None
        self._finished = False

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def feed(self, line: ClassifiedLine) -> None:
        if self._finished:
            raise RuntimeError("TreeBuilder.finish() już wywołane — drzewo jest zamknięte.")

        if line.issue is not None and line.issue in _ISSUE_MESSAGES:
            self._report(line.issue, line, _ISSUE_MESSAGES[line.issue])

        if line.kind is LineKind.ROUTE:
            self._open_route(line)
        elif line.kind is LineKind.FIELD:
            self._add_field(line)
        elif line.kind is LineKind.META:
            self._add_meta(line)

    def feed_all(self, lines: Iterable[ClassifiedLine]) -> None:
        for line in lines:
            self.feed(line)

    def finish(self) -> RuleNode:
        """Zamyka budowę i nadaje ścieżki (dokładnie raz)."""
        if self._finished:
            raise RuntimeError("TreeBuilder.finish() można wywołać tylko raz.")
        self._finished = True
        annotate_paths(self.root)
        return self.root

    # ------------------------------------------------------------------
    # Obsługa linii
    # ------------------------------------------------------------------

    def _open_route(self, line: ClassifiedLine) -> None:
        while self._stack[-1] is not self.root and self._stack[-1].depth >= line.depth:
            self._stack.pop()
        node = RuleNode(title=line.text, depth=line.depth, line_no=line.line_no)
        self._stack[-1].children.append(node)
        self._stack.append(node)
        self._holder = node

    def _add_field(self, line: ClassifiedLine) -> None:
        current = self._stack[-1]

        if current is self.root:
            if self._config.orphan_policy is OrphanPolicy.DROP:
                self._report(IssueCode.ORPHAN_FIELD, line, "Pole przed pierwszą trasą — pominięte.")
                return
            self._report(
                IssueCode.ORPHAN_FIELD, line,
                "Pole przed pierwszą trasą — dołączone do formularza korzenia.",
            )

        parts = parse_field_line(line.text)
        form = current.ensure_form()
        self._holder = current

        if parts is None:
            form.meta.append(line.text)
            return

        problems: list[str] = []
        clauses, specs = derive_specs(parts.code, parts.meta, problems)
        for value in problems:
            self._report(
                IssueCode.UNPARSABLE_NUMBER, line,
                f"Parametr '{value}' nie jest liczbą — ograniczenie pola nieustawione.",
            )

        if any(f.key == parts.key for f in form.fields):
            self._report(
                IssueCode.DUPLICATE_KEY, line,
                f"Klucz '{parts.key}' już istnieje w formularzu '{form.title}' — wygrywa ostatnie pole.",
            )

        form.fields.append(Field(
            code=parts.code,
            label=parts.label,
            key=parts.key,
            meta=parts.meta,
            spec=specs[0],
            specs=specs,
            clauses=clauses,
            line_no=line.line_no,
        ))

    def _add_meta(self, line: ClassifiedLine) -> None:
        if self._holder is None:
            self._report(IssueCode.ORPHAN_META, line, "Linia meta bez poprzedzającej trasy lub pola — pominięta.")
            return
        self._holder.ensure_form().meta.append(line.text)

    def _report(self, code: IssueCode, line: ClassifiedLine, message: str) -> None:
        self.issues.append(LineIssue(code=code, line_no=line.line_no, message=message, text=line.text))
