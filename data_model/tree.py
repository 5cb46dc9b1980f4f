"""
data_model/tree.py — drzewo reguł: trasy (RuleNode) i ich formularze.

Drzewo budowane jest raz, z jednego tekstu; kolejny parse tworzy nowe drzewo
zamiast modyfikować istniejące. Korzeń jest wartownikiem (ROOT_TITLE,
ROOT_DEPTH) i nigdy nie pojawia się w ścieżkach.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .fields import Field

ROOT_TITLE = "ROOT"
ROOT_DEPTH = -1


@dataclass(slots=True)
class Form:
    """
    Formularz należący do jednej trasy; title i path kopiują właściciela.

    Dwa pola o tym samym `key` są dozwolone — `by_key()` zwraca ostatnie
    (last write wins).
    """
    title: str
    path: list[str] = field(default_factory=list)
    fields: list[Field] = field(default_factory=list)
    meta: list[str] = field(default_factory=list)

    def by_key(self) -> dict[str, Field]:
        return {f.key: f for f in self.fields}


@dataclass(slots=True)
class RuleNode:
    title: str
    depth: int
    children: list[RuleNode] = field(default_factory=list)
    form: Form | None = None
    path: list[str] = field(default_factory=list)
    line_no: int = 0

    @property
    def is_root(self) -> bool:
        return self.depth == ROOT_DEPTH and self.title == ROOT_TITLE

    def ensure_form(self) -> Form:
        """Zwraca formularz trasy, tworząc go przy pierwszym polu / meta."""
        if self.form is None:
            self.form = Form(title=self.title)
        return self.form


def make_root() -> RuleNode:
    return RuleNode(title=ROOT_TITLE, depth=ROOT_DEPTH)
