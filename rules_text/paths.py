"""rules_text/paths.py — nadawanie ścieżek hierarchicznych gotowemu drzewu."""

from __future__ import annotations

from data_model import RuleNode


def annotate_paths(root: RuleNode) -> None:
    """
    path(węzeł) = path(rodzic) + [tytuł]; korzeń ma pustą ścieżkę,
    puste tytuły są pomijane. Formularz dostaje tę samą ścieżkę co właściciel.

    Iteracyjnie (jawny stos), więc głębokość dokumentu nie ogranicza rekursji.
    """
    root.path = []
    if root.form is not None:
        root.form.path = []

    stack: list[RuleNode] = [root]
    while stack:
        node = stack.pop()
        for child in node.children:
            child.path = [*node.path, child.title] if child.title else list(node.path)
            if child.form is not None:
                child.form.path = list(child.path)
            stack.append(child)
