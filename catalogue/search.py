"""
catalogue/search.py — przeglądanie i filtrowanie drzewa tras.

Publiczne API:
  iter_nodes(root)            -> Iterator[tuple[RuleNode, int]]  (pre-order, bez korzenia)
  matches(node, query)        -> bool
  filter_tree(root, query)    -> list[tuple[RuleNode, int]]
  find_by_path(root, path)    -> RuleNode | None
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from data_model import RuleNode


def iter_nodes(root: RuleNode) -> Iterator[tuple[RuleNode, int]]:
    """(węzeł, poziom wyświetlania) w kolejności źródła; dzieci korzenia mają poziom 0."""
    stack: list[tuple[RuleNode, int]] = [(c, 0) for c in reversed(root.children)]
    while stack:
        node, level = stack.pop()
        yield node, level
        stack.extend((c, level + 1) for c in reversed(node.children))


def matches(node: RuleNode, query: str) -> bool:
    """Tytuł albo etykieta dowolnego pola zawiera frazę (bez rozróżniania wielkości liter)."""
    q = (query or "").strip().casefold()
    if not q:
        return True
    if q in node.title.casefold():
        return True
    if node.form is not None:
        return any(q in (f.label or "").casefold() for f in node.form.fields)
    return False


def filter_tree(root: RuleNode, query: str) -> list[tuple[RuleNode, int]]:
    """
    Widoczne wiersze drzewa dla frazy: węzły pasujące oraz ich przodkowie
    (żeby pasujący węzeł dało się umiejscowić). Pusta fraza → całe drzewo.
    """
    rows = list(iter_nodes(root))
    if not (query or "").strip():
        return rows

    parent: dict[int, RuleNode | None] = {id(c): None for c in root.children}
    for node, _ in rows:
        for child in node.children:
            parent[id(child)] = node

    visible: set[int] = set()
    for node, _ in rows:
        if not matches(node, query):
            continue
        current: RuleNode | None = node
        while current is not None and id(current) not in visible:
            visible.add(id(current))
            current = parent[id(current)]

    return [(node, level) for node, level in rows if id(node) in visible]


def find_by_path(root: RuleNode, path: Sequence[str]) -> RuleNode | None:
    """Pierwszy (w kolejności źródła) węzeł o dokładnie tej ścieżce."""
    wanted = list(path)
    if not wanted:
        return root
    for node, _ in iter_nodes(root):
        if node.path == wanted:
            return node
    return None
