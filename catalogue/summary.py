"""
catalogue/summary.py — opis węzła i podpowiedzi dla formularzy.

Formularz renderuje jedno wejście na pole (kluczem jest field.key);
te funkcje dostarczają danych pomocniczych bez sięgania do parsera.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from data_model import Field, RuleNode

BREADCRUMB_SEPARATOR = " / "
DEFAULT_REF_PLACEHOLDER = "код/посилання"

_OPTION_VALUE_RE = re.compile(r"^\d+$")


@dataclass(slots=True)
class NodeSummary:
    breadcrumbs: str
    field_keys: list[str] = field(default_factory=list)
    child_count: int = 0
    field_count: int = 0


def describe_node(node: RuleNode) -> NodeSummary:
    fields = node.form.fields if node.form is not None else []
    return NodeSummary(
        breadcrumbs=BREADCRUMB_SEPARATOR.join(node.path),
        field_keys=[f"{f.key} ({f.spec.kind})" for f in fields],
        child_count=len(node.children),
        field_count=len(fields),
    )


def select_pairs(f: Field) -> list[tuple[str, str]]:
    """
    Pary (wartość, etykieta) z tokenów ogona: liczba całkowita, po której
    stoi etykieta, np. "1·Готівка·2·Картка" → [("1", "Готівка"), ("2", "Картка")].
    """
    tokens = f.meta.tokens
    pairs: list[tuple[str, str]] = []
    i = 0
    while i < len(tokens):
        if _OPTION_VALUE_RE.match(tokens[i]) and i + 1 < len(tokens):
            pairs.append((tokens[i], tokens[i + 1]))
            i += 2
            continue
        i += 1
    return pairs


def ref_placeholder(f: Field) -> str:
    """Podpowiedź dla pola-referencji: pierwsza para R·<numer> z ogona."""
    for ref in f.meta.refs:
        if ref.code == "R" and ref.arg.isdigit():
            return f"посилання на {ref.arg}"
    return DEFAULT_REF_PLACEHOLDER
