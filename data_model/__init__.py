"""
data_model — struktury danych drzewa reguł rulecat.

Użycie:
  from data_model import RuleNode, Form, Field, MetaTail, NumberSpec, ...

Moduły:
  tree    — RuleNode, Form, make_root, ROOT_TITLE, ROOT_DEPTH
  fields  — Field, MetaTail, RefPair
  specs   — SpecKind, SpecClause, FieldSpec oraz warianty:
            SumSpec, LoopSpec, RunSpec, SelectSpec, StringSpec,
            NumberSpec, OpenSpec

Kształt drzewa:
  RuleNode(root) → children: list[RuleNode] → form: Form | None
                 → fields: list[Field] → spec: FieldSpec
"""

from .specs import (
    SpecKind,
    SpecClause,
    FieldSpec,
    SumSpec,
    LoopSpec,
    RunSpec,
    SelectSpec,
    StringSpec,
    NumberSpec,
    OpenSpec,
)
from .fields import (
    RefPair,
    MetaTail,
    Field,
)
from .tree import (
    ROOT_TITLE,
    ROOT_DEPTH,
    Form,
    RuleNode,
    make_root,
)

__all__ = [
    # specs
    "SpecKind",
    "SpecClause",
    "FieldSpec",
    "SumSpec",
    "LoopSpec",
    "RunSpec",
    "SelectSpec",
    "StringSpec",
    "NumberSpec",
    "OpenSpec",
    # fields
    "RefPair",
    "MetaTail",
    "Field",
    # tree
    "ROOT_TITLE",
    "ROOT_DEPTH",
    "Form",
    "RuleNode",
    "make_root",
]
