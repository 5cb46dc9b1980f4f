"""
export/serialize.py — drzewo reguł → zwykłe struktury (dict/list/str/liczby).

Kolejność dzieci i pól jest kolejnością źródła; ten sam tekst daje
identyczny JSON (determinizm). Każda specyfikacja ma klucz "kind".
"""

from __future__ import annotations

import json
from typing import Any

from data_model import (
    Field,
    FieldSpec,
    Form,
    LoopSpec,
    MetaTail,
    NumberSpec,
    OpenSpec,
    RuleNode,
    RunSpec,
    SelectSpec,
    SpecClause,
    StringSpec,
    SumSpec,
)


def clause_to_dict(clause: SpecClause) -> dict[str, Any]:
    return {"code": clause.code, "params": list(clause.params)}


def spec_to_dict(spec: FieldSpec) -> dict[str, Any]:
    out: dict[str, Any] = {"kind": str(spec.kind)}
    match spec:
        case SumSpec():
            pass
        case LoopSpec(params=params) | OpenSpec(params=params):
            out["params"] = list(params)
        case RunSpec(actions=actions, editable=editable):
            out["editable"] = editable
            out["actions"] = [clause_to_dict(a) for a in actions]
        case SelectSpec(menu_title=menu_title, options=options):
            out["menu_title"] = menu_title
            out["options"] = list(options)
        case StringSpec(default=default, max_length=max_length, multiline=multiline):
            out["default"] = default
            out["max_length"] = max_length
            out["multiline"] = multiline
        case NumberSpec(default=default, min=lo, max=hi):
            out["default"] = default
            out["min"] = lo
            out["max"] = hi
    return out


def meta_to_dict(meta: MetaTail) -> dict[str, Any]:
    return {
        "raw":     meta.raw,
        "tokens":  list(meta.tokens),
        "refs":    [[r.code, r.arg] for r in meta.refs],
        "numbers": list(meta.numbers),
        "text":    list(meta.text),
    }


def field_to_dict(f: Field) -> dict[str, Any]:
    return {
        "code":    f.code,
        "label":   f.label,
        "key":     f.key,
        "meta":    meta_to_dict(f.meta),
        "spec":    spec_to_dict(f.spec),
        "specs":   [spec_to_dict(s) for s in f.specs],
        "clauses": [clause_to_dict(c) for c in f.clauses],
        "line_no": f.line_no,
    }


def form_to_dict(form: Form) -> dict[str, Any]:
    return {
        "title":  form.title,
        "path":   list(form.path),
        "fields": [field_to_dict(f) for f in form.fields],
        "meta":   list(form.meta),
    }


def tree_to_dict(node: RuleNode) -> dict[str, Any]:
    out: dict[str, Any] = {
        "title":    node.title,
        "depth":    node.depth,
        "path":     list(node.path),
        "children": [tree_to_dict(c) for c in node.children],
    }
    if node.form is not None:
        out["form"] = form_to_dict(node.form)
    return out


def dump_json(root: RuleNode, indent: int | None = 2) -> str:
    return json.dumps(tree_to_dict(root), ensure_ascii=False, indent=indent)
