"""
export/schema.py — JSON Schema eksportu drzewa reguł i jego walidacja.

validate_export(data) -> list[ExportError]
  Nie rzuca wyjątków: każde naruszenie schematu to ExportError ze ścieżką
  JSON Pointer (np. "/children/0/form/fields/1/spec/kind").
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import jsonschema

_STR_LIST = {"type": "array", "items": {"type": "string"}}
_NUM_OR_NULL = {"type": ["number", "null"]}

RULE_TREE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://rulecat.local/schemas/rule-tree.json",
    "title": "RuleTree",
    "$ref": "#/$defs/node",
    "$defs": {
        "clause": {
            "type": "object",
            "required": ["code", "params"],
            "properties": {
                "code":   {"type": "string", "minLength": 1},
                "params": _STR_LIST,
            },
        },
        "spec": {
            "type": "object",
            "required": ["kind"],
            "properties": {
                "kind": {
                    "enum": ["sum", "loop", "run", "select", "string", "number", "open"],
                },
                "params":     _STR_LIST,
                "editable":   {"type": "boolean"},
                "actions":    {"type": "array", "items": {"$ref": "#/$defs/clause"}},
                "menu_title": {"type": "string"},
                "options":    _STR_LIST,
                "default":    {"type": ["string", "number", "null"]},
                "max_length": {"type": ["integer", "null"], "minimum": 0},
                "multiline":  {"type": "boolean"},
                "min":        _NUM_OR_NULL,
                "max":        _NUM_OR_NULL,
            },
        },
        "meta": {
            "type": "object",
            "required": ["raw", "tokens", "refs", "numbers", "text"],
            "properties": {
                "raw":    {"type": "string"},
                "tokens": _STR_LIST,
                "refs": {
                    "type": "array",
                    "items": {
                        "type": "array",
                        "prefixItems": [{"type": "string"}, {"type": "string"}],
                        "minItems": 2,
                        "maxItems": 2,
                    },
                },
                "numbers": {
                    "type": "array",
                    "items": {"type": "string", "pattern": r"^[+-]?(\d+(\.\d*)?|\.\d+)$"},
                },
                "text": _STR_LIST,
            },
        },
        "field": {
            "type": "object",
            "required": ["code", "label", "key", "meta", "spec"],
            "properties": {
                "code":    {"type": "string", "pattern": r"^([A-Z]{1,3}\d?|#|\$)$"},
                "label":   {"type": "string", "minLength": 1},
                "key":     {"type": "string", "minLength": 1},
                "meta":    {"$ref": "#/$defs/meta"},
                "spec":    {"$ref": "#/$defs/spec"},
                "specs":   {"type": "array", "items": {"$ref": "#/$defs/spec"}, "minItems": 1},
                "clauses": {"type": "array", "items": {"$ref": "#/$defs/clause"}},
                "line_no": {"type": "integer", "minimum": 0},
            },
        },
        "form": {
            "type": "object",
            "required": ["title", "path", "fields", "meta"],
            "properties": {
                "title":  {"type": "string"},
                "path":   _STR_LIST,
                "fields": {"type": "array", "items": {"$ref": "#/$defs/field"}},
                "meta":   _STR_LIST,
            },
        },
        "node": {
            "type": "object",
            "required": ["title", "depth", "path", "children"],
            "properties": {
                "title":    {"type": "string", "minLength": 1},
                "depth":    {"type": "integer", "minimum": -1},
                "path":     _STR_LIST,
                "children": {"type": "array", "items": {"$ref": "#/$defs/node"}},
                "form":     {"$ref": "#/$defs/form"},
            },
        },
    },
}


@dataclass(slots=True)
class ExportError:
    """
    Pojedyncze naruszenie schematu eksportu.

    - path:    JSON Pointer do miejsca błędu
    - message: komunikat jsonschema
    """

    path: str
    message: str


def validate_export(data: Any, schema: dict[str, Any] | None = None) -> list[ExportError]:
    validator = jsonschema.Draft202012Validator(schema or RULE_TREE_SCHEMA)
    errors: list[ExportError] = []
    for e in sorted(validator.iter_errors(data), key=lambda err: [str(p) for p in err.absolute_path]):
        path = (
            "/" + "/".join(str(p) for p in e.absolute_path)
            if e.absolute_path
            else "/"
        )
        errors.append(ExportError(path=path, message=e.message))
    return errors
