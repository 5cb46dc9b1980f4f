"""
export — eksport drzewa reguł do JSON i walidacja eksportu.

Publiczne API:
  tree_to_dict(root)        -> dict
  dump_json(root, indent)   -> str
  RULE_TREE_SCHEMA          JSON Schema (draft 2020-12)
  validate_export(data)     -> list[ExportError]
"""

from .serialize import (
    clause_to_dict,
    dump_json,
    field_to_dict,
    form_to_dict,
    meta_to_dict,
    spec_to_dict,
    tree_to_dict,
)
from .schema import RULE_TREE_SCHEMA, ExportError, validate_export

__all__ = [
    "clause_to_dict",
    "dump_json",
    "field_to_dict",
    "form_to_dict",
    "meta_to_dict",
    "spec_to_dict",
    "tree_to_dict",
    "RULE_TREE_SCHEMA",
    "ExportError",
    "validate_export",
]
