"""
store — utrwalanie wartości formularzy (PostgreSQL, tabela form_value).

Publiczne API:
  path_key, filter_known_fields,
  upsert_values, fetch_values, delete_values, list_documents
  SCHEMA_PATH, split_statements, apply_schema
"""

from .schema import SCHEMA_PATH, apply_schema, split_statements
from .values import (
    delete_values,
    fetch_values,
    filter_known_fields,
    list_documents,
    path_key,
    upsert_values,
)

__all__ = [
    "SCHEMA_PATH",
    "apply_schema",
    "delete_values",
    "fetch_values",
    "filter_known_fields",
    "list_documents",
    "path_key",
    "split_statements",
    "upsert_values",
]
