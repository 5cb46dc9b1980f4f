"""
store/values.py — utrwalanie wartości formularzy w PostgreSQL.

Wartości są kluczowane ścieżką trasy (path_key: elementy złączone separatorem,
domyślnie '>', w CLI z ParserConfig.path_separator) i kluczem pola (field.key).
Parser niczego nie zapisuje — to osobny współpracownik, który czyta tylko
`form.path` i `field.key`.

Publiczne API:
  path_key(path, separator)                     -> str
  filter_known_fields(form, values)             -> dict[str, str]
  upsert_values(conn, path, values, replace)    -> int
  fetch_values(conn, path)                      -> dict[str, str]
  delete_values(conn, path)                     -> int
  list_documents(conn)                          -> list[tuple[str, int]]

Funkcje przyjmujące `path` mają też argument `separator` (domyślnie PATH_SEPARATOR).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from psycopg2.extras import execute_values

from data_model import Form
from rules_text.config import PATH_SEPARATOR

_UPSERT_SQL = """
    INSERT INTO form_value (path_key, field_key, value)
    VALUES %s
    ON CONFLICT (path_key, field_key) DO UPDATE SET
        value      = EXCLUDED.value,
        updated_at = now()
"""

_SELECT_SQL = """
    SELECT field_key, value
    FROM form_value
    WHERE path_key = %s
    ORDER BY field_key
"""

_DELETE_SQL = "DELETE FROM form_value WHERE path_key = %s"

_LIST_SQL = """
    SELECT path_key, COUNT(*)
    FROM form_value
    GROUP BY path_key
    ORDER BY path_key
"""


def path_key(path: Sequence[str], separator: str = PATH_SEPARATOR) -> str:
    return separator.join(path)


def filter_known_fields(form: Form, values: Mapping[str, object]) -> dict[str, str]:
    """Tylko klucze obecne w formularzu; wartości jako tekst (None → "")."""
    known = form.by_key()
    return {
        key: "" if value is None else str(value)
        for key, value in values.items()
        if key in known
    }


def upsert_values(
    conn,
    path: Sequence[str],
    values: Mapping[str, str],
    replace: bool = False,
    separator: str = PATH_SEPARATOR,
) -> int:
    """
    Zapisuje wartości pól dla trasy. `replace=True` najpierw usuwa wszystkie
    poprzednie wartości tej trasy (zapis całego formularza).

    Zwraca liczbę zapisanych wartości. Nie zatwierdza transakcji.
    """
    key = path_key(path, separator)
    rows = [(key, field_key, value) for field_key, value in values.items()]
    with conn.cursor() as cur:
        if replace:
            cur.execute(_DELETE_SQL, (key,))
        if rows:
            execute_values(cur, _UPSERT_SQL, rows)
    return len(rows)


def fetch_values(
    conn,
    path: Sequence[str],
    separator: str = PATH_SEPARATOR,
) -> dict[str, str]:
    with conn.cursor() as cur:
        cur.execute(_SELECT_SQL, (path_key(path, separator),))
        rows = cur.fetchall()
    return {field_key: value for field_key, value in rows}


def delete_values(conn, path: Sequence[str], separator: str = PATH_SEPARATOR) -> int:
    with conn.cursor() as cur:
        cur.execute(_DELETE_SQL, (path_key(path, separator),))
        return cur.rowcount


def list_documents(conn) -> list[tuple[str, int]]:
    with conn.cursor() as cur:
        cur.execute(_LIST_SQL)
        return [(key, int(n)) for key, n in cur.fetchall()]
