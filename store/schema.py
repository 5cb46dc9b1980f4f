"""
store/schema.py — schemat bazy wartości (db/schema.sql) i jego wykonanie.

Plik schematu to ciąg instrukcji zakończonych średnikiem na końcu linii;
wszystkie są idempotentne (IF NOT EXISTS), więc wykonuje się je osobno
w trybie autocommit.
"""

from __future__ import annotations

import pathlib

SCHEMA_PATH = pathlib.Path(__file__).resolve().parent.parent / "db" / "schema.sql"


def split_statements(sql: str) -> list[str]:
    """
    Instrukcje SQL w kolejności z pliku. Komentarze (--) przed instrukcją
    zostają przy niej; końcowy blok samych komentarzy nie jest instrukcją.
    """
    stmts: list[str] = []
    pending: list[str] = []

    for line in sql.splitlines(keepends=True):
        pending.append(line)
        if not line.rstrip().endswith(";"):
            continue
        stmt = "".join(pending).strip()
        pending = []
        if stmt:
            stmts.append(stmt)

    tail = [ln.strip() for ln in pending]
    if any(ln and not ln.startswith("--") for ln in tail):
        stmts.append("".join(pending).strip())

    return stmts


def apply_schema(conn, sql: str) -> int:
    """Wykonuje każdą instrukcję `sql` w autocommit; zwraca ich liczbę."""
    stmts = split_statements(sql)
    conn.autocommit = True
    with conn.cursor() as cur:
        for stmt in stmts:
            cur.execute(stmt)
    return len(stmts)
