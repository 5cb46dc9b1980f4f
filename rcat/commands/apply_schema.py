"""Komenda: rcat apply-schema — tworzy tabelę wartości formularzy (db/schema.sql)."""

from __future__ import annotations

import argparse
import pathlib

from rich.console import Console

from rcat._db import get_connection
from store import SCHEMA_PATH, apply_schema

console = Console()


def run(args: argparse.Namespace) -> None:
    schema_path = pathlib.Path(args.schema) if args.schema else SCHEMA_PATH
    try:
        sql = schema_path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Nie można odczytać schematu:[/red] {schema_path} ({e})")
        raise SystemExit(1)

    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    try:
        n = apply_schema(conn, sql)
    except Exception as e:
        console.print(f"[red]Błąd wykonania schematu:[/red] {e}")
        raise SystemExit(1)
    finally:
        conn.close()

    console.print(f"[green]Tabela form_value gotowa[/green] ({schema_path.name}, instrukcji: {n})")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "apply-schema",
        help="Tworzy tabelę form_value dla 'rcat values' (idempotentne).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przygotowuje bazę PostgreSQL pod 'rcat values': wykonuje db/schema.sql
(tabela form_value kluczowana ścieżką trasy i kluczem pola).
Połączenie z PGHOST / PGPORT / PGDATABASE / PGUSER / PGPASSWORD (.env).

Przykład:
  rcat apply-schema
  rcat apply-schema --schema moj_schemat.sql
        """,
    )
    p.add_argument(
        "--schema",
        metavar="PLIK.sql",
        help="Własny plik schematu zamiast db/schema.sql.",
    )
    p.set_defaults(func=run)
