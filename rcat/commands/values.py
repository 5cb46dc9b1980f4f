"""Komenda: rcat values — wartości formularzy w bazie (zapis / odczyt / czyszczenie)."""

from __future__ import annotations

import argparse
import json
import pathlib

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from catalogue import find_by_path
from rcat._db import get_connection
from rcat._load import load_config, load_report, parse_path_arg
from store import (
    delete_values,
    fetch_values,
    filter_known_fields,
    list_documents,
    path_key,
    upsert_values,
)

console = Console()


def _connect():
    try:
        return get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)


def _read_values(raw: str) -> dict:
    """Wartości z pliku JSON albo z par KLUCZ=WARTOŚĆ rozdzielonych przecinkami."""
    candidate = pathlib.Path(raw)
    if candidate.suffix.lower() == ".json" and candidate.is_file():
        try:
            data = json.loads(candidate.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            console.print(f"[red]Błąd parsowania JSON:[/red] {e}")
            raise SystemExit(1)
        if not isinstance(data, dict):
            console.print("[red]Plik wartości musi zawierać obiekt JSON.[/red]")
            raise SystemExit(1)
        return data

    values: dict[str, str] = {}
    for part in raw.split(","):
        if "=" not in part:
            continue
        key, value = part.split("=", 1)
        values[key.strip()] = value.strip()
    return values


# ---------------------------------------------------------------------------
# Akcje
# ---------------------------------------------------------------------------

def _save(args: argparse.Namespace) -> None:
    cfg = load_config()
    sep = cfg.path_separator
    report = load_report(args.source, console, cfg)
    path = parse_path_arg(args.path, sep)
    node = find_by_path(report.root, path)
    if node is None or node.form is None:
        console.print(f"[red]Trasa bez formularza lub nieznana:[/red] {escape(path_key(path, sep))}")
        raise SystemExit(1)

    raw_values = _read_values(args.values)
    values = filter_known_fields(node.form, raw_values)
    skipped = sorted(set(raw_values) - set(values))
    if skipped:
        console.print(f"[yellow]Pominięto nieznane klucze:[/yellow] {', '.join(skipped)}")

    conn = _connect()
    try:
        with conn:
            n = upsert_values(conn, node.path, values, replace=args.replace, separator=sep)
    finally:
        conn.close()
    console.print(
        f"[green]Zapisano {n} wartości[/green] dla [bold]{escape(path_key(node.path, sep))}[/bold]"
    )


def _show(args: argparse.Namespace) -> None:
    sep = load_config().path_separator
    path = parse_path_arg(args.path, sep)
    conn = _connect()
    try:
        with conn:
            values = fetch_values(conn, path, separator=sep)
    finally:
        conn.close()

    if not values:
        console.print("[yellow]Brak zapisanych wartości.[/yellow]")
        return
    if args.json_output:
        print(json.dumps(values, ensure_ascii=False, indent=2))
        return

    table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold white")
    table.add_column("KEY", style="bold cyan", no_wrap=True)
    table.add_column("WARTOŚĆ")
    for key, value in values.items():
        table.add_row(escape(key), escape(value))
    console.print(table)


def _clear(args: argparse.Namespace) -> None:
    sep = load_config().path_separator
    path = parse_path_arg(args.path, sep)
    conn = _connect()
    try:
        with conn:
            n = delete_values(conn, path, separator=sep)
    finally:
        conn.close()
    console.print(f"[green]Usunięto {n} wartości[/green] dla [bold]{escape(path_key(path, sep))}[/bold]")


def _list(args: argparse.Namespace) -> None:
    conn = _connect()
    try:
        with conn:
            docs = list_documents(conn)
    finally:
        conn.close()

    if not docs:
        console.print("[yellow]Brak zapisanych formularzy.[/yellow]")
        return
    table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold white")
    table.add_column("ŚCIEŻKA", style="bold")
    table.add_column("WARTOŚCI", justify="right")
    for key, count in docs:
        table.add_row(escape(key), str(count))
    console.print(table)


def run(args: argparse.Namespace) -> None:
    actions = {"save": _save, "show": _show, "clear": _clear, "list": _list}
    actions[args.action](args)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "values",
        help="Zapis / odczyt / czyszczenie wartości formularzy w bazie.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wartości formularzy są kluczowane ścieżką trasy (tytuły złączone '>',
separator zmienia RCAT_PATH_SEPARATOR) i kluczem pola. Wymaga tabeli
form_value (rcat apply-schema).

Przykłady:
  rcat values save data.txt "Продаж>Замовлення" "сума=150,клієнт=ТОВ Ромашка"
  rcat values save data.txt "Продаж>Замовлення" wartosci.json --replace
  rcat values show "Продаж>Замовлення"
  rcat values clear "Продаж>Замовлення"
  rcat values list
        """,
    )
    actions = p.add_subparsers(title="akcje", metavar="<akcja>", dest="action")
    actions.required = True

    save = actions.add_parser("save", help="Zapisz wartości pól trasy.")
    save.add_argument("source", metavar="PLIK|URL", help="Plik z tekstem reguł albo adres http(s).")
    save.add_argument("path", metavar="ŚCIEŻKA", help="Ścieżka trasy.")
    save.add_argument("values", metavar="WARTOŚCI", help="Plik .json albo 'klucz=wartość,...'.")
    save.add_argument(
        "--replace",
        action="store_true",
        help="Usuń poprzednie wartości trasy przed zapisem.",
    )

    show = actions.add_parser("show", help="Pokaż zapisane wartości trasy.")
    show.add_argument("path", metavar="ŚCIEŻKA", help="Ścieżka trasy.")
    show.add_argument("--json-output", action="store_true", help="Wypisz wartości jako JSON.")

    clear = actions.add_parser("clear", help="Usuń zapisane wartości trasy.")
    clear.add_argument("path", metavar="ŚCIEŻKA", help="Ścieżka trasy.")

    actions.add_parser("list", help="Listuj trasy z zapisanymi wartościami.")

    p.set_defaults(func=run)
