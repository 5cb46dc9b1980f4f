"""Komenda: rcat validate-export — waliduje plik JSON eksportu drzewa reguł."""

from __future__ import annotations

import argparse
import dataclasses
import json
import pathlib
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from export import validate_export

console = Console()


def run(args: argparse.Namespace) -> None:
    path = pathlib.Path(args.export_file)
    if not path.exists():
        console.print(f"[red]Brak pliku eksportu:[/red] {path}")
        raise SystemExit(1)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        console.print(f"[red]Błąd parsowania JSON:[/red] {exc}")
        raise SystemExit(1)

    errors = validate_export(data)

    if not errors:
        console.print(f"[green]OK[/green]  Eksport [bold]{path.name}[/bold] jest zgodny ze schematem.")
    else:
        console.print(
            f"[red]BŁĄD[/red]  Eksport [bold]{path.name}[/bold] — {len(errors)} błąd(ów)."
        )
        table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        table.add_column("Ścieżka", style="cyan", no_wrap=True)
        table.add_column("Komunikat")
        for e in errors:
            table.add_row(e.path, e.message)
        console.print(table)

    if args.json_output:
        out = {
            "is_valid": not errors,
            "errors": [dataclasses.asdict(e) for e in errors],
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))

    if errors:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "validate-export",
        help="Waliduje plik JSON eksportu względem schematu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Sprawdza plik JSON utworzony przez `rcat parse` względem schematu drzewa
reguł (JSON Schema draft 2020-12).

Przykłady:
  rcat validate-export rules.json
  rcat validate-export rules.json --json-output
        """,
    )
    p.add_argument("export_file", metavar="PLIK.json", help="Plik JSON eksportu.")
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport walidacji jako JSON na stdout.",
    )
    p.set_defaults(func=run)
