"""Komenda: rcat parse — parsowanie tekstu reguł i eksport drzewa do JSON."""

from __future__ import annotations

import argparse
import json
import pathlib

from rich import box
from rich.console import Console
from rich.table import Table

from export import tree_to_dict, validate_export
from rcat._load import load_report
from rules_text import ParseReport

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_issues(report: ParseReport) -> None:
    if not report.issues:
        console.print("[green]Brak problemów.[/green]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("LINIA", justify="right", no_wrap=True, style="dim")
    table.add_column("KOD",   no_wrap=True, style="yellow")
    table.add_column("KOMUNIKAT", no_wrap=False, max_width=70)
    table.add_column("TREŚĆ", no_wrap=False, max_width=50, style="dim")

    for issue in report.issues:
        table.add_row(str(issue.line_no), issue.code, issue.message, issue.text[:80])

    console.print()
    console.print(table)
    summary = ", ".join(
        f"{code}={len(items)}" for code, items in sorted(report.issues_by_code().items())
    )
    console.print(f"  [dim]{len(report.issues)} problemów ({summary})[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    report = load_report(args.source, console)
    data = tree_to_dict(report.root)

    console.print(
        f"Tras: [bold]{report.route_count}[/bold], "
        f"pól: [bold]{report.field_count}[/bold], "
        f"problemów: [bold]{len(report.issues)}[/bold]"
    )

    if args.validate:
        errors = validate_export(data)
        if errors:
            console.print(f"[red]Eksport niezgodny ze schematem ({len(errors)} błąd(ów)):[/red]")
            for e in errors:
                console.print(f"  [yellow]·[/yellow] {e.path}: {e.message}")
            raise SystemExit(1)
        console.print("[green]Eksport zgodny ze schematem.[/green]")

    payload = json.dumps(data, ensure_ascii=False, indent=2)
    if args.out:
        out_path = pathlib.Path(args.out)
        out_path.write_text(payload, encoding="utf-8")
        console.print(f"[green]JSON:[/green] {out_path}")
    else:
        print(payload)

    if args.issues:
        _show_issues(report)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje tekst reguł i eksportuje drzewo do JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje plik (lub URL) z tekstem reguł do drzewa tras i zapisuje je jako JSON.
Błędne linie nie przerywają parsowania — są raportowane jako problemy.

Przykłady:
  rcat parse data.txt
  rcat parse data.txt --out rules.json --issues
  rcat parse https://example.com/data.txt --validate
        """,
    )
    p.add_argument(
        "source",
        metavar="PLIK|URL",
        help="Plik z tekstem reguł albo adres http(s).",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        help="Zapisz JSON do pliku (domyślnie: stdout).",
    )
    p.add_argument(
        "--issues",
        action="store_true",
        help="Wyświetl tabelę problemów parsowania.",
    )
    p.add_argument(
        "--validate",
        action="store_true",
        help="Sprawdź eksport względem schematu JSON przed zapisem.",
    )
    p.set_defaults(func=run)
