"""Komenda: rcat node — szczegóły jednej trasy (ścieżka, pola, meta)."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from catalogue import describe_node, find_by_path, ref_placeholder, select_pairs
from data_model import (
    Field,
    LoopSpec,
    NumberSpec,
    OpenSpec,
    RunSpec,
    SelectSpec,
    StringSpec,
    SumSpec,
)
from rcat._load import load_config, load_report, parse_path_arg

console = Console(width=200)


def _fmt_num(value: float | None) -> str:
    if value is None:
        return "-"
    return str(int(value)) if value.is_integer() else str(value)


def _fmt_spec(f: Field) -> str:
    match f.spec:
        case SumSpec():
            return "suma"
        case LoopSpec(params=params):
            return "kolumny: " + ", ".join(params) if params else "-"
        case RunSpec(actions=actions, editable=editable):
            acts = "; ".join(f"{a.code} {' '.join(a.params)}".strip() for a in actions)
            return f"{'edytowalne' if editable else 'tylko odczyt'}: {acts}"
        case SelectSpec(menu_title=title, options=options):
            pairs = select_pairs(f)
            opts = ", ".join(f"{v}={lbl}" for v, lbl in pairs) if pairs else ", ".join(options)
            return f"{title}: {opts}" if title else opts
        case StringSpec(default=default, max_length=max_length, multiline=multiline):
            parts = []
            if default:
                parts.append(f"domyślnie={default}")
            if max_length is not None:
                parts.append(f"max={max_length}")
            if multiline:
                parts.append("wiele linii")
            if f.code.startswith("R"):
                parts.append(ref_placeholder(f))
            return ", ".join(parts) or "-"
        case NumberSpec(default=default, min=lo, max=hi):
            return f"domyślnie={_fmt_num(default)}, min={_fmt_num(lo)}, max={_fmt_num(hi)}"
        case OpenSpec(params=params):
            return " · ".join(params) or "-"
    return "-"


def run(args: argparse.Namespace) -> None:
    cfg = load_config()
    report = load_report(args.source, console, cfg)
    path = parse_path_arg(args.path, cfg.path_separator)
    node = find_by_path(report.root, path)
    if node is None or node.is_root:
        console.print(f"[red]Nie znaleziono trasy:[/red] {escape(f' {cfg.path_separator} '.join(path))}")
        raise SystemExit(1)

    summary = describe_node(node)
    console.print(f"[bold]{escape(node.title)}[/bold]")
    console.print(f"  [dim]Ścieżka:[/dim] {escape(summary.breadcrumbs)}")
    console.print(
        f"  [dim]Węzłów: {summary.child_count} · Pól: {summary.field_count}[/dim]"
    )

    if node.form is None:
        console.print("[yellow]Brak pól dla tej trasy.[/yellow]")
        return

    if node.form.fields:
        table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold white")
        table.add_column("KOD",   no_wrap=True, style="yellow")
        table.add_column("KEY",   no_wrap=True, style="bold cyan")
        table.add_column("ETYKIETA")
        table.add_column("TYP",   no_wrap=True)
        table.add_column("SZCZEGÓŁY", max_width=70)
        for f in node.form.fields:
            table.add_row(
                escape(f.code), escape(f.key), escape(f.label),
                str(f.spec.kind), escape(_fmt_spec(f)),
            )
        console.print(table)

    if node.form.meta:
        console.print("[dim]Meta:[/dim]")
        for line in node.form.meta:
            console.print(f"  [dim]·[/dim] {escape(line)}")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "node",
        help="Wyświetla jedną trasę: ścieżkę, pola i meta.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla szczegóły trasy wskazanej ścieżką (tytuły złączone znakiem '>';
inny separator: RCAT_PATH_SEPARATOR).

Przykłady:
  rcat node data.txt "Продаж>Замовлення"
        """,
    )
    p.add_argument("source", metavar="PLIK|URL", help="Plik z tekstem reguł albo adres http(s).")
    p.add_argument("path", metavar="ŚCIEŻKA", help="Ścieżka trasy, np. 'Продаж>Замовлення'.")
    p.set_defaults(func=run)
