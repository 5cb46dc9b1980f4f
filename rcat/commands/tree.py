"""Komenda: rcat tree — drzewo tras w terminalu."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from catalogue import filter_tree
from data_model import RuleNode
from rcat._load import load_report

console = Console()


def _label(node: RuleNode, show_fields: bool) -> str:
    text = f"[bold]{escape(node.title)}[/bold]"
    if node.form is not None and node.form.fields:
        text += f" [dim]({len(node.form.fields)} pól)[/dim]"
        if show_fields:
            labels = ", ".join(escape(f.label) for f in node.form.fields)
            text += f"\n[cyan]{labels}[/cyan]"
    return text


def build_rich_tree(root: RuleNode, query: str = "", show_fields: bool = False) -> Tree:
    """Wiersze z filter_tree() → rich.tree.Tree (poziom decyduje o rodzicu)."""
    tree = Tree("[dim]rules[/dim]", guide_style="dim")
    branches: list[Tree] = [tree]
    for node, level in filter_tree(root, query):
        del branches[level + 1:]
        branch = branches[-1].add(_label(node, show_fields))
        branches.append(branch)
    return tree


def run(args: argparse.Namespace) -> None:
    report = load_report(args.source, console)
    rows = filter_tree(report.root, args.search or "")
    if not rows:
        console.print("[yellow]Brak tras spełniających kryteria.[/yellow]")
        return

    console.print(build_rich_tree(report.root, args.search or "", args.fields))
    console.print(f"  [dim]{len(rows)} tras[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "tree",
        help="Wyświetla drzewo tras (z opcjonalnym filtrem).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla drzewo tras. Filtr dopasowuje tytuł trasy albo etykietę pola
(bez rozróżniania wielkości liter); przodkowie pasujących tras są zachowani.

Przykłady:
  rcat tree data.txt
  rcat tree data.txt --search оплата
  rcat tree data.txt --fields
        """,
    )
    p.add_argument("source", metavar="PLIK|URL", help="Plik z tekstem reguł albo adres http(s).")
    p.add_argument(
        "--search", "-s",
        metavar="TEKST",
        help="Pokaż tylko trasy pasujące do frazy.",
    )
    p.add_argument(
        "--fields",
        action="store_true",
        help="Dołącz etykiety pól pod tytułem trasy.",
    )
    p.set_defaults(func=run)
