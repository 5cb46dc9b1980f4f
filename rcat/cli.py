"""
rcat — narzędzie CLI dla rulecat.

Użycie:
  rcat <komenda> [opcje]

Komendy:
  parse            Parsuje tekst reguł i eksportuje drzewo do JSON.
  tree             Wyświetla drzewo tras (z opcjonalnym filtrem).
  node             Wyświetla jedną trasę: ścieżkę, pola i meta.
  validate-export  Waliduje plik JSON eksportu względem schematu.
  values           Zapis / odczyt / czyszczenie wartości formularzy w bazie.
  apply-schema     Aplikuje db/schema.sql do bazy danych (idempotentne).
"""

from __future__ import annotations

import argparse
import pathlib
import sys

from dotenv import load_dotenv

# Windows: terminal może używać cp1252, wymuszamy UTF-8, żeby cyrylica
# w tytułach tras i polskie teksty pomocy były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rcat.commands import parse as cmd_parse
from rcat.commands import tree as cmd_tree
from rcat.commands import node as cmd_node
from rcat.commands import validate_export as cmd_validate_export
from rcat.commands import values as cmd_values
from rcat.commands import apply_schema as cmd_apply_schema

ENV_PATH = pathlib.Path(__file__).resolve().parent.parent / ".env"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rcat",
        description="rulecat — parser katalogu reguł, narzędzie CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="rcat 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_parse.add_parser(subparsers)
    cmd_tree.add_parser(subparsers)
    cmd_node.add_parser(subparsers)
    cmd_validate_export.add_parser(subparsers)
    cmd_values.add_parser(subparsers)
    cmd_apply_schema.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    load_dotenv(ENV_PATH)
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
