"""
rules_text/parser.py — pełny potok: tekst reguł → drzewo RuleNode.

Architektura:
  text → split_lines() → classify_line() (głębokość + klasa)
       → TreeBuilder.feed() (pola: parse_field_line() + derive_specs())
       → TreeBuilder.finish() → annotate_paths() → RuleNode

Kluczowe funkcje publiczne:
  parse_document(text, config)   -> ParseReport
  parse_rules_text(text, config) -> RuleNode
"""

from __future__ import annotations

from data_model import RuleNode

from .builder import TreeBuilder
from .classifier import classify_line
from .config import ParserConfig
from .issues import ParseReport


def split_lines(text: str) -> list[str]:
    """Dzieli po '\\n' / '\\r\\n'. Inne znaki sterujące zostają w linii (głębokość)."""
    lines = (text or "").split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_document(text: str, config: ParserConfig | None = None) -> ParseReport:
    """
    Parsuje cały tekst. Nigdy nie przerywa na błędnej linii — problemy
    trafiają do ParseReport.issues. Tekst bez tras daje sam korzeń.
    """
    cfg = config or ParserConfig()
    builder = TreeBuilder(cfg)
    for line_no, raw in enumerate(split_lines(text), start=1):
        builder.feed(classify_line(raw, line_no, cfg))
    root = builder.finish()
    return ParseReport(root=root, issues=builder.issues)


def parse_rules_text(text: str, config: ParserConfig | None = None) -> RuleNode:
    return parse_document(text, config).root
