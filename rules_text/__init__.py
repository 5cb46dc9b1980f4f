"""
rules_text — parser tekstu reguł (linie z kodami sterującymi → drzewo tras).

Publiczne API:
  parse_document(text, config)      -> ParseReport (drzewo + problemy)
  parse_rules_text(text, config)    -> RuleNode
  classify_line(raw, line_no, cfg)  -> ClassifiedLine
  parse_field_line(text)            -> FieldParts | None
  parse_meta_tail(tail)             -> MetaTail
  normalize_key(label)              -> str
  derive_specs(code, meta)          -> (clauses, specs)
  TreeBuilder                       budowa drzewa z linii
  annotate_paths(root)              nadanie ścieżek
  ParserConfig, OrphanPolicy        konfiguracja
  IssueCode, LineIssue, ParseReport diagnostyka

Typowe użycie:
    from rules_text import parse_document

    report = parse_document(text)
    for node in report.root.children:
        print(node.title, node.path)
    for issue in report.issues:
        print(issue.line_no, issue.code, issue.message)
"""

from .config import DEFAULT_CONFIG, OrphanPolicy, ParserConfig, PATH_SEPARATOR
from .issues import IssueCode, LineIssue, ParseReport
from .classifier import ClassifiedLine, LineKind, classify_line, compute_depth
from .tokenizer import FieldParts, normalize_key, parse_field_line, parse_meta_tail
from .spec_deriver import derive_specs, split_clauses, to_number
from .builder import TreeBuilder
from .paths import annotate_paths
from .parser import parse_document, parse_rules_text, split_lines

__all__ = [
    "DEFAULT_CONFIG",
    "OrphanPolicy",
    "ParserConfig",
    "PATH_SEPARATOR",
    "IssueCode",
    "LineIssue",
    "ParseReport",
    "ClassifiedLine",
    "LineKind",
    "classify_line",
    "compute_depth",
    "FieldParts",
    "normalize_key",
    "parse_field_line",
    "parse_meta_tail",
    "derive_specs",
    "split_clauses",
    "to_number",
    "TreeBuilder",
    "annotate_paths",
    "parse_document",
    "parse_rules_text",
    "split_lines",
]
