"""Wspólne dla komend: konfiguracja z env, wczytanie źródła, ścieżki tras."""

from __future__ import annotations

from rich.console import Console

from rules_text import PATH_SEPARATOR, ParseReport, ParserConfig, parse_document
from sources import SourceError, read_rules_text


def load_config() -> ParserConfig:
    return ParserConfig.from_env()


def load_report(
    location: str,
    console: Console,
    config: ParserConfig | None = None,
) -> ParseReport:
    try:
        text = read_rules_text(location)
    except SourceError as e:
        console.print(f"[red]Błąd odczytu źródła:[/red] {e}")
        raise SystemExit(1)
    return parse_document(text, config or load_config())


def parse_path_arg(raw: str, separator: str = PATH_SEPARATOR) -> list[str]:
    """'Продаж>Замовлення' → ['Продаж', 'Замовлення'] (puste segmenty pomijane)."""
    return [part.strip() for part in raw.split(separator) if part.strip()]
