"""
rules_text/config.py — konfiguracja parsera tekstu reguł.

Zmienne środowiskowe (opcjonalne; CLI wczytuje też plik .env):
  RCAT_INDENT_WIDTH    spacje na jeden poziom zagnieżdżenia (domyślnie 2)
  RCAT_TAB_WIDTH       szerokość tabulatora w spacjach    (domyślnie 4)
  RCAT_ORPHAN_POLICY   root | drop — pola przed pierwszą trasą (domyślnie root)
  RCAT_PATH_SEPARATOR  separator tytułów w ścieżce trasy    (domyślnie ">")

Niepoprawne wartości są ignorowane (używana jest wartość domyślna).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

DEFAULT_INDENT_WIDTH = 2
DEFAULT_TAB_WIDTH    = 4
PATH_SEPARATOR       = ">"

_ENV_INDENT = "RCAT_INDENT_WIDTH"
_ENV_TAB    = "RCAT_TAB_WIDTH"
_ENV_ORPHAN = "RCAT_ORPHAN_POLICY"
_ENV_SEP    = "RCAT_PATH_SEPARATOR"


class OrphanPolicy(StrEnum):
    """Co zrobić z polem, które pojawia się przed jakąkolwiek trasą."""
    ROOT = "root"   # dołącz do syntetycznego formularza korzenia
    DROP = "drop"   # pomiń linię


@dataclass(frozen=True, slots=True)
class ParserConfig:
    indent_width:   int          = DEFAULT_INDENT_WIDTH
    tab_width:      int          = DEFAULT_TAB_WIDTH
    orphan_policy:  OrphanPolicy = OrphanPolicy.ROOT
    path_separator: str          = PATH_SEPARATOR

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ParserConfig:
        env = os.environ if environ is None else environ
        return cls(
            indent_width=_positive_int(env.get(_ENV_INDENT), DEFAULT_INDENT_WIDTH),
            tab_width=_positive_int(env.get(_ENV_TAB), DEFAULT_TAB_WIDTH),
            orphan_policy=_orphan_policy(env.get(_ENV_ORPHAN)),
            path_separator=_separator(env.get(_ENV_SEP)),
        )


def _positive_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def _orphan_policy(raw: str | None) -> OrphanPolicy:
    if not raw:
        return OrphanPolicy.ROOT
    try:
        return OrphanPolicy(raw.strip().lower())
    except ValueError:
        return OrphanPolicy.ROOT


def _separator(raw: str | None) -> str:
    sep = (raw or "").strip()
    return sep or PATH_SEPARATOR


DEFAULT_CONFIG = ParserConfig()
