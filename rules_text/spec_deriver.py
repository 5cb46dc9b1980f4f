"""
rules_text/spec_deriver.py — wyprowadzanie specyfikacji pola z kodu i ogona.

derive_specs(code, meta, problems=None) -> (clauses, specs)

Kroki:
  1. Podział tokenów ogona na klauzule (SpecClause). Po rozpoznanym kodzie
     (R, X, C, S, N) parametry pobierane są zachłannie aż do następnego
     tokenu, który wygląda jak kod (1–2 wielkie litery), jest tokenem
     pętli '#…' albo flagą 'multiline'. Nieznany kod daje klauzulę OPEN
     z kodem jako pierwszym parametrem.
  2. Kod pola mapowany na typ (C → select, S/T/D/R/B → string,
     N/Q/Z/I → number) konsumuje wiodące tokeny bez kodu.
  3. Budowa specyfikacji w kolejności priorytetu:
       sum → loop → run (R) → run (X) → select → string → number → open

Parsowanie liczb: gramatyka NUMBER_RE, przecinek → kropka; inna wartość daje None
i trafia do `problems` (nigdy wyjątek).
"""

from __future__ import annotations

import math

from data_model import (
    FieldSpec,
    LoopSpec,
    MetaTail,
    NumberSpec,
    OpenSpec,
    RunSpec,
    SelectSpec,
    SpecClause,
    StringSpec,
    SumSpec,
)

from .grammar import CODE_TOKEN_RE, NUMBER_RE

SUM_CODE  = "$"
LOOP_CODE = "#"

RECOGNIZED_CODES = frozenset({"R", "X", "C", "S", "N"})

# Pierwsza litera kodu pola → kod klauzuli domyślnej
CODE_TYPES: dict[str, str] = {
    "C": "C",
    "S": "S", "T": "S", "D": "S", "R": "S", "B": "S",
    "N": "N", "Q": "N", "Z": "N", "I": "N",
}

MULTILINE = "MULTILINE"
OPEN      = "OPEN"


# ---------------------------------------------------------------------------
# Tokeny i klauzule
# ---------------------------------------------------------------------------

def _is_loop_token(tok: str) -> bool:
    return tok.startswith(LOOP_CODE) and len(tok) > 1


def _is_multiline(tok: str) -> bool:
    return tok.lower() == "multiline"


def _is_code(tok: str) -> bool:
    return tok in RECOGNIZED_CODES or bool(CODE_TOKEN_RE.match(tok))


def _is_boundary(tok: str) -> bool:
    return _is_code(tok) or _is_loop_token(tok) or _is_multiline(tok)


def _take_params(tokens: list[str], start: int) -> list[str]:
    """Tokeny od `start` do następnej granicy (wyłącznie)."""
    out: list[str] = []
    for tok in tokens[start:]:
        if _is_boundary(tok):
            break
        out.append(tok)
    return out


def split_clauses(tokens: list[str], implied: str | None = None) -> list[SpecClause]:
    """
    Dzieli tokeny ogona na klauzule. `implied` to kod klauzuli wynikający
    z kodu pola — dostaje wiodące tokeny przed pierwszym kodem.
    """
    clauses: list[SpecClause] = []
    i = 0
    n = len(tokens)

    leading: SpecClause | None = None
    if implied:
        params = _take_params(tokens, 0)
        if params:
            leading = SpecClause(implied, params)
            clauses.append(leading)
            i = len(params)

    while i < n:
        tok = tokens[i]
        if tok in RECOGNIZED_CODES:
            params = _take_params(tokens, i + 1)
            clauses.append(SpecClause(tok, params))
            i += 1 + len(params)
        elif _is_loop_token(tok):
            params = _take_params(tokens, i + 1)
            clauses.append(SpecClause(LOOP_CODE, [tok[1:], *params]))
            i += 1 + len(params)
        elif _is_multiline(tok):
            clauses.append(SpecClause(MULTILINE))
            i += 1
        elif _is_code(tok):
            # nieznany kod: zachowany z parametrami jako klauzula otwarta
            params = _take_params(tokens, i + 1)
            clauses.append(SpecClause(OPEN, [tok, *params]))
            i += 1 + len(params)
        else:
            params = _take_params(tokens, i)
            clauses.append(SpecClause(OPEN, params))
            i += len(params)

    # Kod pola bez własnych parametrów nadal wyznacza typ (np. "?N Sum:")
    if implied and leading is None and not any(c.code == implied for c in clauses):
        clauses.insert(0, SpecClause(implied))

    return clauses


# ---------------------------------------------------------------------------
# Liczby
# ---------------------------------------------------------------------------

def to_number(value: str | None, problems: list[str] | None = None) -> float | None:
    if value is None:
        return None
    s = value.strip()
    if not s:
        return None
    # ta sama gramatyka co w ogonie: bez "1_000", "1e3", "inf"
    number = float(s.replace(",", ".")) if NUMBER_RE.match(s) else None
    if number is None or not math.isfinite(number):
        if problems is not None:
            problems.append(value)
        return None
    return number


def _to_length(value: str | None, problems: list[str] | None) -> int | None:
    number = to_number(value, problems)
    if number is None or number < 0:
        return None
    return int(number)


def _number_spec(params: list[str], problems: list[str] | None) -> NumberSpec:
    """Pozycje: 3+ → (default, min, max); 2 → (min, max); 1 → (default)."""
    values = [to_number(p, problems) for p in params[:3]]
    if len(values) >= 3:
        return NumberSpec(default=values[0], min=values[1], max=values[2])
    if len(values) == 2:
        return NumberSpec(min=values[0], max=values[1])
    if len(values) == 1:
        return NumberSpec(default=values[0])
    return NumberSpec()


# ---------------------------------------------------------------------------
# Specyfikacje
# ---------------------------------------------------------------------------

def _first(clauses: list[SpecClause], code: str) -> SpecClause | None:
    return next((c for c in clauses if c.code == code), None)


def build_specs(
    clauses: list[SpecClause],
    tokens: list[str],
    problems: list[str] | None = None,
) -> list[FieldSpec]:
    specs: list[FieldSpec] = []

    for clause in clauses:
        if clause.code == LOOP_CODE:
            specs.append(LoopSpec(params=list(clause.params)))
            break

    run_actions = [c for c in clauses if c.code in ("R", "X")]
    if any(c.code == "R" for c in run_actions):
        specs.append(RunSpec(actions=run_actions, editable=False))
    elif run_actions:
        specs.append(RunSpec(actions=run_actions, editable=True))

    select = _first(clauses, "C")
    if select is not None:
        menu_title, *options = select.params or [""]
        specs.append(SelectSpec(menu_title=menu_title, options=options))

    multiline = any(c.code == MULTILINE for c in clauses)
    string = _first(clauses, "S")
    if string is not None:
        params = string.params
        specs.append(StringSpec(
            default=params[0] if params else None,
            max_length=_to_length(params[1], problems) if len(params) > 1 else None,
            multiline=multiline,
        ))
    elif multiline:
        specs.append(StringSpec(multiline=True))

    number = _first(clauses, "N")
    if number is not None:
        specs.append(_number_spec(number.params, problems))

    if not specs:
        specs.append(OpenSpec(params=list(tokens)))
    return specs


def derive_specs(
    code: str,
    meta: MetaTail,
    problems: list[str] | None = None,
) -> tuple[list[SpecClause], list[FieldSpec]]:
    """
    Zwraca (klauzule, specyfikacje w kolejności priorytetu).
    Pierwsza specyfikacja to dominująca `Field.spec`.

    Wartownicy `$` i `#` nie interpretują ogona — cały ogon to ich parametry.
    """
    tokens = list(meta.tokens)

    if code == SUM_CODE:
        return [SpecClause(SUM_CODE, tokens)], [SumSpec()]
    if code == LOOP_CODE:
        return [SpecClause(LOOP_CODE, tokens)], [LoopSpec(params=tokens)]

    clauses = split_clauses(tokens, CODE_TYPES.get(code[:1]))
    return clauses, build_specs(clauses, tokens, problems)
