# region License
# -----------------------------------------------------------------------------
# syncheck: compiler.py
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion
"""Offline compilation of a grammar into compressed parse tables.

Extended Summary
----------------
SLY builds the LALR(1) automaton. This module then lays it out the way yacc and bison do:

1. Symbols are renumbered with ``$end``, ``error`` and ``$undefined`` first, then the remaining terminals and the
   nonterminals in the order their rules are defined, ``$accept`` leading.
2. SLY's accept action becomes a shift of ``$end`` into an extra final state, and ``$accept -> start $end`` becomes
   rule 1.
3. Each state's most frequent reduction becomes its default, unless the state shifts ``error``. Each nonterminal's
   most frequent goto target becomes its default goto.
4. The remaining entries of every row are packed into one ``table``/``check`` pair, largest rows first, each at the
   first free offset. Rows never share an offset unless they are identical.

Run ``python -m syncheck.compiler`` to regenerate the bundled tables for the teaching grammar.
"""

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Optional

from sly.yacc import Grammar, GrammarError, LRTable, SlyLogger

from .errors import TableError
from .lalr import _Logger
from .tables import END, ERROR_SYMBOL, ParseTables

__all__ = ("compile_grammar", "compile_rules", "main", "make_grammar", "render_module")


TABLE_NINF = -1
"""Explicit error marker in ``table``. Reducing rule 1 never happens, so -1 is free for this."""


# ============================================================================
# region -------- Grammar construction
# ============================================================================


def make_grammar(
    terminals: Iterable[str],
    rules: Iterable[str],
    precedence: Iterable[Sequence[str]] = (),
    *,
    source: str = "<rules>",
) -> Grammar:
    """Build a SLY grammar from rule strings.

    Parameters
    ----------
    terminals: Iterable[str]
        The terminal names, in the order they should be numbered.
    rules: Iterable[str]
        Rules of the form ``"name : sym sym ..."``. The first rule's left-hand side is the start symbol.
    precedence: Iterable[Sequence[str]], default=()
        Precedence levels from lowest to highest, each ``(associativity, terminal, ...)``.
    source: str, default="<rules>"
        A name for the rules, used in error messages.

    Returns
    -------
    Grammar
        The augmented grammar.

    Raises
    ------
    TableError
        If a rule is malformed or refers to an undefined symbol.
    """

    grammar = Grammar(list(terminals))

    try:
        for level, (assoc, *terms) in enumerate(precedence, start=1):
            for term in terms:
                grammar.set_precedence(term, assoc, level)

        for lineno, rule in enumerate(rules, start=1):
            parts = rule.split()
            if len(parts) < 2 or parts[1] != ":":
                msg = f"{source}:{lineno}: Expected 'name : symbols', got {rule!r}."
                raise TableError(msg)

            name, _, *syms = parts
            grammar.add_production(name, syms, file=source, line=lineno)

        grammar.set_start()
    except GrammarError as exc:
        raise TableError(str(exc)) from exc

    undefined = grammar.undefined_symbols()
    if undefined:
        sym, prod = undefined[0]
        msg = f"{prod.file}:{prod.line}: Symbol {sym!r} used, but not defined as a token or a rule."
        raise TableError(msg)

    return grammar


# endregion


# ============================================================================
# region -------- Table compression
# ============================================================================


def _default_reduction(row: dict[int, int]) -> int:
    """The most frequent reduce code in ``row``, or 0 when it should not get a default."""

    if row.get(ERROR_SYMBOL, 0) > 0:
        return 0

    reductions = Counter(code for code in row.values() if code < 0 and code != TABLE_NINF)
    if not reductions:
        return 0
    code, _ = reductions.most_common(1)[0]
    return code


def _pack(rows: Sequence[dict[int, int]]) -> tuple[list[Optional[int]], list[int], list[int]]:
    """Pack sparse rows into shared ``table``/``check`` vectors by first-fit-decreasing displacement.

    Returns the base of each row (None for empty rows) and the two vectors.
    """

    table: list[int] = []
    check: list[int] = []
    bases: list[Optional[int]] = [None] * len(rows)
    taken: set[int] = set()
    placed: dict[tuple[tuple[int, int], ...], int] = {}

    order = sorted((i for i, row in enumerate(rows) if row), key=lambda i: (-len(rows[i]), i))
    for i in order:
        entries = tuple(sorted(rows[i].items()))
        if entries in placed:
            bases[i] = placed[entries]
            continue

        keys = [key for key, _ in entries]
        base = -keys[0]
        while base in taken or any(base + key < len(check) and check[base + key] != -1 for key in keys):
            base += 1

        top = base + keys[-1] + 1
        if top > len(table):
            table.extend([0] * (top - len(table)))
            check.extend([-1] * (top - len(check)))
        for key, value in entries:
            table[base + key] = value
            check[base + key] = key

        taken.add(base)
        placed[entries] = bases[i] = base

    return bases, table, check


# endregion


# ============================================================================
# region -------- Compilation
# ============================================================================


def _log_conflicts(
    lrtable: LRTable,
    log: _Logger,
    debuglog: Optional[_Logger],
    expected: Optional[int],
) -> None:
    if debuglog:
        for state, tok, resolution in lrtable.sr_conflicts:
            debuglog.debug("shift/reduce conflict for %s in state %d resolved as %s", tok, state, resolution)
        for state, rule, rejected in lrtable.rr_conflicts:
            debuglog.debug("reduce/reduce conflict in state %d resolved using rule %s", state, rule)
            debuglog.debug("rejected rule (%s) in state %d", rejected, state)

    num_sr = len(lrtable.sr_conflicts)
    if num_sr and num_sr != expected:
        log.warning("%d shift/reduce conflict%s", num_sr, "s" if num_sr > 1 else "")

    num_rr = len(lrtable.rr_conflicts)
    if num_rr:
        log.warning("%d reduce/reduce conflict%s", num_rr, "s" if num_rr > 1 else "")


def compile_grammar(
    grammar: Grammar,
    *,
    log: Optional[_Logger] = None,
    debuglog: Optional[_Logger] = None,
    expected_conflicts: Optional[int] = None,
) -> ParseTables:
    """Build compressed LALR(1) tables for ``grammar``.

    Parameters
    ----------
    grammar: Grammar
        An augmented SLY grammar, as returned by :func:`make_grammar`.
    log: SlyLogger | logging.Logger, optional
        Receives conflict warnings. Defaults to standard error.
    debuglog: SlyLogger | logging.Logger, optional
        Receives one line per conflict and how it was resolved.
    expected_conflicts: int, optional
        The number of shift/reduce conflicts not worth a warning.

    Returns
    -------
    ParseTables
        The tables, ready for :class:`syncheck.lalr.Parser`.
    """

    if log is None:
        log = SlyLogger(sys.stderr)

    lrtable = LRTable(grammar)
    _log_conflicts(lrtable, log, debuglog, expected_conflicts)

    # ---- Symbols
    terminals = ["$end", "error", "$undefined"]
    terminals.extend(term for term in grammar.Terminals if term != "error")
    nonterminals = ["$accept", *grammar.Prodnames]
    ntokens = len(terminals)
    term_ids = {name: number for number, name in enumerate(terminals)}
    nonterm_ids = {name: ntokens + number for number, name in enumerate(nonterminals)}

    # ---- Rules: SLY production n is rule n + 1.
    productions = grammar.Productions[1:]
    r1 = [0, nonterm_ids["$accept"], *(nonterm_ids[p.name] for p in productions)]
    r2 = [0, 2, *(p.len for p in productions)]

    # ---- Actions
    nstates = len(lrtable.lr_action)
    final_state = nstates
    action_rows: list[dict[int, int]] = []
    defact: list[int] = []

    for state in range(nstates):
        row: dict[int, int] = {}
        for term, code in lrtable.lr_action[state].items():
            if code is None:
                row[term_ids[term]] = TABLE_NINF
            elif code > 0:
                row[term_ids[term]] = code
            elif code == 0:
                row[term_ids[term]] = final_state
            else:
                row[term_ids[term]] = code - 1

        default = _default_reduction(row)
        if default:
            row = {sym: code for sym, code in row.items() if code != default}
        else:
            row = {sym: code for sym, code in row.items() if code != TABLE_NINF}
        action_rows.append(row)
        defact.append(-default)

    action_rows.append({})
    defact.append(0)

    # ---- Gotos
    goto_rows: list[dict[int, int]] = []
    defgoto: list[int] = []

    for name in nonterminals:
        targets = {state: gotos[name] for state, gotos in lrtable.lr_goto.items() if name in gotos}
        if not targets:
            goto_rows.append({})
            defgoto.append(0)
            continue

        default, _ = Counter(targets.values()).most_common(1)[0]
        goto_rows.append({state: target for state, target in targets.items() if target != default})
        defgoto.append(default)

    # ---- Packing
    bases, table, check = _pack(action_rows + goto_rows)
    used = [base for base in bases if base is not None]
    pact_ninf = min(used, default=0) - 1
    offsets = [pact_ninf if base is None else base for base in bases]

    return ParseTables(
        symbols=tuple(terminals + nonterminals),
        ntokens=ntokens,
        final_state=final_state,
        pact_ninf=pact_ninf,
        table_ninf=TABLE_NINF,
        pact=tuple(offsets[: len(action_rows)]),
        defact=tuple(defact),
        pgoto=tuple(offsets[len(action_rows) :]),
        defgoto=tuple(defgoto),
        table=tuple(table),
        check=tuple(check),
        r1=tuple(r1),
        r2=tuple(r2),
    )


def compile_rules(
    terminals: Iterable[str],
    rules: Iterable[str],
    precedence: Iterable[Sequence[str]] = (),
    *,
    log: Optional[_Logger] = None,
    expected_conflicts: Optional[int] = None,
) -> ParseTables:
    """Shorthand for ``compile_grammar(make_grammar(terminals, rules, precedence))``."""

    grammar = make_grammar(terminals, rules, precedence)
    return compile_grammar(grammar, log=log, expected_conflicts=expected_conflicts)


# endregion


# ============================================================================
# region -------- Rendering
# ============================================================================


_MODULE_HEADER = '''\
# region License
# -----------------------------------------------------------------------------
# syncheck: {filename}
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion
# Generated by `python -m syncheck.compiler`. Do not edit by hand.
"""{docstring}"""

from .tables import ParseTables

__all__ = ("TABLES",)


TABLES = ParseTables(
'''


def _format_row(items: Sequence[str], per_line: int) -> list[str]:
    return [
        "        " + " ".join(f"{item}," for item in items[start : start + per_line])
        for start in range(0, len(items), per_line)
    ]


def render_module(
    tables: ParseTables,
    *,
    filename: str = "c_tables.py",
    docstring: str = "Compiled LALR(1) parse tables for the teaching grammar in c_grammar.py.",
) -> str:
    """Render ``tables`` as the source of a Python module defining ``TABLES``."""

    lines = [_MODULE_HEADER.format(filename=filename, docstring=docstring).rstrip("\n")]

    lines.append("    symbols=(")
    lines.extend(_format_row([f'"{name}"' for name in tables.symbols], 8))
    lines.append("    ),")

    for name in ("ntokens", "final_state", "pact_ninf", "table_ninf"):
        lines.append(f"    {name}={getattr(tables, name)},")

    for name in ("pact", "defact", "pgoto", "defgoto", "table", "check", "r1", "r2"):
        lines.append(f"    {name}=(")
        lines.extend(_format_row([str(value) for value in getattr(tables, name)], 16))
        lines.append("    ),")

    lines.append(")")
    return "\n".join(lines) + "\n"


# endregion


def main(argv: Optional[list[str]] = None) -> int:
    from . import c_grammar

    ap = argparse.ArgumentParser(prog="python -m syncheck.compiler", description="Compile the teaching grammar.")
    ap.add_argument("-o", "--output", help="write the tables module here instead of standard output")
    ap.add_argument("-v", "--verbose", action="store_true", help="list every conflict")
    args = ap.parse_args(argv)

    log = SlyLogger(sys.stderr)
    tables = compile_grammar(
        c_grammar.build_grammar(),
        log=log,
        debuglog=log if args.verbose else None,
        expected_conflicts=c_grammar.EXPECTED_CONFLICTS,
    )
    source = render_module(tables)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as fp:
            fp.write(source)
    else:
        sys.stdout.write(source)

    log.info("%d states, %d rules, %d table entries", tables.nstates, tables.nrules, len(tables.table))
    return 0


if __name__ == "__main__":
    sys.exit(main())
