# region License
# -----------------------------------------------------------------------------
# syncheck: tables.py
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion
"""Compressed LALR(1) parse tables and the actions read from them.

Extended Summary
----------------
The tables use the classic yacc/bison layout. Every state has a base offset into one shared ``table`` vector; an entry
at ``pact[state] + symbol`` belongs to that state only when ``check`` at the same index holds ``symbol``. Anything the
state does not list explicitly falls back to its default reduction in ``defact``. Gotos for nonterminals are stored in
the same two vectors, keyed by state instead of symbol, with ``defgoto`` holding the most common target.

Symbols are numbered terminals first: ``$end`` is 0, ``error`` is 1 and ``$undefined`` is 2. Nonterminals start at
``ntokens`` with ``$accept`` first. Rule 0 is unused and rule 1 is ``$accept -> start $end``.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Union

from ._misc import TypeAlias, override
from .errors import TableError

__all__ = (
    "ACCEPT",
    "END",
    "ERROR",
    "ERROR_SYMBOL",
    "UNDEFINED",
    "Accept",
    "Action",
    "Error",
    "ParseTables",
    "Reduce",
    "Rule",
    "Shift",
)


END = 0
"""Symbol number of the end-of-input terminal."""

ERROR_SYMBOL = 1
"""Symbol number of the ``error`` terminal used by recovery rules."""

UNDEFINED = 2
"""Symbol number every unknown token kind is mapped to."""

_RESERVED_TERMINALS = ("$end", "error", "$undefined")


# ============================================================================
# region -------- Actions
# ============================================================================


@dataclass(frozen=True)
class Shift:
    """Consume the lookahead and go to ``state``."""

    state: int


@dataclass(frozen=True)
class Reduce:
    """Replace the right-hand side of ``rule`` on top of the stack by its left-hand side."""

    rule: int


@dataclass(frozen=True)
class Accept:
    """The input is a sentence of the grammar."""


@dataclass(frozen=True)
class Error:
    """No move is possible from here."""


ACCEPT = Accept()
ERROR = Error()

Action: TypeAlias = Union[Shift, Reduce, Accept, Error]


class Rule(NamedTuple):
    """The left-hand nonterminal of a rule and the number of symbols on its right-hand side."""

    lhs: int
    length: int


# endregion


# ============================================================================
# region -------- Tables
# ============================================================================


def _as_tuple(values: Sequence[int]) -> tuple[int, ...]:
    return tuple(int(v) for v in values)


@dataclass(frozen=True)
class ParseTables:
    """Immutable, compressed LALR(1) tables.

    Parameters
    ----------
    symbols: tuple[str, ...]
        Names of all grammar symbols, terminals first.
    ntokens: int
        The number of terminals. Nonterminal ``n`` has symbol number ``ntokens + n``.
    final_state: int
        The state reached after shifting ``$end``. Entering it accepts the input.
    pact_ninf: int
        Marker in ``pact`` and ``pgoto`` for rows with no explicit entries.
    table_ninf: int
        Marker in ``table`` for an explicit error entry.
    pact: tuple[int, ...]
        Per-state base offsets into ``table``.
    defact: tuple[int, ...]
        Per-state default reduction. 0 means error.
    pgoto: tuple[int, ...]
        Per-nonterminal base offsets into ``table``.
    defgoto: tuple[int, ...]
        Per-nonterminal default goto state.
    table: tuple[int, ...]
        Packed entries. Positive is a shift, otherwise reduce by the negated rule number.
    check: tuple[int, ...]
        Validity key for each slot of ``table``.
    r1: tuple[int, ...]
        Per-rule left-hand nonterminal symbol number.
    r2: tuple[int, ...]
        Per-rule right-hand side length.

    Raises
    ------
    TableError
        If the arrays are not aligned with each other.
    """

    symbols: tuple[str, ...]
    ntokens: int
    final_state: int
    pact_ninf: int
    table_ninf: int
    pact: tuple[int, ...]
    defact: tuple[int, ...]
    pgoto: tuple[int, ...]
    defgoto: tuple[int, ...]
    table: tuple[int, ...]
    check: tuple[int, ...]
    r1: tuple[int, ...]
    r2: tuple[int, ...]
    _symbol_ids: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for name in ("pact", "defact", "pgoto", "defgoto", "table", "check", "r1", "r2"):
            object.__setattr__(self, name, _as_tuple(getattr(self, name)))
        object.__setattr__(self, "symbols", tuple(self.symbols))
        self._validate()

        # Only ordinary terminals can come from a token source.
        ids = {name: number for number, name in enumerate(self.symbols[: self.ntokens])}
        for name in _RESERVED_TERMINALS[1:]:
            del ids[name]
        object.__setattr__(self, "_symbol_ids", ids)

    def _validate(self) -> None:
        if tuple(self.symbols[:3]) != _RESERVED_TERMINALS:
            msg = f"The first three symbols must be {_RESERVED_TERMINALS}, not {tuple(self.symbols[:3])}."
            raise TableError(msg)
        if len(self.pact) != len(self.defact):
            msg = f"pact has {len(self.pact)} states but defact has {len(self.defact)}."
            raise TableError(msg)
        if not 0 <= self.final_state < len(self.pact):
            msg = f"Final state {self.final_state} is not one of the {len(self.pact)} states."
            raise TableError(msg)
        if len(self.table) != len(self.check):
            msg = f"table has {len(self.table)} slots but check has {len(self.check)}."
            raise TableError(msg)
        nnonterminals = len(self.symbols) - self.ntokens
        if not len(self.pgoto) == len(self.defgoto) == nnonterminals:
            msg = f"pgoto and defgoto must both have one entry per nonterminal ({nnonterminals})."
            raise TableError(msg)
        if len(self.r1) != len(self.r2):
            msg = f"r1 has {len(self.r1)} rules but r2 has {len(self.r2)}."
            raise TableError(msg)
        for rule in range(1, len(self.r1)):
            if not self.ntokens <= self.r1[rule] < len(self.symbols):
                msg = f"Rule {rule} has a left-hand side ({self.r1[rule]}) that is not a nonterminal."
                raise TableError(msg)
        if any(not 0 <= rule < len(self.r1) for rule in self.defact):
            msg = "defact refers to a rule that does not exist."
            raise TableError(msg)

    @override
    def __repr__(self) -> str:
        return f"<ParseTables: {self.nstates} states, {self.nrules} rules, {len(self.symbols)} symbols>"

    # ---- Sizes

    @property
    def nstates(self) -> int:
        return len(self.pact)

    @property
    def nrules(self) -> int:
        """The number of rules, counting the unused rule 0."""

        return len(self.r1)

    @property
    def last(self) -> int:
        """The highest valid index into ``table``."""

        return len(self.table) - 1

    # ---- Lookups

    def symbol_id(self, kind: str) -> int:
        """Map a token kind to its terminal number. Unknown kinds map to ``$undefined``."""

        return self._symbol_ids.get(kind, UNDEFINED)

    def symbol_name(self, symbol: int) -> str:
        return self.symbols[symbol]

    def consults_lookahead(self, state: int) -> bool:
        """Whether ``state`` has any lookahead-specific entries. If not, the default action applies outright."""

        return self.pact[state] != self.pact_ninf

    def default_reduction(self, state: int) -> Optional[int]:
        return self.defact[state] or None

    def default_action(self, state: int) -> Action:
        rule = self.defact[state]
        return Reduce(rule) if rule else ERROR

    def action(self, state: int, symbol: int) -> Action:
        """Decide what to do in ``state`` with terminal ``symbol`` as the lookahead.

        The terminal-indexed entry wins; without one the state's default reduction applies.
        """

        if state == self.final_state:
            return ACCEPT

        base = self.pact[state]
        if base != self.pact_ninf:
            index = base + symbol
            if 0 <= index < len(self.table) and self.check[index] == symbol:
                code = self.table[index]
                if code > 0:
                    return Shift(code)
                if code == self.table_ninf or code == 0:
                    return ERROR
                return Reduce(-code)

        return self.default_action(state)

    def goto(self, state: int, nonterminal: int) -> int:
        """The state to enter after reducing to ``nonterminal`` with ``state`` exposed on the stack."""

        column = nonterminal - self.ntokens
        base = self.pgoto[column]
        if base != self.pact_ninf:
            index = base + state
            if 0 <= index < len(self.table) and self.check[index] == state:
                return self.table[index]
        return self.defgoto[column]

    def error_shift(self, state: int) -> Optional[int]:
        """The state reached by shifting the ``error`` terminal from ``state``, if that is possible at all."""

        base = self.pact[state]
        if base == self.pact_ninf:
            return None

        index = base + ERROR_SYMBOL
        if 0 <= index < len(self.table) and self.check[index] == ERROR_SYMBOL:
            target = self.table[index]
            if target > 0:
                return target
        return None

    def rule(self, number: int) -> Rule:
        return Rule(self.r1[number], self.r2[number])

    def describe_rule(self, number: int) -> str:
        lhs, length = self.rule(number)
        return f"rule {number}: {self.symbol_name(lhs)} ({length} symbol{'s' if length != 1 else ''})"


# endregion
