# region License
# -----------------------------------------------------------------------------
# syncheck: lalr.py
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion
"""The table-driven LALR(1) parser.

Extended Summary
----------------
:class:`Parser` walks a token stream against a set of :class:`~syncheck.tables.ParseTables`. It keeps parallel state
and value stacks, performs yacc-style panic-mode recovery through the ``error`` terminal, and reports every syntax
error it sees to an error reporter instead of raising it.
"""

import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Optional, Union

from sly.yacc import SlyLogger

from ._misc import MISSING, TypeAlias
from .errors import ErrorReporter, ParseError, ParseSyntaxError, StackOverflow, UnrecoverableSyntaxError
from .tables import END, Accept, ParseTables, Reduce, Shift
from .tokens import Lexeme, TokenSource

if TYPE_CHECKING:
    import logging

    from sly.lex import Token


__all__ = ("ParseLogger", "ParseResult", "Parser", "SemanticAction", "report_to_stderr")


SemanticAction: TypeAlias = "Callable[[Parser, list[Any]], Any]"
"""A rule's action. Receives the parser and the values of the right-hand side symbols and returns the new value."""


# ============================================================================
# region -------- Logging and reporting
# ============================================================================


ParseLogger = SlyLogger
"""SLY's stand-in for a :class:`logging.Logger`. Used by default for warnings and, when asked for, the parser trace."""

_Logger: TypeAlias = Union[SlyLogger, "logging.Logger"]


def report_to_stderr(error: ParseError) -> None:
    """The default error reporter. Writes one line per error to standard error."""

    print(error, file=sys.stderr)


# endregion


# ============================================================================
# region -------- Results
# ============================================================================


def _error_key(error: Optional[ParseError]) -> Optional[tuple[type, int, str]]:
    if error is None:
        return None
    return (type(error), error.line, error.text)


@dataclass(frozen=True)
class ParseResult:
    """The outcome of one call to :meth:`Parser.parse`.

    Results compare equal when they agree on acceptance, value, and the kind and position of every error.

    Attributes
    ----------
    accepted: bool
        Whether the automaton reached its accepting state.
    value: Any
        The semantic value of the start symbol when accepted, else None.
    errors: list[ParseError]
        Every error sent to the reporter, in order.
    failure: ParseError | None
        The fatal error that ended the parse, if any.
    """

    accepted: bool
    value: Any = None
    errors: list[ParseError] = field(default_factory=list, compare=False)
    failure: Optional[ParseError] = field(default=None, compare=False)
    _error_keys: tuple[object, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        keys = (tuple(_error_key(error) for error in self.errors), _error_key(self.failure))
        object.__setattr__(self, "_error_keys", keys)

    @property
    def syntax_errors(self) -> list[ParseSyntaxError]:
        return [error for error in self.errors if isinstance(error, ParseSyntaxError)]

    @property
    def error_count(self) -> int:
        """The number of reported syntax errors."""

        return len(self.syntax_errors)

    @property
    def ok(self) -> bool:
        """True only when the input was accepted and nothing was reported along the way."""

        return self.accepted and not self.errors


# endregion


# ============================================================================
# region -------- Parser
# ============================================================================


class Parser:
    """An LALR(1) parser driven by precomputed tables.

    Parameters
    ----------
    tables: ParseTables
        The compressed automaton.
    actions: Sequence[SemanticAction | None], optional
        Semantic actions indexed by rule number. Rules without one get ``$$ = $1``: the value of the first right-hand
        side symbol, or None for an empty rule.
    reporter: ErrorReporter, optional
        Receives each reported error. Defaults to :func:`report_to_stderr`.
    initial_depth: int, optional
        Starting stack capacity. Defaults to the class attribute.
    max_depth: int, optional
        Hard limit on the stack depth. Defaults to the class attribute.
    debug: SlyLogger | logging.Logger | None, optional
        Destination of the parser trace. Defaults to the class attribute.

    Extended Summary
    ----------------
    All per-parse state lives on the instance and is reset by every :meth:`parse` call, so one parser can check any
    number of inputs, one at a time.
    """

    # ---- Configuration
    error_count: ClassVar[int] = 3
    """Number of tokens that must be shifted after an error before errors are reported again."""

    initial_depth: int = 200
    max_depth: int = 10000

    log: ClassVar[_Logger] = SlyLogger(sys.stderr)
    debug: Optional[_Logger] = None

    def __init__(
        self,
        tables: ParseTables,
        actions: Optional[Sequence[Optional[SemanticAction]]] = None,
        *,
        reporter: Optional[ErrorReporter] = None,
        initial_depth: int = MISSING,
        max_depth: int = MISSING,
        debug: Optional[_Logger] = MISSING,
    ) -> None:
        self.tables = tables
        self.actions: Sequence[Optional[SemanticAction]] = actions if actions is not None else ()
        self.reporter: ErrorReporter = reporter if reporter is not None else report_to_stderr

        if initial_depth is not MISSING:
            self.initial_depth = initial_depth
        if max_depth is not MISSING:
            self.max_depth = max_depth
        if debug is not MISSING:
            self.debug = debug

        if self.initial_depth < 1:
            msg = f"initial_depth must be at least 1, not {self.initial_depth}."
            raise ValueError(msg)
        if self.max_depth < self.initial_depth:
            msg = f"max_depth ({self.max_depth}) must not be smaller than initial_depth ({self.initial_depth})."
            raise ValueError(msg)
        if len(self.actions) > tables.nrules:
            self.log.warning("%d semantic actions given for %d rules; the extra ones are never used.",
                             len(self.actions), tables.nrules)

        self.restart()

    def restart(self) -> None:
        """Throw away all parse state and start over from the initial state."""

        self.statestack: list[int] = [0]
        self.valuestack: list[Any] = [None]
        self.capacity = self.initial_depth
        self.lookahead: Optional[Lexeme] = None
        self.errorcount = 0
        self.errors: list[ParseError] = []
        self._last_line = 1

    def errok(self) -> None:
        """Declare recovery complete. Errors are reported again right away."""

        self.errorcount = 0

    def clearin(self) -> None:
        """Drop the current lookahead token. The next one is read when needed."""

        self.lookahead = None

    @property
    def state(self) -> int:
        return self.statestack[-1]

    # ---- Internals

    def _position(self) -> tuple[int, str]:
        if self.lookahead is not None:
            return self.lookahead.line, self.lookahead.text
        return self._last_line, ""

    def _report(self, error: ParseError) -> None:
        self.errors.append(error)
        self.reporter(error)

    def _read(self, source: TokenSource) -> Lexeme:
        lookahead = self.lookahead = source.next_token()
        self._last_line = lookahead.line
        if self.debug:
            self.debug.debug("Next token is %s (%r, line %d)", lookahead.kind, lookahead.text, lookahead.line)
        return lookahead

    def _push(self, state: int, value: Any) -> None:
        if len(self.statestack) >= self.capacity:
            if self.capacity >= self.max_depth:
                raise StackOverflow(*self._position(), self.max_depth)
            self.capacity = min(self.capacity * 2, self.max_depth)
            if self.debug:
                self.debug.debug("Stack size increased to %d", self.capacity)

        self.statestack.append(state)
        self.valuestack.append(value)

    def _reduce(self, rule: int) -> None:
        lhs, length = self.tables.rule(rule)
        statestack = self.statestack
        valuestack = self.valuestack

        if self.debug:
            self.debug.debug("Reducing stack by %s", self.tables.describe_rule(rule))

        values = valuestack[-length:] if length else []
        action = self.actions[rule] if rule < len(self.actions) else None
        if action is not None:
            value = action(self, values)
        else:
            value = values[0] if values else None

        if length:
            del statestack[-length:]
            del valuestack[-length:]

        self._push(self.tables.goto(statestack[-1], lhs), value)

    def _recover(self, source: TokenSource) -> None:
        # A default-only state can fail before any token was read. A token read here was never rejected, so it is kept.
        fresh = self.lookahead is None
        lookahead = self._read(source) if fresh else self.lookahead
        assert lookahead is not None

        if not self.errorcount:
            self._report(ParseSyntaxError(lookahead.line, lookahead.text))
        elif self.errorcount == self.error_count and not fresh:
            # Still nothing shifted since the last error; the lookahead cannot be used.
            if lookahead.at_end:
                raise UnrecoverableSyntaxError(lookahead.line, lookahead.text)
            if self.debug:
                self.debug.debug("Error: discarding %s (%r)", lookahead.kind, lookahead.text)
            self.lookahead = None

        self.errorcount = self.error_count

        while True:
            target = self.tables.error_shift(self.state)
            if target is not None:
                break
            if len(self.statestack) == 1:
                raise UnrecoverableSyntaxError(lookahead.line, lookahead.text)
            if self.debug:
                self.debug.debug("Error: popping state %d", self.state)
            self.statestack.pop()
            self.valuestack.pop()

        if self.debug:
            self.debug.debug("Shifting error token, go to state %d", target)
        self._push(target, None)

    def _run(self, source: TokenSource) -> Any:
        tables = self.tables
        statestack = self.statestack
        debug = self.debug

        while True:
            state = statestack[-1]
            if debug:
                debug.debug("Entering state %d", state)
                debug.debug("Stack now %s", " ".join(map(str, statestack)))

            if state == tables.final_state:
                action = tables.action(state, END)
            elif tables.consults_lookahead(state):
                lookahead = self.lookahead if self.lookahead is not None else self._read(source)
                action = tables.action(state, tables.symbol_id(lookahead.kind))
            else:
                action = tables.default_action(state)

            if isinstance(action, Shift):
                assert self.lookahead is not None
                if self.errorcount:
                    self.errorcount -= 1
                if debug:
                    debug.debug("Shifting token %s, go to state %d", self.lookahead.kind, action.state)
                self._push(action.state, self.lookahead.text)
                self.lookahead = None
                continue

            if isinstance(action, Reduce):
                self._reduce(action.rule)
                continue

            if isinstance(action, Accept):
                if debug:
                    debug.debug("Now at end of input.")
                # The start symbol sits just below the shifted end-of-input marker.
                return self.valuestack[-2]

            self._recover(source)

    def parse(self, tokens: Union[TokenSource, Iterable[Union["Token", Lexeme]]]) -> ParseResult:
        """Parse the given input tokens.

        Parameters
        ----------
        tokens: TokenSource | Iterable[Token | Lexeme]
            The input. Plain iterables are wrapped in a :class:`TokenSource`.

        Returns
        -------
        ParseResult
            Never raises for bad input. Fatal problems end up in ``failure``; everything reported is in ``errors``.
        """

        source = tokens if isinstance(tokens, TokenSource) else TokenSource(tokens)
        self.restart()

        try:
            value = self._run(source)
        except UnrecoverableSyntaxError as exc:
            if self.debug:
                self.debug.debug("Aborting: %s", exc)
            return ParseResult(False, None, self.errors, exc)
        except StackOverflow as exc:
            self._report(exc)
            return ParseResult(False, None, self.errors, exc)
        else:
            return ParseResult(True, value, self.errors)


# endregion
