# region License
# -----------------------------------------------------------------------------
# syncheck: errors.py
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion

"""The exceptions raised while building tables and parsing.

Extended Summary
----------------
Syntax errors are recorded and reported, not raised out of :meth:`syncheck.lalr.Parser.parse`. The two fatal kinds,
:class:`UnrecoverableSyntaxError` and :class:`StackOverflow`, are raised inside the driver at the point where they are
detected and turned into a failed :class:`syncheck.lalr.ParseResult`.
"""

from collections.abc import Callable

from ._misc import TypeAlias, override

__all__ = (
    "ErrorReporter",
    "ParseError",
    "ParseSyntaxError",
    "StackOverflow",
    "TableError",
    "UnrecoverableSyntaxError",
)


class TableError(Exception):
    """Exception raised for inconsistent parse tables or a grammar that cannot be compiled."""


class ParseError(Exception):
    """Base class for everything that can go wrong during a parse.

    Parameters
    ----------
    line: int
        The line of the token the parser was looking at.
    text: str
        The text of that token. Empty at end of input.
    """

    def __init__(self, line: int, text: str) -> None:
        self.line = line
        self.text = text
        super().__init__(line, text)

    @override
    def __str__(self) -> str:
        return f"Parse error at line {self.line}, token : '{self.text}'"


class ParseSyntaxError(ParseError):
    """A recoverable syntax error. The parser reports it and then tries to recover."""

    @override
    def __str__(self) -> str:
        return f"Syntax error at line {self.line}, token : '{self.text}'"


class UnrecoverableSyntaxError(ParseError):
    """Recovery ran out of input or out of stack. Ends the parse."""

    @override
    def __str__(self) -> str:
        if not self.text:
            return f"Cannot recover from syntax error at end of input (line {self.line})"
        return f"Cannot recover from syntax error at line {self.line}, token : '{self.text}'"


class StackOverflow(ParseError):
    """The parser stacks grew past their configured maximum depth. Ends the parse.

    Parameters
    ----------
    line: int
        The line of the current lookahead.
    text: str
        The text of the current lookahead.
    limit: int
        The maximum depth that was exceeded.
    """

    def __init__(self, line: int, text: str, limit: int) -> None:
        super().__init__(line, text)
        self.limit = limit

    @override
    def __str__(self) -> str:
        return f"memory exhausted at line {self.line} (stack depth limit {self.limit})"


ErrorReporter: TypeAlias = Callable[[ParseError], None]
"""A sink for reported errors. Called once per reported syntax error and once for a stack overflow."""
