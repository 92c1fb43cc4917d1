# region License
# -----------------------------------------------------------------------------
# syncheck: checker.py
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion
"""Check programs in the teaching language against the bundled tables."""

import os
from typing import Optional, Union

from .c_lexer import tokenize
from .c_tables import TABLES
from .lalr import ParseResult, Parser

_StrPath = Union[str, os.PathLike[str]]


__all__ = ("check", "check_file", "make_parser")


def make_parser(**kwargs: object) -> Parser:
    """Create a parser for the teaching language. Keyword arguments are passed on to :class:`Parser`."""

    return Parser(TABLES, **kwargs)  # pyright: ignore [reportArgumentType]


def check(source: str, *, parser: Optional[Parser] = None) -> ParseResult:
    """Check the syntax of ``source``.

    Parameters
    ----------
    source: str
        The program text.
    parser: Parser, optional
        The parser to use, e.g. one with a custom reporter or depth limit. A fresh default parser otherwise.

    Returns
    -------
    ParseResult
        Use :attr:`ParseResult.ok` to tell whether the program is syntactically valid.
    """

    if parser is None:
        parser = make_parser()
    return parser.parse(tokenize(source))


def check_file(file: _StrPath, encoding: str = "utf-8", *, parser: Optional[Parser] = None) -> ParseResult:
    with open(file, encoding=encoding) as fp:
        source = fp.read()

    return check(source, parser=parser)
