# pyright: reportUndefinedVariable=none, reportIndexIssue=none, reportConstantRedefinition=none
# region License
# -----------------------------------------------------------------------------
# syncheck: c_lexer.py
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion
"""Module for lexing programs in the teaching language."""

from typing import Optional

from sly import Lexer
from sly.lex import Token

from ._misc import override
from .tokens import TokenSource

__all__ = ("CLexer", "tokenize")


class CLexer(Lexer):
    """Lexer for the small C-like teaching language.

    Extended Summary
    ----------------
    Characters the language does not know about are not fatal. Each one comes out as a one-character ``ERROR``
    token, which the parser does not recognise and therefore reports as a syntax error at that character.
    """

    # fmt: off
    tokens = {
        # Identifiers and numbers
        ID, NUM,

        # Type keywords
        INT, FLOAT, CHAR, DOUBLE,

        # Control-flow keywords
        IF, ELSE, DO, WHILE, FOR, SWITCH, CASE, DEFAULT, BREAK,

        # Increment/decrement and compound assignment
        INC, DEC, ADDASSIGN, SUBASSIGN,

        # Relational and logical operators
        EQ, NEQ, LE, GE, LT, GT, AND, OR,
    }
    # fmt: on

    literals = {"+", "-", "*", "/", "%", ";", ",", "=", "[", "]", "(", ")", "{", "}", ":", "!"}

    ignore = " \t\r\f\v"

    # ---- Comments
    ignore_line_comment = r"//[^\n]*"

    @_(r"/\*[\s\S]*?\*/")
    def ignore_block_comment(self, t: Token) -> None:
        self.lineno += t.value.count("\n")

    # fmt: off
    INC         = r"\+\+"
    DEC         = r"--"
    ADDASSIGN   = r"\+="
    SUBASSIGN   = r"-="
    EQ          = r"=="
    NEQ         = r"!="
    LE          = r"<="
    GE          = r">="
    LT          = r"<"
    GT          = r">"
    AND         = r"&&"
    OR          = r"\|\|"

    NUM = r"\d+(?:\.\d+)?"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*" # pyright: ignore [reportAssignmentType]

    ID["int"]       = INT
    ID["float"]     = FLOAT
    ID["char"]      = CHAR
    ID["double"]    = DOUBLE
    ID["if"]        = IF
    ID["else"]      = ELSE
    ID["do"]        = DO
    ID["while"]     = WHILE
    ID["for"]       = FOR
    ID["switch"]    = SWITCH
    ID["case"]      = CASE
    ID["default"]   = DEFAULT
    ID["break"]     = BREAK
    # fmt: on

    @_(r"\n+")
    def ignore_newline(self, t: Token) -> None:
        self.lineno += t.value.count("\n")

    @override
    def error(self, t: Token) -> Token:
        t.value = t.value[0]
        self.index += 1
        return t


def tokenize(source: str, lexer: Optional[CLexer] = None) -> TokenSource:
    """Lex ``source`` lazily and wrap the tokens for the parser."""

    if lexer is None:
        lexer = CLexer()
    return TokenSource(lexer.tokenize(source), lexer=lexer)
