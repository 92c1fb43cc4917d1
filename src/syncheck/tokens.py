# region License
# -----------------------------------------------------------------------------
# syncheck: tokens.py
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion
"""The token stream the parser pulls from."""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, NamedTuple, Optional, Union

from ._misc import override

if TYPE_CHECKING:
    from sly import Lexer
    from sly.lex import Token


__all__ = ("END_OF_INPUT", "Lexeme", "TokenSource")


END_OF_INPUT = "$end"
"""Token kind marking the end of input."""


class Lexeme(NamedTuple):
    """A single token as the parser sees it."""

    kind: str
    text: str
    line: int

    @property
    def at_end(self) -> bool:
        return self.kind == END_OF_INPUT


class TokenSource:
    """A pull-based token producer that keeps answering with end of input once the tokens run out.

    Parameters
    ----------
    tokens: Iterable[Token | Lexeme]
        SLY tokens or lexemes, in input order. A lexeme of kind ``"$end"`` also ends the input.
    lexer: Lexer, optional
        The lexer producing ``tokens``. When given, the end-of-input lexeme carries the lexer's final line number
        instead of the line of the last token.
    """

    def __init__(self, tokens: Iterable[Union["Token", Lexeme]], lexer: Optional["Lexer"] = None) -> None:
        self._tokens = iter(tokens)
        self._lexer = lexer
        self._line = 1
        self._end: Optional[Lexeme] = None

    @override
    def __repr__(self) -> str:
        state = "exhausted" if self._end is not None else f"at line {self._line}"
        return f"<{type(self).__name__} {state}>"

    def __iter__(self) -> Iterator[Lexeme]:
        while True:
            lexeme = self.next_token()
            if lexeme.at_end:
                return
            yield lexeme

    @property
    def exhausted(self) -> bool:
        return self._end is not None

    def next_token(self) -> Lexeme:
        """Return the next lexeme, or the end-of-input lexeme on this and every later call once input runs out."""

        if self._end is not None:
            return self._end

        tok = next(self._tokens, None)
        if tok is None:
            line = self._lexer.lineno if self._lexer is not None else self._line
            self._end = Lexeme(END_OF_INPUT, "", line)
            return self._end

        lexeme = tok if isinstance(tok, Lexeme) else Lexeme(tok.type, str(tok.value), tok.lineno)
        self._line = lexeme.line
        if lexeme.at_end:
            self._end = lexeme
        return lexeme
