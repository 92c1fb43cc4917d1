"""A syntax checker for a small C-like teaching language, driven by compressed LALR(1) tables."""

from .checker import check, check_file
from .errors import ParseError, ParseSyntaxError, StackOverflow, TableError, UnrecoverableSyntaxError
from .lalr import ParseLogger, ParseResult, Parser
from .tables import ParseTables
from .tokens import Lexeme, TokenSource

__all__ = (
    "Lexeme",
    "ParseError",
    "ParseLogger",
    "ParseResult",
    "ParseSyntaxError",
    "ParseTables",
    "Parser",
    "StackOverflow",
    "TableError",
    "TokenSource",
    "UnrecoverableSyntaxError",
    "check",
    "check_file",
)
