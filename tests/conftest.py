from collections.abc import Callable

import pytest
from syncheck.errors import ParseError
from syncheck.tokens import Lexeme


class ListLogger:
    """Collects log lines instead of writing them anywhere."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def debug(self, msg: str, *args: object, **kwargs: object) -> None:
        self.lines.append(msg % args)

    info = warning = error = critical = debug


def lexemes(text: str, line: int = 1) -> list[Lexeme]:
    """Split ``text`` on whitespace into lexemes: digits are NUM, punctuation is itself, anything else is ID."""

    result: list[Lexeme] = []
    for word in text.split():
        if word.isdigit():
            kind = "NUM"
        elif word.isidentifier():
            kind = "ID"
        else:
            kind = word
        result.append(Lexeme(kind, word, line))
    return result


@pytest.fixture
def reports() -> list[ParseError]:
    return []


@pytest.fixture
def reporter(reports: list[ParseError]) -> Callable[[ParseError], None]:
    return reports.append


@pytest.fixture
def trace() -> ListLogger:
    return ListLogger()
