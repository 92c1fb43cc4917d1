import pytest
from syncheck.c_lexer import CLexer, tokenize
from syncheck.tokens import END_OF_INPUT, Lexeme, TokenSource


def kinds(source: str) -> list[str]:
    return [lexeme.kind for lexeme in tokenize(source)]


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        pytest.param("int float char double", ["INT", "FLOAT", "CHAR", "DOUBLE"], id="type keywords"),
        pytest.param(
            "if else do while for switch case default break",
            ["IF", "ELSE", "DO", "WHILE", "FOR", "SWITCH", "CASE", "DEFAULT", "BREAK"],
            id="control keywords",
        ),
        pytest.param("iffy int_ x1 _", ["ID", "ID", "ID", "ID"], id="identifiers containing keywords"),
        pytest.param("0 42 3.14", ["NUM", "NUM", "NUM"], id="numbers"),
        pytest.param("++ -- += -=", ["INC", "DEC", "ADDASSIGN", "SUBASSIGN"], id="increments and compound assignment"),
        pytest.param("== != <= >= < > && ||", ["EQ", "NEQ", "LE", "GE", "LT", "GT", "AND", "OR"], id="comparisons"),
        pytest.param("+-*/%;,=[](){}:!", list("+-*/%;,=[](){}:!"), id="single characters"),
        pytest.param("a+++b", ["ID", "INC", "+", "ID"], id="longest operator first"),
        pytest.param("a<=b", ["ID", "LE", "ID"], id="no spaces"),
    ],
)
def test_token_kinds(source: str, expected: list[str]):
    assert kinds(source) == expected


def test_lexeme_text():
    assert [lexeme.text for lexeme in tokenize("x = 3.5;")] == ["x", "=", "3.5", ";"]


def test_comments_are_skipped():
    source = "a // line comment\n/* block\n   comment */ b"

    assert [(lexeme.kind, lexeme.text, lexeme.line) for lexeme in tokenize(source)] == [
        ("ID", "a", 1),
        ("ID", "b", 3),
    ]


def test_line_numbers():
    lines = [lexeme.line for lexeme in tokenize("int a;\n\na = 1;\r\n\tb++;")]

    assert lines == [1, 1, 1, 3, 3, 3, 3, 4, 4, 4]


def test_unknown_characters_become_error_tokens():
    assert [(lexeme.kind, lexeme.text) for lexeme in tokenize("a @ # b")] == [
        ("ID", "a"),
        ("ERROR", "@"),
        ("ERROR", "#"),
        ("ID", "b"),
    ]


def test_end_of_input_is_idempotent():
    source = tokenize("a\n\n\n")

    assert source.next_token() == Lexeme("ID", "a", 1)
    end = source.next_token()
    assert end == Lexeme(END_OF_INPUT, "", 4)
    assert end.at_end
    assert source.exhausted
    assert source.next_token() == end
    assert source.next_token() == end


def test_empty_source():
    source = tokenize("")

    assert source.next_token() == Lexeme(END_OF_INPUT, "", 1)


def test_lexer_can_be_reused():
    lexer = CLexer()

    assert kinds_with(lexer, "int a;") == ["INT", "ID", ";"]
    assert kinds_with(lexer, "while (x)") == ["WHILE", "(", "ID", ")"]


def kinds_with(lexer: CLexer, source: str) -> list[str]:
    return [lexeme.kind for lexeme in tokenize(source, lexer)]


# ============================================================================
# region -------- TokenSource
# ============================================================================


def test_token_source_without_lexer_ends_on_last_line():
    source = TokenSource([Lexeme("ID", "a", 1), Lexeme("ID", "b", 7)])

    assert list(source) == [Lexeme("ID", "a", 1), Lexeme("ID", "b", 7)]
    assert source.next_token() == Lexeme(END_OF_INPUT, "", 7)


def test_token_source_stops_at_explicit_end():
    pulled: list[Lexeme] = []

    def tokens():
        for lexeme in (Lexeme("ID", "a", 1), Lexeme(END_OF_INPUT, "", 2), Lexeme("ID", "never", 3)):
            pulled.append(lexeme)
            yield lexeme

    source = TokenSource(tokens())

    assert list(source) == [Lexeme("ID", "a", 1)]
    assert source.next_token() == Lexeme(END_OF_INPUT, "", 2)
    assert len(pulled) == 2


def test_token_source_repr():
    source = TokenSource([])

    assert repr(source) == "<TokenSource at line 1>"
    source.next_token()
    assert repr(source) == "<TokenSource exhausted>"


# endregion
