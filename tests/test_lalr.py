import dataclasses
import io
from typing import Any

import pytest
from conftest import ListLogger, lexemes
from sly.yacc import SlyLogger
from syncheck.compiler import compile_rules
from syncheck.errors import ParseError, ParseSyntaxError, StackOverflow, UnrecoverableSyntaxError
from syncheck.lalr import ParseLogger, Parser, ParseResult
from syncheck.tables import ParseTables
from syncheck.tokens import Lexeme, TokenSource

# ============================================================================
# region -------- Helpers
# ============================================================================


# Rule numbers: 1 is "$accept : stmts $end", then the rules below in order starting at 2.
STATEMENTS = (
    "stmts : stmts stmt",
    "stmts : stmt",
    "stmt : ID ';'",
    "stmt : error ';'",
)
ERROR_RULE = 5

SUMS = (
    "expr : expr '+' term",
    "expr : term",
    "term : NUM",
)


@pytest.fixture(scope="module")
def statements() -> ParseTables:
    return compile_rules(["ID", ";"], STATEMENTS)


@pytest.fixture(scope="module")
def sums() -> ParseTables:
    return compile_rules(["NUM", "+"], SUMS)


@pytest.fixture(scope="module")
def nested() -> ParseTables:
    return compile_rules(["ID"], ["items : ID items", "items : ID"])


def error_texts(result: ParseResult) -> list[str]:
    return [error.text for error in result.syntax_errors]


# endregion


# ============================================================================
# region -------- Accepting input
# ============================================================================


def test_valid_input(statements: ParseTables, reporter, reports: list[ParseError]):
    result = Parser(statements, reporter=reporter).parse(lexemes("a ; b ; c ;"))

    assert result.accepted
    assert result.ok
    assert result.errors == []
    assert result.failure is None
    assert reports == []


def test_default_action_copies_first_value(sums: ParseTables):
    result = Parser(sums).parse(lexemes("7"))

    assert result.ok
    assert result.value == "7"


def test_semantic_actions(sums: ParseTables):
    actions: list[Any] = [None] * sums.nrules
    actions[2] = lambda p, values: values[0] + values[2]
    actions[4] = lambda p, values: int(values[0])

    result = Parser(sums, actions).parse(lexemes("1 + 2 + 3 + 4"))

    assert result.ok
    assert result.value == 10


def test_actions_see_right_hand_side_values(sums: ParseTables):
    seen: list[list[Any]] = []

    def record(parser: Parser, values: list[Any]) -> str:
        seen.append(list(values))
        return "sum"

    actions: list[Any] = [None] * sums.nrules
    actions[2] = record

    result = Parser(sums, actions).parse(lexemes("1 + 2"))

    assert result.value == "sum"
    assert seen == [["1", "+", "2"]]


def test_accepts_token_source_and_plain_iterables(statements: ParseTables):
    parser = Parser(statements)

    assert parser.parse(TokenSource(lexemes("a ;"))).ok
    assert parser.parse(iter(lexemes("a ;"))).ok


def test_empty_input_is_rejected_by_nonempty_grammar(statements: ParseTables, reporter, reports: list[ParseError]):
    result = Parser(statements, reporter=reporter).parse([])

    assert not result.accepted
    assert isinstance(result.failure, UnrecoverableSyntaxError)
    assert [type(error) for error in reports] == [ParseSyntaxError]
    assert reports[0].text == ""


# endregion


# ============================================================================
# region -------- Error recovery
# ============================================================================


def test_reports_offending_token(statements: ParseTables, reporter, reports: list[ParseError]):
    tokens = [Lexeme("ID", "a", 1), Lexeme(";", ";", 1), Lexeme("ID", "b", 2), Lexeme("ID", "oops", 3)]
    tokens += [Lexeme(";", ";", 3)]

    result = Parser(statements, reporter=reporter).parse(tokens)

    assert result.accepted
    assert not result.ok
    assert result.error_count == 1
    assert [(error.line, error.text) for error in reports] == [(3, "oops")]
    assert str(reports[0]) == "Syntax error at line 3, token : 'oops'"


def test_discards_malformed_tokens_one_at_a_time(statements: ParseTables, trace: ListLogger):
    result = Parser(statements, debug=trace).parse(lexemes("a ; b x y z ; c ;"))

    discarded = [line for line in trace.lines if line.startswith("Error: discarding")]
    assert discarded == [
        "Error: discarding ID ('x')",
        "Error: discarding ID ('y')",
        "Error: discarding ID ('z')",
    ]
    assert result.accepted
    assert error_texts(result) == ["x"]


def test_end_of_input_during_recovery_is_fatal(statements: ParseTables, reporter, reports: list[ParseError]):
    result = Parser(statements, reporter=reporter).parse(lexemes("a ; b x y"))

    assert not result.accepted
    assert isinstance(result.failure, UnrecoverableSyntaxError)
    assert result.failure.text == ""
    assert [error.text for error in reports] == ["x"]


def test_errors_inside_recovery_window_are_not_reported(statements: ParseTables):
    # Only two tokens are shifted between the errors, so the second one is part of the same recovery.
    result = Parser(statements).parse(lexemes("a x ; b y ;"))

    assert result.accepted
    assert error_texts(result) == ["x"]


def test_errors_after_recovery_are_reported(statements: ParseTables):
    result = Parser(statements).parse(lexemes("a x ; b ; c y ;"))

    assert result.accepted
    assert error_texts(result) == ["x", "y"]


def test_errok_ends_recovery(statements: ParseTables):
    actions: list[Any] = [None] * statements.nrules
    actions[ERROR_RULE] = lambda parser, values: parser.errok()

    result = Parser(statements, actions).parse(lexemes("a x ; b y ;"))

    assert result.accepted
    assert error_texts(result) == ["x", "y"]


def test_clearin_drops_lookahead(statements: ParseTables):
    parser = Parser(statements)
    parser.lookahead = Lexeme("ID", "a", 1)

    parser.clearin()

    assert parser.lookahead is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        pytest.param("x ;", Lexeme("ID", "x", 1), id="ordinary token"),
        pytest.param("", Lexeme("$end", "", 1), id="end of input"),
    ],
)
def test_recovery_keeps_token_it_had_to_read(statements: ParseTables, trace: ListLogger, text: str, expected: Lexeme):
    # After clearin() inside a recovery window, the next token has not been rejected yet.
    parser = Parser(statements, debug=trace)
    parser.errorcount = parser.error_count

    parser._recover(TokenSource(lexemes(text)))

    assert parser.lookahead == expected
    assert not any(line.startswith("Error: discarding") for line in trace.lines)
    assert parser.state == statements.error_shift(0)


def test_recovery_discards_held_token(statements: ParseTables):
    parser = Parser(statements)
    parser.errorcount = parser.error_count
    parser.lookahead = Lexeme("ID", "x", 1)

    parser._recover(TokenSource(lexemes("y ;")))

    assert parser.lookahead is None


def test_no_error_rule_means_no_recovery(sums: ParseTables, reporter, reports: list[ParseError]):
    result = Parser(sums, reporter=reporter).parse(lexemes("1 + + 2"))

    assert not result.accepted
    assert isinstance(result.failure, UnrecoverableSyntaxError)
    assert (result.failure.line, result.failure.text) == (1, "+")
    assert [error.text for error in reports] == ["+"]


def test_unknown_token_kind_is_a_syntax_error(statements: ParseTables):
    result = Parser(statements).parse([Lexeme("ID", "a", 1), Lexeme("ERROR", "@", 1), Lexeme(";", ";", 1)])

    assert result.accepted
    assert error_texts(result) == ["@"]


def test_recovery_never_reads_past_end(statements: ParseTables):
    pulled: list[Lexeme] = []

    def tokens():
        for lexeme in lexemes("a ; b x y z"):
            pulled.append(lexeme)
            yield lexeme

    result = Parser(statements).parse(tokens())

    assert isinstance(result.failure, UnrecoverableSyntaxError)
    assert len(pulled) == 6


# endregion


# ============================================================================
# region -------- Stack growth
# ============================================================================


def test_stack_grows_past_initial_depth(nested: ParseTables, trace: ListLogger):
    parser = Parser(nested, initial_depth=4, max_depth=64, debug=trace)
    result = parser.parse(lexemes(" ".join(["a"] * 40)))

    assert result.ok
    grown = [line for line in trace.lines if line.startswith("Stack size increased")]
    assert grown == [f"Stack size increased to {size}" for size in (8, 16, 32, 64)]


def test_stack_overflow_is_reported(nested: ParseTables, reporter, reports: list[ParseError]):
    parser = Parser(nested, reporter=reporter, initial_depth=4, max_depth=50)
    result = parser.parse(lexemes(" ".join(["a"] * 100)))

    assert not result.accepted
    assert isinstance(result.failure, StackOverflow)
    assert result.failure.limit == 50
    assert reports == [result.failure]
    assert result.error_count == 0
    assert str(result.failure).startswith("memory exhausted")


def test_stack_depth_limit_is_exact(nested: ParseTables):
    # The bottom state plus one state per ID.
    assert Parser(nested, max_depth=50, initial_depth=1).parse(lexemes(" ".join(["a"] * 49))).ok
    assert not Parser(nested, max_depth=50, initial_depth=1).parse(lexemes(" ".join(["a"] * 50))).ok


@pytest.mark.parametrize(
    ("initial_depth", "max_depth"),
    [
        pytest.param(0, 10, id="zero initial depth"),
        pytest.param(20, 10, id="max below initial"),
    ],
)
def test_invalid_depths(nested: ParseTables, initial_depth: int, max_depth: int):
    with pytest.raises(ValueError, match="depth"):
        Parser(nested, initial_depth=initial_depth, max_depth=max_depth)


def test_depth_configuration_by_subclassing(nested: ParseTables):
    class ShallowParser(Parser):
        initial_depth = 2
        max_depth = 8

    result = ShallowParser(nested).parse(lexemes("a a a a a a a a a a"))

    assert isinstance(result.failure, StackOverflow)
    assert result.failure.limit == 8


# endregion


# ============================================================================
# region -------- Re-entrancy
# ============================================================================


def test_parse_is_repeatable(statements: ParseTables, reporter, reports: list[ParseError]):
    tokens = lexemes("a x ; b ; c y z ; d")
    parser = Parser(statements, reporter=reporter)

    first = parser.parse(tokens)
    first_reports = list(reports)
    reports.clear()
    second = parser.parse(tokens)

    assert first == second
    assert [(type(e), e.line, e.text) for e in first_reports] == [(type(e), e.line, e.text) for e in reports]
    assert isinstance(first.failure, UnrecoverableSyntaxError)


def test_state_is_reset_between_parses(statements: ParseTables):
    parser = Parser(statements)

    assert not parser.parse(lexemes("a x")).accepted
    result = parser.parse(lexemes("a ;"))

    assert result.ok
    assert result.errors == []
    assert parser.errorcount == 0
    assert parser.lookahead is None


def test_parser_ends_in_final_state(sums: ParseTables):
    parser = Parser(sums)

    assert parser.state == 0
    assert parser.parse(lexemes("1 + 2")).ok
    assert parser.state == sums.final_state


def test_results_compare_by_error_kind_and_position():
    def result(*errors: ParseError) -> ParseResult:
        return ParseResult(False, None, list(errors), UnrecoverableSyntaxError(3, ""))

    assert result(ParseSyntaxError(3, "x")) == result(ParseSyntaxError(3, "x"))
    assert result(ParseSyntaxError(3, "x")) != result(ParseSyntaxError(4, "x"))
    assert result(ParseSyntaxError(3, "x")) != result(StackOverflow(3, "x", 10))
    assert result() != ParseResult(False, None, [], UnrecoverableSyntaxError(3, "y"))
    assert ParseResult(True, "v") == ParseResult(True, "v", [])

    with pytest.raises(dataclasses.FrozenInstanceError):
        result().accepted = True  # pyright: ignore [reportAttributeAccessIssue]


def test_default_logger_writes_warnings_to_its_stream():
    stream = io.StringIO()

    ParseLogger(stream).warning("%d of %s", 3, "these")

    assert ParseLogger is SlyLogger
    assert stream.getvalue() == "WARNING: 3 of these\n"


def test_trace_mentions_reductions(sums: ParseTables, trace: ListLogger):
    Parser(sums, debug=trace).parse(lexemes("1 + 2"))

    assert trace.lines[0] == "Entering state 0"
    assert any(line.startswith("Reducing stack by rule 4: term") for line in trace.lines)
    assert trace.lines[-1] == "Now at end of input."


def test_extra_actions_are_warned_about(sums: ParseTables, monkeypatch: pytest.MonkeyPatch):
    log = ListLogger()
    monkeypatch.setattr(Parser, "log", log)

    Parser(sums, [None] * (sums.nrules + 2))

    assert log.lines == [f"{sums.nrules + 2} semantic actions given for {sums.nrules} rules; the extra ones are never used."]


# endregion
