import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from txparsec.Errors import ParserErrorCode, RegexAnchorError
from txparsec.Prim import (
    any_char, eof, fail, literal, peek, pure, regex, run_parser,
    take_until, take_while, utf8,
)
from txparsec.State import ParsingState


def run(parser, input_str):
    return run_parser(parser, input_str)


# --- utf8 ---

@given(st.characters())
def test_utf8_parser(c):
    res, err = run(utf8(c), c)
    assert res == c
    assert err is None

    diff = chr((ord(c) + 1) % 0x110000)
    res_fail, err_fail = run(utf8(c), diff)
    assert res_fail is None
    assert err_fail.code is ParserErrorCode.EXPECTED_LITERAL


def test_utf8_eof():
    result = utf8("h").parse(ParsingState(""))
    assert result.type == "failure"
    assert result.code is ParserErrorCode.UNEXPECTED_EOF
    assert "Unexpected EOF" in result.error_message


def test_utf8_rejects_multi_character_argument():
    with pytest.raises(ValueError):
        utf8("ab")


# --- literal ---

@pytest.mark.parametrize("expected, input_str, output", [
    ("Hello", "Hello", "Hello"),
    ("hello", "Hello", None),
    ("hello", "hell_o", None),
    ("hello", "hello world", "hello"),
    ("hello", "world", None),
    ("hello", "world hello", None),
    ("hello", "", None),
    ("", "anything", ""),
])
def test_literal(expected, input_str, output):
    res, _ = run(literal(expected), input_str)
    assert res == output


def test_literal_from_resumed_state():
    res, _ = run(literal("hello"), ParsingState("world hello", 6))
    assert res == "hello"


def test_literal_case_insensitive():
    result = literal("hello", case_insensitive=True).parse("hElLo")
    assert result.type == "success"
    assert result.data == "hello"


def test_literal_failure_message_and_rollback():
    state = ParsingState("world")
    result = literal("hello").parse(state)
    assert result.code is ParserErrorCode.EXPECTED_LITERAL
    assert "Expected literal" in result.error_message
    assert state.position == 0


@given(st.text(min_size=1), st.text())
def test_failed_literal_never_moves_cursor(expected, text):
    state = ParsingState(text)
    result = literal(expected).parse(state)
    if result:
        assert text.startswith(expected)
        assert state.position == len(expected)
    else:
        assert (state.position, state.line, state.column) == (0, 1, 1)


# --- regex ---

@pytest.mark.parametrize("input_state, output", [
    (lambda: ParsingState("hello"), "hello"),
    (lambda: ParsingState("world hello"), None),
    (lambda: ParsingState("world hello", 6), "hello"),
])
def test_regex(input_state, output):
    res, _ = run(regex(r"^hello"), input_state())
    assert res == output


def test_regex_digits():
    assert run(regex(r"^\d+"), "123abc")[0] == "123"
    res, err = run(regex(r"^\d+"), "abc123")
    assert res is None
    assert err.code is ParserErrorCode.EXPECTED_REGEX
    assert "Expected to match regex" in err.error_message


def test_regex_empty_input():
    assert run(regex(r"^.+"), "")[0] is None
    assert run(regex(r"^$"), "")[0] == ""


def test_regex_accepts_compiled_and_flagged_patterns():
    assert run(regex(re.compile(r"^abc", re.IGNORECASE)), "ABCd")[0] == "ABC"
    assert run(regex(r"(?i)^abc"), "aBc")[0] == "aBc"
    assert run(regex(r"\Aab"), "abc")[0] == "ab"


def test_regex_must_be_anchored():
    with pytest.raises(RegexAnchorError):
        regex(r"hello")
    with pytest.raises(ValueError):
        regex(re.compile(r"\d+"))


def test_regex_updates_line_and_column():
    state = ParsingState("ab\ncd!")
    result = regex(r"^[a-z\n]+").parse(state)
    assert result.data == "ab\ncd"
    assert (state.line, state.column) == (2, 3)
    assert (result.meta.end_line, result.meta.end_column) == (2, 3)


# --- any_char / eof ---

def test_any_char():
    assert run(any_char(), "xyz")[0] == "x"
    res, err = run(any_char(), "")
    assert err.code is ParserErrorCode.UNEXPECTED_EOF


def test_eof():
    result = eof().parse("")
    assert result.type == "success"
    assert result.data is None

    res, err = run(eof(), "a")
    assert err.code is ParserErrorCode.EXPECTED_LITERAL
    assert "Expected EOF" in err.error_message


# --- take_while / take_until ---

def test_take_while():
    result = take_while(str.isalpha).parse("Hello123")
    assert result.data == "Hello"
    assert (result.meta.start, result.meta.end) == (0, 5)


def test_take_while_empty_consumption():
    result = take_while(str.isalpha).parse("1234")
    assert result.type == "success"
    assert result.data == ""
    assert (result.meta.start, result.meta.end) == (0, 0)


def test_take_until():
    result = take_until(lambda c: c == ",").parse("Hello,World!")
    assert result.data == "Hello"
    assert result.meta.end == 5


def test_take_until_consumes_everything_without_delimiter():
    result = take_until(lambda c: c == "x").parse("abcdef")
    assert result.data == "abcdef"
    assert result.meta.end == 6


@given(st.text())
def test_take_while_never_fails(text):
    result = take_while(str.isdigit).parse(text)
    assert result
    assert text.startswith(result.data)


def test_predicate_errors_propagate():
    def explode(_):
        raise KeyError("predicate failed")

    with pytest.raises(KeyError):
        take_while(explode).parse("abc")


# --- peek ---

def test_peek_does_not_consume():
    state = ParsingState("hello world")
    before = state.snapshot()

    first = peek(literal("hello")).parse(state)
    assert first.data == "hello"
    assert state.snapshot() == before

    second = literal("hello").parse(state)
    assert second.data == "hello"


def test_peek_reports_failure():
    result = peek(literal("hello")).parse("goodbye")
    assert result.type == "failure"
    assert result.code is ParserErrorCode.EXPECTED_LITERAL


# --- pure / fail / entry guard ---

def test_pure_and_fail():
    state = ParsingState("abc")
    assert pure(42).parse(state).data == 42
    failure = fail("custom", ParserErrorCode.EXPECTED_REGEX).parse(state)
    assert failure.code is ParserErrorCode.EXPECTED_REGEX
    assert failure.error_message == "custom"
    assert state.position == 0


def test_position_beyond_input_is_eof():
    result = pure("never").parse(ParsingState("abc", 10))
    assert result.type == "failure"
    assert result.code is ParserErrorCode.UNEXPECTED_EOF


def test_parse_without_input_uses_empty_string():
    assert eof().parse().type == "success"
    assert eof()().type == "success"
