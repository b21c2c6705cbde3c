from txparsec.Combinators import sequence, skip_until_recovery
from txparsec.Errors import ParserErrorCode
from txparsec.Prim import literal
from txparsec.State import ParsingState

# A statement is "hello;". On failure we skip ahead to the next ';'.
statement = sequence(literal("hello"), literal(";")).map("".join)


def skip_until_semicolon(base):
    return skip_until_recovery(base, literal(";"))


def test_no_recovery_needed():
    result = skip_until_semicolon(statement).parse("hello;")
    assert result.type == "success"
    assert result.data == "hello;"


def test_skips_to_recovery_point_and_retries():
    result = skip_until_semicolon(statement).parse("xxx;hello;")
    assert result.type == "success"
    assert result.data == "hello;"


def test_original_failure_when_recovery_never_matches():
    state = ParsingState("xxx")
    result = statement.skip_until_recovery(literal(";")).parse(state)
    assert result.type == "failure"
    assert result.code is ParserErrorCode.EXPECTED_LITERAL
    assert result.error_message == 'Expected literal: "hello"'
    assert state.position == 0


def test_failed_retry_skips_content():
    state = ParsingState("xxx;yyy")
    result = skip_until_semicolon(statement).parse(state)
    assert result.type == "success"
    assert result.data is None
    assert (result.meta.start, result.meta.end) == (0, 4)
    assert state.position == 4


def test_statement_by_statement_on_shared_state():
    # Resuming on one cursor: each top-level parse continues where the last stopped.
    state = ParsingState("hello;oops;hello;")
    parser = skip_until_semicolon(statement)
    results = [parser.parse(state).data for _ in range(2)]
    assert results == ["hello;", "hello;"]
    assert state.at_eof
