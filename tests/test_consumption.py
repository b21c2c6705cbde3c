# tests/test_consumption.py
from hypothesis import given
from hypothesis import strategies as st

from conftest import assert_result_eq
from txparsec.Char import digits, letters
from txparsec.Combinators import many, or_, sep_by, sequence
from txparsec.Number import number
from txparsec.Prim import literal, regex, utf8
from txparsec.State import ParsingState

grammars = st.sampled_from([
    literal("ab"),
    utf8("a"),
    regex(r"^[ab]+"),
    many(utf8("a")),
    sequence(utf8("a"), utf8("b")),
    or_(literal("ba"), literal("a")),
    sep_by(letters(), utf8(",")),
    number(),
])


@given(grammars, st.text(alphabet="ab,1.-"))
def test_parsing_is_deterministic(parser, text):
    assert_result_eq(parser.parse(ParsingState(text)), parser.parse(ParsingState(text)))


@given(grammars, st.text(alphabet="ab,1.-"))
def test_failure_never_moves_cursor(parser, text):
    state = ParsingState(text)
    result = parser.parse(state)
    if result:
        assert state.position == result.meta.end
    else:
        assert (state.position, state.line, state.column) == (0, 1, 1)


@given(st.text(alphabet="ab"))
def test_many_never_fails(text):
    result = many(utf8("a")).parse(text)
    assert result
    assert result.data == ["a"] * (len(text) - len(text.lstrip("a")))


def test_sequence_rolls_back_partial_progress():
    """
    sequence(utf8('a'), utf8('b')) on 'ac'

    1. 'a' matches and is consumed.
    2. 'b' fails on 'c'.
    3. The whole sequence fails and the cursor returns to 0.
    """
    state = ParsingState("ac")
    result = sequence(utf8("a"), utf8("b")).parse(state)
    assert result.type == "failure"
    assert state.position == 0


def test_or_backtracks_into_next_alternative():
    """
    sequence(utf8('a'), utf8('b')) | utf8('a') on 'ac'

    The first branch consumes 'a' before failing; the rollback lets the
    second branch start from the beginning again and match 'a'.
    """
    parser = sequence(utf8("a"), utf8("b")) | utf8("a")

    state = ParsingState("ac")
    result = parser.parse(state)

    assert result.data == "a"
    assert state.peek_remainder() == "c"


def test_resuming_on_shared_state():
    state = ParsingState("12,34")
    assert digits().map(int).parse(state).data == 12
    assert utf8(",").parse(state).data == ","
    assert digits().map(int).parse(state).data == 34
    assert state.at_eof
