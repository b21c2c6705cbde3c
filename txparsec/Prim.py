import re
from typing import Any, Callable, Optional, Tuple, TypeVar, Union

from .Errors import ParserErrorCode, RegexAnchorError
from .Parsec import Parser
from .Result import Failure, Result, Success
from .State import ParsingState

T = TypeVar('T')

# Leading inline flags such as (?i) may precede the anchor.
_ANCHORED = re.compile(r"(?:\(\?[aiLmsux]+\))*(?:\^|\\A)")


def pure(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(state: ParsingState) -> Result[T]:
        return Success(state.meta(), value)
    return Parser(parse)


def fail(message: str, code: ParserErrorCode = ParserErrorCode.EXPECTED_LITERAL) -> Parser[Any]:
    """A parser that always fails with a message."""
    def parse(state: ParsingState) -> Result[Any]:
        return Failure(code, state.meta(), message)
    return Parser(parse)


def utf8(expected: str) -> Parser[str]:
    """Parses the single character `expected` and returns it."""
    if len(expected) != 1:
        raise ValueError(f"utf8 expects exactly one character, got {expected!r}")

    def parse(state: ParsingState) -> Result[str]:
        with state.transaction() as trx:
            char = trx.next_char()
            if char is None:
                return trx.failure(ParserErrorCode.UNEXPECTED_EOF, "Unexpected EOF")
            if char != expected:
                return trx.failure(ParserErrorCode.EXPECTED_LITERAL, f"Expected character: {expected}")
            return trx.success(expected)
    return Parser(parse)


def literal(expected: str, case_insensitive: bool = False) -> Parser[str]:
    """
    Parses the exact string `expected` and returns it.

    With case_insensitive=True the input is compared case-folded, but the
    returned value is still `expected` as written in the grammar.
    """
    prepared_expected = expected.casefold() if case_insensitive else expected

    def parse(state: ParsingState) -> Result[str]:
        with state.transaction() as trx:
            prepared_input = trx.next_chars(len(expected))
            if case_insensitive:
                prepared_input = prepared_input.casefold()
            if prepared_input == prepared_expected:
                return trx.success(expected)
            return trx.failure(ParserErrorCode.EXPECTED_LITERAL, f'Expected literal: "{expected}"')
    return Parser(parse)


def regex(pattern: Union[str, re.Pattern], flags: int = 0) -> Parser[str]:
    """
    Parses the text matched by `pattern` at the current position and returns it.

    The pattern has to be anchored with '^' (or '\\A'); an unanchored
    pattern raises RegexAnchorError here rather than misbehaving later.
    """
    compiled = re.compile(pattern, flags) if isinstance(pattern, str) else pattern
    if not _ANCHORED.match(compiled.pattern):
        raise RegexAnchorError(compiled.pattern)

    def parse(state: ParsingState) -> Result[str]:
        with state.transaction() as trx:
            match = compiled.match(trx.peek_remainder())
            if match is None:
                return trx.failure(ParserErrorCode.EXPECTED_REGEX,
                                   f"Expected to match regex: {compiled.pattern}")
            return trx.success(trx.next_chars(len(match.group(0))))
    return Parser(parse)


def any_char() -> Parser[str]:
    """Parses any character and returns it."""
    def parse(state: ParsingState) -> Result[str]:
        with state.transaction() as trx:
            char = trx.next_char()
            if char is None:
                return trx.failure(ParserErrorCode.UNEXPECTED_EOF, "Unexpected EOF")
            return trx.success(char)
    return Parser(parse)


def eof() -> Parser[None]:
    """Succeeds only at the end of input."""
    def parse(state: ParsingState) -> Result[None]:
        with state.transaction() as trx:
            if trx.peek() is not None:
                return trx.failure(ParserErrorCode.EXPECTED_LITERAL, "Expected EOF")
            return trx.success(None)
    return Parser(parse)


def take_while(predicate: Callable[[str], bool]) -> Parser[str]:
    """Consumes characters while predicate(char) holds. Never fails; may return ''."""
    def parse(state: ParsingState) -> Result[str]:
        with state.transaction() as trx:
            taken = []
            while trx.peek() is not None and predicate(trx.peek()):
                taken.append(trx.next_char())
            return trx.success(''.join(taken))
    return Parser(parse)


def take_until(predicate: Callable[[str], bool]) -> Parser[str]:
    """Consumes characters until predicate(char) holds; the stop character is not consumed."""
    return take_while(lambda char: not predicate(char))


def peek(parser: Parser[T]) -> Parser[T]:
    """Runs parser and hands back its result, but never consumes input."""
    def parse(state: ParsingState) -> Result[T]:
        with state.transaction() as trx:
            result = parser.parse(state)
            trx.rollback()
            return result
    return Parser(parse)


def recursive(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """
    Defers building a parser until it runs, so a grammar can refer to itself:

        nested = recursive(lambda: sequence(utf8("("), nested.optional(), utf8(")")) | utf8("0"))

    The thunk is called again on every invocation; nothing is memoized.
    """
    def parse(state: ParsingState) -> Result[T]:
        return thunk().parse(state)
    return Parser(parse)


def run_parser(parser: Parser[T],
               input: Union[ParsingState, str]) -> Tuple[Optional[T], Optional[Failure]]:
    """Run parser, returning (value, None) on success or (None, failure) otherwise."""
    result = parser.parse(input)
    if isinstance(result, Failure):
        return None, result
    return result.data, None
