from contextlib import closing
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from .Char import spaces
from .Debug import DebugLogger, get_default_logger
from .Errors import ParserErrorCode
from .Parsec import Parser
from .Result import Result, Success
from .State import ParsingState
from .Transaction import TransactionMode

T = TypeVar('T')
U = TypeVar('U')


# 1. map: Transforms the value of a successful parse
def map_(parser: Parser[T], transform: Callable[[T], U]) -> Parser[U]:
    """
    Applies transform to the value of a successful parse, keeping its span.
    Failures pass through unchanged.
    """
    def parse(state: ParsingState) -> Result[U]:
        result = parser.parse(state)
        if not result:
            return result
        return result.map(transform)
    return Parser(parse)


# 2. optional: Turns a failure into a None result
def optional(parser: Parser[T]) -> Parser[Optional[T]]:
    """
    Tries parser; returns its result if successful, else succeeds with None
    at the position where it started.
    """
    def parse(state: ParsingState) -> Result[Optional[T]]:
        with state.transaction(TransactionMode.AUTO_COMMIT) as trx:
            result = parser.parse(state)
            if not result:
                trx.rollback()
                return trx.success(None)
            return result
    return Parser(parse)


def _many_accum(parser: Parser[T], state: ParsingState, items: List[T]) -> List[T]:
    """
    Runs parser until it fails or succeeds without moving the cursor,
    appending each value to items. A zero-width success ends the loop
    without being collected, so parsers like take_while cannot spin forever.
    """
    while True:
        before = state.snapshot()
        result = parser.parse(state)
        if not result:
            state.restore(before)
            return items
        if state.position == before.position:
            return items
        items.append(result.data)


# 3. many: Applies a parser zero or more times
def many(parser: Parser[T]) -> Parser[List[T]]:
    """Parse zero or more occurrences of `parser`. Never fails."""
    def parse(state: ParsingState) -> Result[List[T]]:
        with state.transaction() as trx:
            return trx.success(_many_accum(parser, state, []))
    return Parser(parse)


# 4. at_least_once: Applies a parser one or more times
def at_least_once(parser: Parser[T]) -> Parser[List[T]]:
    """
    Applies parser one or more times, returning a list of results.
    If the first attempt fails, its failure is returned as is.
    """
    def parse(state: ParsingState) -> Result[List[T]]:
        with state.transaction() as trx:
            first = parser.parse(state)
            if not first:
                return first
            return trx.success(_many_accum(parser, state, [first.data]))
    return Parser(parse)


# 5. exactly: Parses n occurrences of a parser
def exactly(parser: Parser[T], count: int) -> Parser[List[T]]:
    """All-or-nothing: n successes in a row, or the first failure with the cursor restored."""
    if count < 0:
        raise ValueError(f"exactly expects a non-negative count, got {count}")

    def parse(state: ParsingState) -> Result[List[T]]:
        with state.transaction() as trx:
            items = []
            for _ in range(count):
                result = parser.parse(state)
                if not result:
                    return result
                items.append(result.data)
            return trx.success(items)
    return Parser(parse)


# 6. sequence: Runs parsers one after another
def sequence(*parsers: Parser[Any]) -> Parser[Tuple[Any, ...]]:
    """
    Runs each parser in order and returns the tuple of their values.
    The first failure is returned and everything consumed so far is rolled back.
    """
    def parse(state: ParsingState) -> Result[Tuple[Any, ...]]:
        with state.transaction() as trx:
            values = []
            for parser in parsers:
                result = parser.parse(state)
                if not result:
                    return result
                values.append(result.data)
            return trx.success(tuple(values))
    return Parser(parse)


# 7. or_: Tries parsers in order until one succeeds
def or_(*parsers: Parser[Any]) -> Parser[Any]:
    """
    Returns the first successful alternative. The longest match is not
    searched for: or_(literal("a"), literal("ab")) yields "a" on "ab".
    If every alternative fails the result is ALL_PARSERS_FAILED, with the
    individual failures kept in `causes`.
    """
    def parse(state: ParsingState) -> Result[Any]:
        with state.transaction(TransactionMode.AUTO_COMMIT) as trx:
            failures = []
            for parser in parsers:
                result = parser.parse(state)
                if result:
                    return result
                failures.append(result)
            return trx.failure(ParserErrorCode.ALL_PARSERS_FAILED, "All parsers failed", failures)
    return Parser(parse)


def choice(parsers: List[Parser[Any]]) -> Parser[Any]:
    """or_ over a list of alternatives."""
    return or_(*parsers)


# 8. sep_by: Parses zero or more occurrences separated by a delimiter
def sep_by(item: Parser[T], delimiter: Parser[Any]) -> Parser[List[T]]:
    """
    Parses zero or more items separated by delimiter.

    No item at all is an empty list, not an error. A delimiter must be
    followed by an item though: "10," fails as a whole instead of
    quietly dropping the trailing comma.
    """
    def parse(state: ParsingState) -> Result[List[T]]:
        with state.transaction() as trx:
            first = item.parse(state)
            if not first:
                trx.rollback()
                return trx.success([])
            items = [first.data]
            while True:
                before = state.position
                if not delimiter.parse(state):
                    break
                next_item = item.parse(state)
                if not next_item:
                    return next_item
                items.append(next_item.data)
                if state.position == before:
                    break
            return trx.success(items)
    return Parser(parse)


# 9. skip_until_recovery: Resynchronizes after a failed parse
def skip_until_recovery(base: Parser[T], recovery: Parser[Any]) -> Parser[Optional[T]]:
    """
    Tries base. On failure, scans forward one character at a time until
    recovery matches, then retries base from there.

    - retry succeeds: its result is returned.
    - retry fails: succeeds with None, spanning everything skipped since the start.
    - recovery never matches: the original failure of base, cursor restored.
    """
    def parse(state: ParsingState) -> Result[Optional[T]]:
        with state.transaction() as trx:
            initial = base.parse(state)
            if initial:
                trx.commit()
                return initial

            while not state.at_eof:
                if recovery.parse(state):
                    resumed = base.parse(state)
                    if resumed:
                        trx.commit()
                        return resumed
                    return trx.success(None)
                state.next_char()
            return initial
    return Parser(parse)


# 10. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parser[Any], close: Parser[Any], parser: Parser[T]) -> Parser[T]:
    """
    Parses 'open', then 'parser', then 'close', returning the result of 'parser'.
    """
    return sequence(open, parser, close).map(lambda values: values[1])


# 11. not_followed_by: Succeeds if a parser fails, never consuming input
def not_followed_by(parser: Parser[Any]) -> Parser[None]:
    def parse(state: ParsingState) -> Result[None]:
        with state.transaction() as trx:
            result = parser.parse(state)
            trx.rollback()
            if result:
                return trx.failure(ParserErrorCode.EXPECTED_LITERAL, f"Unexpected {result.data!r}")
            return trx.success(None)
    return Parser(parse)


# 12. chain_left: Left-associative operator chain
def chain_left(parser: Parser[T], op: Parser[Callable[[T, T], T]]) -> Parser[T]:
    """
    Parses one or more `parser` separated by `op`, folding the values
    left-associatively with the functions op returns: 9-3-2 is (9-3)-2.
    An operator without a right operand fails the whole chain.
    """
    def parse(state: ParsingState) -> Result[T]:
        with state.transaction() as trx:
            first = parser.parse(state)
            if not first:
                return first
            value = first.data
            while True:
                func = op.parse(state)
                if not func:
                    break
                operand = parser.parse(state)
                if not operand:
                    return operand
                value = func.data(value, operand.data)
            return trx.success(value)
    return Parser(parse)


# 13. chain_right: Right-associative operator chain
def chain_right(parser: Parser[T], op: Parser[Callable[[T, T], T]]) -> Parser[T]:
    """
    Parses one or more `parser` separated by `op`, folding right-associatively:
    2^3^2 is 2^(3^2).
    """
    def parse(state: ParsingState) -> Result[T]:
        with state.transaction() as trx:
            first = parser.parse(state)
            if not first:
                return first
            operands = [first.data]
            funcs = []
            while True:
                func = op.parse(state)
                if not func:
                    break
                operand = parser.parse(state)
                if not operand:
                    return operand
                funcs.append(func.data)
                operands.append(operand.data)

            value = operands.pop()
            while funcs:
                value = funcs.pop()(operands.pop(), value)
            return trx.success(value)
    return Parser(parse)


# 14. debug: Traces a parser through the debug logger
def debug(parser: Parser[T], label: str, logger: Optional[DebugLogger] = None) -> Parser[T]:
    """
    Logs entry into parser and its outcome. The result is returned untouched.
    Without an explicit logger the one from Debug.get_default_logger() is used.
    """
    def parse(state: ParsingState) -> Result[T]:
        debug_logger = logger or get_default_logger()
        scope = debug_logger.open(
            f"[DEBUG] Enter {label} at position {state.position} col: {state.column} line: {state.line}")
        with closing(scope):
            result = parser.parse(state)
            if isinstance(result, Success):
                debug_logger.log("[SUCCESS]: %s => Data: %r", label, result.data)
            else:
                debug_logger.log("[FAILURE]: %s => Message: %s", label, result.error_message)
            return result
    return Parser(parse)


# 15. token: Skips surrounding whitespace
def token(parser: Parser[T]) -> Parser[T]:
    """Skips whitespace, runs parser, skips whitespace; yields only the inner value."""
    skip = spaces()
    return sequence(skip, parser, skip).map(lambda values: values[1])


def trim_left(parser: Parser[T]) -> Parser[T]:
    """Skips leading whitespace only."""
    return sequence(spaces(), parser).map(lambda values: values[-1])
