from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar, Union

from .Errors import DepthLimitExceededError, ParserErrorCode
from .Result import Failure, Result
from .State import ParsingState

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


class Parser(Generic[T]):
    """
    A parser: a function from a ParsingState to a Result, wrapped so it can be composed.

    Parsers hold no state of their own. The same instance can be run any
    number of times, against fresh inputs or against a shared cursor.
    Every combinator is available as a module-level function in
    `txparsec.Combinators` / `txparsec.Prim`, and most of them as methods
    here so grammars can be written fluently:

        digits.map(int).sep_by(literal(",")).trim()
    """

    def __init__(self, parse_fn: Callable[[ParsingState], Result[T]]):
        self.parse_fn = parse_fn

    def parse(self, input: Union[ParsingState, str, None] = None) -> Result[T]:
        """Run the parser against a string (fresh cursor) or an existing cursor (resumed parse)."""
        if input is None:
            state = ParsingState()
        elif isinstance(input, str):
            state = ParsingState(input)
        else:
            state = input
        if state.position > len(state.raw):
            return Failure(ParserErrorCode.UNEXPECTED_EOF, state.meta(), "Unexpected EOF")
        outermost = state.depth.depth == 0
        try:
            with state.depth:
                return self.parse_fn(state)
        except RecursionError as e:
            # Grammars spending more frames per level than the guard estimates
            # overflow the interpreter stack first; report it once unwound.
            if not outermost:
                raise
            raise DepthLimitExceededError(state.depth.max_depth) from e
        finally:
            # Exit handlers at the very top of an overflowed stack may not have run.
            if outermost:
                state.depth.reset()

    def __call__(self, input: Union[ParsingState, str, None] = None) -> Result[T]:
        return self.parse(input)

    # Functor map
    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        from .Combinators import map_
        return map_(self, f)

    # Monadic bind: run self, feed its value to f, run the parser f returns
    def bind(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        def parse(state: ParsingState) -> Result[U]:
            with state.transaction() as trx:
                first = self.parse(state)
                if not first:
                    return first
                second = f(first.data).parse(state)
                if not second:
                    return second
                return trx.success(second.data)
        return Parser(parse)

    def optional(self) -> 'Parser[Optional[T]]':
        from .Combinators import optional
        return optional(self)

    def many(self) -> 'Parser[List[T]]':
        from .Combinators import many
        return many(self)

    def at_least_once(self) -> 'Parser[List[T]]':
        from .Combinators import at_least_once
        return at_least_once(self)

    def exactly(self, count: int) -> 'Parser[List[T]]':
        from .Combinators import exactly
        return exactly(self, count)

    def and_then(self, *others: 'Parser[Any]') -> 'Parser[Tuple[Any, ...]]':
        from .Combinators import sequence
        return sequence(self, *others)

    def or_(self, *others: 'Parser[Any]') -> 'Parser[Any]':
        from .Combinators import or_
        return or_(self, *others)

    def sep_by(self, delimiter: 'Parser[Any]') -> 'Parser[List[T]]':
        from .Combinators import sep_by
        return sep_by(self, delimiter)

    def peek(self) -> 'Parser[T]':
        from .Prim import peek
        return peek(self)

    def skip_until_recovery(self, recovery: 'Parser[Any]') -> 'Parser[Optional[T]]':
        from .Combinators import skip_until_recovery
        return skip_until_recovery(self, recovery)

    def debug(self, label: str, logger=None) -> 'Parser[T]':
        from .Combinators import debug
        return debug(self, label, logger)

    def trim(self) -> 'Parser[T]':
        from .Combinators import token
        return token(self)

    def trim_left(self) -> 'Parser[T]':
        from .Combinators import trim_left
        return trim_left(self)

    # Alternative (<|>)
    def __or__(self, other: 'Parser[U]') -> 'Parser[Union[T, U]]':
        return self.or_(other)

    # Sequence, keeping both values
    def __and__(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        return self.and_then(other)

    # Monadic bind also available as >>
    def __rshift__(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        return self.bind(f)

    # Sequence (*>), keeping the right value
    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        """
        Runs self then other and keeps the value of other.

        Python chains comparisons, so `a > b > c` means `(a > b) and (b > c)`
        and silently drops `a`. Parenthesize chains: `(a > b) > c`.
        """
        return self.and_then(other).map(lambda values: values[1])

    # Sequence (<*), keeping the left value
    def __lt__(self, other: 'Parser[U]') -> 'Parser[T]':
        """Runs self then other and keeps the value of self. Chains need parentheses, as with `>`."""
        return self.and_then(other).map(lambda values: values[0])
