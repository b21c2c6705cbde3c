from enum import Enum
from typing import Any, Callable, Optional, Tuple, TypeVar

T = TypeVar('T')


class ParserErrorCode(Enum):
    """Failure codes produced by the built-in primitives and combinators."""
    EXPECTED_LITERAL = "EXPECTED_LITERAL"
    EXPECTED_REGEX = "EXPECTED_REGEX"     # pattern did not match
    UNEXPECTED_EOF = "UNEXPECTED_EOF"
    ALL_PARSERS_FAILED = "ALL_PARSERS_FAILED"

    def __str__(self) -> str:
        return self.value


class ParserError(Exception):
    """Base class for errors raised (not returned) by the parsing engine."""


class RegexAnchorError(ParserError, ValueError):
    """Raised when a regex parser is built from a pattern not anchored to the input start."""

    def __init__(self, pattern: str):
        super().__init__(f"Regex pattern must start with '^' or '\\A': {pattern!r}")
        self.pattern = pattern


class DepthLimitExceededError(ParserError):
    """Raised when parser invocations nest deeper than the cursor allows.

    Usually a sign of a runaway recursive grammar, e.g. left recursion
    through `recursive`, or of adversarially deep input.
    """

    def __init__(self, max_depth: int):
        super().__init__(f"Maximum parser nesting depth of {max_depth} exceeded")
        self.max_depth = max_depth


def to_error(error: Any) -> BaseException:
    """Normalize an arbitrary raised or returned value into an exception object."""
    if isinstance(error, BaseException):
        return error
    try:
        return Exception(str(error))
    except Exception as exc:  # str() of a hostile object can itself raise
        return to_error(exc)


def try_catch(fn: Callable[[], T]) -> Tuple[Optional[T], Optional[BaseException]]:
    """
    Call fn, returning (value, None) on success or (None, error) if it raised.
    """
    try:
        return fn(), None
    except Exception as exc:
        return None, to_error(exc)
