from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, TypeVar

from .Errors import ParserError, ParserErrorCode
from .Position import Meta, Snapshot
from .Result import Failure, Success

if TYPE_CHECKING:
    from .State import ParsingState

T = TypeVar('T')


class TransactionMode(Enum):
    """What a transaction does with the cursor when its scope ends undecided."""
    AUTO_COMMIT = "auto-commit"
    AUTO_ROLLBACK = "auto-rollback"


class Transaction:
    """
    A scoped attempt at parsing from the cursor's current position.

    The transaction remembers where it started (`origin`). `rollback()`
    moves the cursor back there; `commit()` makes the current position
    the new origin. On leaving the `with` block, normally or through an
    exception, the configured mode decides which of the two happens.
    Both are no-ops while the cursor has not moved away from `origin`,
    so a transaction that already produced `success()` or `failure()`
    is left untouched by its exit action.

        with state.transaction() as trx:
            ch = trx.next_char()
            if ch != "a":
                return trx.failure(ParserErrorCode.EXPECTED_LITERAL, "Expected 'a'")
            return trx.success(ch)
    """

    def __init__(self, state: 'ParsingState', mode: TransactionMode = TransactionMode.AUTO_ROLLBACK):
        self.state = state
        self.mode = mode
        self.origin: Optional[Snapshot] = state.snapshot()

    def __enter__(self) -> 'Transaction':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.origin is None:
            return
        if self.mode is TransactionMode.AUTO_COMMIT:
            self.commit()
        else:
            self.rollback()
        self.origin = None

    @property
    def dirty(self) -> bool:
        """True while the cursor is somewhere other than the origin."""
        return self.origin is not None and self.state.position != self.origin.position

    def commit(self) -> None:
        if not self.dirty:
            return
        self.origin = self.state.snapshot()

    def rollback(self) -> None:
        if not self.dirty:
            return
        self.state.restore(self.origin)

    def meta(self) -> Meta:
        """Span from the origin to the cursor, without moving the cursor."""
        if self.origin is None:
            raise ParserError("Cannot measure a span outside of the transaction's scope")
        return Meta.between(self.origin, self.state.snapshot())

    def success(self, value: T) -> Success[T]:
        result = Success(self.meta(), value)
        self.commit()
        return result

    def failure(self, code: ParserErrorCode, error_message: str,
                causes: Iterable[Failure] = ()) -> Failure:
        result = Failure(code, self.meta(), error_message, tuple(causes))
        self.rollback()
        return result

    # Cursor reads, so primitives can work through the transaction alone.

    def peek(self) -> Optional[str]:
        return self.state.peek()

    def peek_remainder(self) -> str:
        return self.state.peek_remainder()

    def next_char(self) -> Optional[str]:
        return self.state.next_char()

    def next_chars(self, n: int) -> str:
        return self.state.next_chars(n)
