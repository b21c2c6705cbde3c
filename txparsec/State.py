from typing import Optional

from .Depth import DepthGuard
from .Position import Meta, Snapshot
from .Transaction import Transaction, TransactionMode


class ParsingState:
    """
    The mutable input cursor shared by every parser taking part in one parse.

    Holds the full input text (`raw`) and the scan position as an offset
    plus 1-based line and column. Those three always describe having
    consumed exactly `raw[:position]`.
    """

    def __init__(self, raw: str = "", position: int = 0, line: int = 1, column: int = 1,
                 max_depth: Optional[int] = None):
        self.raw = raw
        self.position = position
        self.line = line
        self.column = column
        self.depth = DepthGuard(max_depth)

    def __repr__(self) -> str:
        return (f"ParsingState(position={self.position}, line={self.line}, "
                f"column={self.column}, remaining={len(self.raw) - self.position})")

    @property
    def at_eof(self) -> bool:
        return self.position >= len(self.raw)

    def peek(self) -> Optional[str]:
        """The next character, or None at end of input."""
        if self.at_eof:
            return None
        return self.raw[self.position]

    def peek_remainder(self) -> str:
        return self.raw[self.position:]

    def next_char(self) -> Optional[str]:
        """Consume and return the next character; returns None (consuming nothing) at end of input."""
        current = self.peek()
        if current is None:
            return None
        self.position += 1
        if current == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return current

    def next_chars(self, n: int) -> str:
        """Consume up to n characters. A short read returns whatever was left."""
        consumed = []
        for _ in range(n):
            char = self.next_char()
            if char is None:
                break
            consumed.append(char)
        return ''.join(consumed)

    def snapshot(self) -> Snapshot:
        return Snapshot(self.position, self.line, self.column)

    def restore(self, snapshot: Snapshot) -> None:
        self.position = snapshot.position
        self.line = snapshot.line
        self.column = snapshot.column

    def meta(self, origin: Optional[Snapshot] = None) -> Meta:
        """Span from origin (default: here) to the current position."""
        current = self.snapshot()
        return Meta.between(origin or current, current)

    def transaction(self, mode: TransactionMode = TransactionMode.AUTO_ROLLBACK) -> Transaction:
        return Transaction(self, mode)
