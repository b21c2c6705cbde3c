from dataclasses import dataclass


@dataclass(frozen=True)
class Snapshot:
    """A saved cursor position: offset plus 1-based line and column."""
    position: int = 0
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


@dataclass(frozen=True)
class Meta:
    """The extent of a match (or of a failed attempt) in the input."""
    start: int
    end: int
    start_line: int
    end_line: int
    start_column: int
    end_column: int

    @classmethod
    def between(cls, origin: Snapshot, current: Snapshot) -> 'Meta':
        return cls(
            start=origin.position,
            end=current.position,
            start_line=origin.line,
            end_line=current.line,
            start_column=origin.column,
            end_column=current.column,
        )

    @property
    def length(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start_line}:{self.start_column}-{self.end_line}:{self.end_column}"
