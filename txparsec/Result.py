from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, Tuple, TypeVar, Union

from .Errors import ParserErrorCode
from .Position import Meta

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful parse: the value and the span it was matched from."""
    meta: Meta
    data: T

    type: ClassVar[str] = "success"

    def __bool__(self) -> bool:
        return True

    def map(self, f: Callable[[T], U]) -> 'Success[U]':
        return Success(self.meta, f(self.data))


@dataclass(frozen=True)
class Failure:
    """A failed parse.

    `causes` holds the failures of individual alternatives when this
    failure summarises several of them (see `or_`); it is empty otherwise.
    """
    code: ParserErrorCode
    meta: Meta
    error_message: str
    causes: Tuple['Failure', ...] = ()

    type: ClassVar[str] = "failure"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return (f"Parse error ({self.code}) at line {self.meta.start_line}, "
                f"column {self.meta.start_column}: {self.error_message}")


Result = Union[Success[T], Failure]
