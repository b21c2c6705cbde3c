"""
Numeric literals built from the combinators.

    unsigned_integer   [0-9]+
    integer            [+-]? unsigned_integer
    float_             integer '.' [0-9]*   |   integer? '.' [0-9]+
    number             float_ | integer

Floats are converted from the matched text with float(), so "3.75"
yields 3.75 and "-0.5" yields -0.5.
"""
from typing import Optional, Tuple, Union

from .Char import digits
from .Combinators import or_, sequence
from .Parsec import Parser
from .Prim import utf8


def _join(parts: Tuple[Optional[str], ...]) -> str:
    return ''.join(part for part in parts if part is not None)


def _signed_digits() -> Parser[str]:
    # Kept as text so float_ sees "-0" rather than int("-0") == 0.
    sign = or_(utf8("+"), utf8("-")).optional()
    return sequence(sign, digits()).map(_join)


def unsigned_integer() -> Parser[int]:
    return digits().map(int)


def integer() -> Parser[int]:
    """An optionally signed integer."""
    return _signed_digits().map(int)


def float_() -> Parser[float]:
    """A decimal number with a '.', e.g. '1.5', '1.', '.5', '-2.25'."""
    whole_part = sequence(_signed_digits(), utf8("."), digits().optional())
    fraction_only = sequence(_signed_digits().optional(), utf8("."), digits())
    return or_(whole_part, fraction_only).map(lambda parts: float(_join(parts)))


def number() -> Parser[Union[int, float]]:
    """A float if the input has a decimal point, an integer otherwise."""
    return or_(float_(), integer())
