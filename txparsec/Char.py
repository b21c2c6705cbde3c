from .Parsec import Parser
from .Prim import regex, take_while


# 1. whitespace: Parses a single whitespace character
def whitespace() -> Parser[str]:
    """Parses one whitespace character and returns it."""
    return regex(r"^\s")


# 2. spaces: Skips zero or more whitespace characters
def spaces() -> Parser[str]:
    """Consumes a (possibly empty) run of whitespace and returns it."""
    return take_while(str.isspace)


# 3. digit: Parses an ASCII digit
def digit() -> Parser[str]:
    return regex(r"^[0-9]")


# 4. digits: Parses one or more ASCII digits
def digits() -> Parser[str]:
    return regex(r"^[0-9]+")


# 5. letter: Parses an ASCII letter
def letter() -> Parser[str]:
    return regex(r"^[a-zA-Z]")


# 6. letters: Parses one or more ASCII letters
def letters() -> Parser[str]:
    return regex(r"^[a-zA-Z]+")
