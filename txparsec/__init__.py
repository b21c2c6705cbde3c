# Core
from .Errors import (
    ParserErrorCode, ParserError, RegexAnchorError, DepthLimitExceededError,
    to_error, try_catch
)
from .Position import Meta, Snapshot
from .Result import Success, Failure, Result
from .Transaction import Transaction, TransactionMode
from .State import ParsingState
from .Depth import DepthGuard, depth_clamp, max_safe_depth
from .Parsec import Parser

# Primitives
from .Prim import (
    pure, fail, utf8, literal, regex, any_char, eof,
    take_while, take_until, peek, recursive, run_parser
)

# Characters
from .Char import whitespace, spaces, digit, digits, letter, letters

# Combinators
from .Combinators import (
    map_, optional, many, at_least_once, exactly, sequence, or_, choice,
    sep_by, skip_until_recovery, between, not_followed_by,
    chain_left, chain_right, debug, token, trim_left
)

# Numbers
from .Number import unsigned_integer, integer, float_, number

# Debug logging
from .Debug import DebugLogger, LoggingDebugLogger, get_default_logger, set_default_logger

# Expression Parsing
from .Expr import build_expression_parser, Operator, Infix, Prefix, Postfix, Assoc
