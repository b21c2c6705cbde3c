from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, List, TypeVar

from .Combinators import chain_left, chain_right, choice, sequence
from .Parsec import Parser
from .Prim import pure

T = TypeVar('T')


class Assoc(Enum):
    NONE = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass
class Operator:
    pass


@dataclass
class Infix(Operator):
    parser: Parser[Callable[[Any, Any], Any]]
    assoc: Assoc


@dataclass
class Prefix(Operator):
    parser: Parser[Callable[[Any], Any]]


@dataclass
class Postfix(Operator):
    parser: Parser[Callable[[Any], Any]]


def _identity(x):
    return x


def build_expression_parser(table: List[List[Operator]], simple_term: Parser[T]) -> Parser[T]:
    """
    Builds an expression parser from an operator table.

    The table lists precedence levels from highest to lowest; each level
    holds the Infix, Prefix and Postfix operators binding that tightly.
    Operator parsers return the function to apply.
    """
    term = simple_term
    for ops in table:
        term = _make_level_parser(ops, term)
    return term


def _make_level_parser(ops: List[Operator], term: Parser[T]) -> Parser[T]:
    infix_r = []
    infix_l = []
    infix_n = []
    prefix = []
    postfix = []

    for op in ops:
        if isinstance(op, Infix):
            if op.assoc == Assoc.RIGHT: infix_r.append(op.parser)
            elif op.assoc == Assoc.LEFT: infix_l.append(op.parser)
            else: infix_n.append(op.parser)
        elif isinstance(op, Prefix):
            prefix.append(op.parser)
        elif isinstance(op, Postfix):
            postfix.append(op.parser)

    # 1. Prefix and postfix: (pre | id) term (post | id)
    pre_parser = choice(prefix) | pure(_identity) if prefix else pure(_identity)
    post_parser = choice(postfix) | pure(_identity) if postfix else pure(_identity)

    term_parser = sequence(pre_parser, term, post_parser).map(
        lambda parts: parts[2](parts[0](parts[1])))

    # 2. Infix
    result_parser = term_parser

    if infix_l:
        result_parser = chain_left(result_parser, choice(infix_l))

    if infix_r:
        result_parser = chain_right(result_parser, choice(infix_r))

    if infix_n:
        # At most one application: a == b == c is not accepted as a chain.
        operand = result_parser
        tail = sequence(choice(infix_n), operand).optional()
        result_parser = sequence(operand, tail).map(
            lambda parts: parts[0] if parts[1] is None else parts[1][0](parts[0], parts[1][1]))

    return result_parser
