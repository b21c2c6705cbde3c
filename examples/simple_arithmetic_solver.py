from txparsec.Combinators import between, token
from txparsec.Errors import ParserError
from txparsec.Expr import build_expression_parser, Infix, Prefix, Assoc
from txparsec.Number import number
from txparsec.Prim import eof, recursive, run_parser, utf8

# 1. Basic Token Parsers (each skips surrounding whitespace)
def symbol(name):
    return token(utf8(name))

lparen = symbol("(")
rparen = symbol(")")

# 2. Helper Functions for Calculation
def add(x, y): return x + y
def sub(x, y): return x - y
def mul(x, y): return x * y
def div(x, y):
    if y == 0: raise ValueError("Division by zero")
    return x / y  # float division
def neg(x): return -x

# 3. Operator Table (Precedence and Associativity)
# Ordered from Highest Precedence to Lowest
table = [
    [Prefix(symbol("-").map(lambda _: neg))],
    [Infix(symbol("*").map(lambda _: mul), Assoc.LEFT),
     Infix(symbol("/").map(lambda _: div), Assoc.LEFT)],
    [Infix(symbol("+").map(lambda _: add), Assoc.LEFT),
     Infix(symbol("-").map(lambda _: sub), Assoc.LEFT)]
]

# 4. The Expression Parser
# A term is either a number OR an expression inside parentheses.
# 'recursive' defers the lookup of 'expression', which is defined in terms of 'term'.
term = between(lparen, rparen, recursive(lambda: expression)) | token(number())
expression = build_expression_parser(table, term)

# The whole input has to be one expression
parser = expression < eof()

if __name__ == "__main__":
    test_cases = [
        "2 + 3",            # 5
        "2 * 3",            # 6
        "2 + 3 * 4",        # 14 (Precedence check)
        "(2 + 3) * 4",      # 20 (Parens check)
        "-2 + 3",           # 1 (Prefix check)
        "10 / 2 + 3",       # 8.0
        "1.5 * 4",          # 6.0
        "2 +",              # Parse error
        "10 / (2 - 2)",     # Runtime error
        "(" * 30 + "1" + ")" * 30,  # Deep nesting
    ]

    print(f"{'Expression':<20} | {'Result':<10}")
    print("-" * 35)

    for expr_str in test_cases:
        try:
            result, err = run_parser(parser, expr_str)

            if err:
                print(f"{expr_str:<20} | Error: {err}")
            else:
                print(f"{expr_str:<20} | {result}")

        except ValueError as e:
            print(f"{expr_str:<20} | Runtime Error: {e}")
        except ParserError as e:
            print(f"{expr_str[:20]:<20} | Parser Error: {e}")
