import json
import sys

from txparsec.Combinators import between, sep_by, sequence, token
from txparsec.Number import number
from txparsec.Prim import eof, literal, recursive, regex, run_parser, utf8

# 1. Lexical pieces, each skipping surrounding whitespace
def symbol(name):
    return token(literal(name))

# JSON allows "null", "true", "false". We map them to Python equivalents.
null_val = symbol("null").map(lambda _: None)
true_val = symbol("true").map(lambda _: True)
false_val = symbol("false").map(lambda _: False)

# Strings are matched whole by a regex and decoded by the json module.
string_literal = token(regex(r'^"(?:[^"\\]|\\.)*"').map(json.loads))
number_literal = token(number())

# 2. Recursive JSON Parser
json_value = recursive(lambda: (
    null_val
    | true_val
    | false_val
    | string_literal
    | number_literal
    | json_object
    | json_array
))

# [ value, value, ... ]
json_array = between(symbol("["), symbol("]"), sep_by(json_value, symbol(",")))

# { "key": value, ... }
entry = sequence(string_literal, symbol(":"), json_value).map(lambda parts: (parts[0], parts[2]))
json_object = between(symbol("{"), symbol("}"), sep_by(entry, symbol(","))).map(dict)

parser = json_value < eof()

SAMPLE = '{"name": "txparsec", "tags": ["parser", "combinators"], "version": 0.1, "stable": false, "deps": null}'

if __name__ == "__main__":
    if len(sys.argv) > 1:
        with open(sys.argv[1]) as f:
            test_json = f.read()
    else:
        test_json = SAMPLE

    result, err = run_parser(parser, test_json)

    if err:
        print("Parsing Failed:", err)
    else:
        print("Successfully Parsed:")
        print(json.dumps(result, indent=4))
