from txparsec.Combinators import many, sep_by, token
from txparsec.Char import digits
from txparsec.Prim import run_parser, utf8


class TimeMany:
    def setup(self):
        self.parser = many(utf8("a"))
        self.small = "a" * 1000
        self.medium = "a" * 10000
        self.large = "a" * 100000

    def time_many_small(self):
        run_parser(self.parser, self.small)

    def time_many_medium(self):
        run_parser(self.parser, self.medium)

    def time_many_large(self):
        run_parser(self.parser, self.large)


class TimeSepBy:
    def setup(self):
        self.parser = sep_by(digits(), utf8(","))
        self.input = ",".join(str(i) for i in range(10000))

    def time_sep_by(self):
        run_parser(self.parser, self.input)


class TimeToken:
    def setup(self):
        self.parser = many(token(digits()))
        self.input = "  ".join(str(i) for i in range(10000))

    def time_token_many(self):
        run_parser(self.parser, self.input)
