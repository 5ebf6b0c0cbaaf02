"""Quickstart example for byteparsec.

This example builds three small grammars from combinators: a key/value
config reader, a quoted string reader, and a recursive arithmetic
evaluator.

Note: Examples print ParseError values directly. In production, check
isinstance(result, ParseError) or use parse_or_raise().
"""

from byteparsec import (
    AnyChar,
    Between,
    Bind,
    Char,
    Either,
    Eof,
    Forward,
    Many,
    ManyTil,
    NoneOf,
    Option,
    ParseError,
    ParseSyntaxError,
    Return,
    SepBy,
    String,
    Then,
    Try,
    parse,
    parse_or_raise,
)
from byteparsec.combinators.charsets import alpha_nums, digits, eol, newline, spaces

# Example 1: Key/value lines
print("=" * 50)
print("Example 1: Key/Value Config")
print("=" * 50)

key = Bind(alpha_nums(), lambda chars: Return("".join(chars)))
value = Bind(Many(NoneOf("\r\n")), lambda chars: Return("".join(chars).strip()))
entry = Bind(
    key,
    lambda k: Then(spaces(), Then(Char("="), Then(spaces(), Bind(value, lambda v: Return((k, v)))))),
)
config = Bind(SepBy(entry, newline()), lambda pairs: Then(Eof(), Return(dict(pairs))))

print(parse_or_raise("host = example.org\nport = 8080", config))
# Output: {'host': 'example.org', 'port': '8080'}

# Example 2: Errors report the failing line
print("\n" + "=" * 50)
print("Example 2: Error Reporting")
print("=" * 50)

source = "host = example.org\nport 8080"
result = parse(source, config)
print(result)
# Output: Expected '=' on line 2
if isinstance(result, ParseError):
    print(result.format_with_context(source))

try:
    parse_or_raise(source, config)
except ParseSyntaxError as e:
    print(f"Raised: {e}")

# Example 3: Read until a delimiter
print("\n" + "=" * 50)
print("Example 3: Quoted Strings and Comments")
print("=" * 50)

quoted = Between(Char('"'), Char('"'), Many(NoneOf('"')))
comment = Then(String("#"), ManyTil(AnyChar(), eol()))

print("".join(parse_or_raise('"hello world"', quoted)))
# Output: hello world
print("".join(parse_or_raise("# a comment\n", comment)))
# Output:  a comment

# Example 4: Recursive grammar with backtracking
print("\n" + "=" * 50)
print("Example 4: Arithmetic")
print("=" * 50)

number = Bind(digits(), lambda ds: Return(int("".join(ds))))
expr = Forward()
factor = Either(Between(Char("("), Char(")"), expr), number)


def _chain(operand, operator, combine):
    """Left-associative chain: operand (operator operand)*."""
    step = Bind(operator, lambda op: Bind(operand, lambda rhs: Return((op, rhs))))

    def fold(first):
        return Bind(Many(step), lambda rest: Return(combine(first, rest)))

    return Bind(operand, fold)


def _apply(first, rest):
    total = first
    for op, rhs in rest:
        if op == "+":
            total += rhs
        elif op == "-":
            total -= rhs
        elif op == "*":
            total *= rhs
        else:
            total //= rhs
    return total


term = _chain(factor, Either(Char("*"), Char("/")), _apply)
expr.define(_chain(term, Either(Char("+"), Char("-")), _apply))

print(parse_or_raise("2*(3+4)-5", expr))
# Output: 9

# Try lets a longer alternative back out after a partial match
keyword = Either(Try(Then(String("lam"), String("p"))), String("lambda"))
print(parse_or_raise("lambda", keyword))
# Output: lambda

sign = Option("+", Either(Char("+"), Char("-")))
print(parse_or_raise("42", sign))
# Output: +
