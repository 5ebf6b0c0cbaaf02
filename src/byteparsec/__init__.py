"""byteparsec - parser combinators over in-memory byte buffers.

Build recursive-descent parsers by composing small combinator values
instead of writing state machines by hand. Matching works on raw 8-bit
code units; str sources and literals are UTF-8 encoded first.

Public API:
    parse - Run a combinator, returning ParseResult or ParseError
    parse_or_raise - Run a combinator, returning its value or raising
    ParseRunner - Reusable runner with size/depth/backtracking options
    Combinators - AnyChar, Eof, Char, OneOf, NoneOf, Satisfy, String,
        Return, Fail, Bind, Then, Either, Try, Option, Maybe, Forward,
        Many, Many1, Skip, Between, SepBy, SepBy1, ManyTil

Exceptions:
    ParsecError - Base exception class
    ParseSyntaxError - Raised by parse_or_raise on failure
    DepthLimitExceededError - Forward recursion exceeded the nesting limit

Submodules:
    byteparsec.combinators.charsets - Cached character classes (letter, digit, ...)
    byteparsec.combinators.state - ParseState cursor and outcome types
"""

from .combinators import (
    AnyChar,
    Between,
    Bind,
    Char,
    Either,
    Eof,
    Fail,
    Forward,
    Many,
    Many1,
    ManyTil,
    Maybe,
    NoneOf,
    OneOf,
    Option,
    ParseError,
    Parser,
    ParseResult,
    ParseState,
    Return,
    Satisfy,
    SepBy,
    SepBy1,
    Skip,
    String,
    Then,
    Try,
)
from .diagnostics import DepthLimitExceededError, ParsecError, ParseSyntaxError
from .runner import ParseRunner, parse, parse_or_raise

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("byteparsec")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AnyChar",
    "Between",
    "Bind",
    "Char",
    "DepthLimitExceededError",
    "Either",
    "Eof",
    "Fail",
    "Forward",
    "Many",
    "Many1",
    "ManyTil",
    "Maybe",
    "NoneOf",
    "OneOf",
    "Option",
    "ParseError",
    "ParseResult",
    "ParseRunner",
    "ParseState",
    "ParseSyntaxError",
    "ParsecError",
    "Parser",
    "Return",
    "Satisfy",
    "SepBy",
    "SepBy1",
    "Skip",
    "String",
    "Then",
    "Try",
    "__version__",
    "parse",
    "parse_or_raise",
]
