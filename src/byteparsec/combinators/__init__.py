"""Parser combinators over in-memory byte buffers.

Module Organization:
- state.py: ParseState cursor, Checkpoint, ParseResult, ParseError
- base.py: Parser base class
- primitives.py: Single-byte and literal matchers
- monad.py: Return, Fail, Bind, Then
- control.py: Either, Try, Option, Maybe, Forward
- repetition.py: Many, Many1, Skip, Between, SepBy, SepBy1, ManyTil
- charsets.py: Cached character-class parsers (letter, digit, ...)
"""

from byteparsec.combinators.base import Outcome, Parser
from byteparsec.combinators.control import Either, Forward, Maybe, Option, Try
from byteparsec.combinators.monad import Bind, Fail, Return, Then
from byteparsec.combinators.primitives import (
    AnyChar,
    Char,
    Eof,
    NoneOf,
    OneOf,
    Satisfy,
    String,
)
from byteparsec.combinators.repetition import (
    Between,
    Many,
    Many1,
    ManyTil,
    SepBy,
    SepBy1,
    Skip,
)
from byteparsec.combinators.state import (
    Checkpoint,
    LineOffsetCache,
    ParseError,
    ParseResult,
    ParseState,
)

__all__ = [
    "AnyChar",
    "Between",
    "Bind",
    "Char",
    "Checkpoint",
    "Either",
    "Eof",
    "Fail",
    "Forward",
    "LineOffsetCache",
    "Many",
    "Many1",
    "ManyTil",
    "Maybe",
    "NoneOf",
    "OneOf",
    "Option",
    "Outcome",
    "ParseError",
    "ParseResult",
    "ParseState",
    "Parser",
    "Return",
    "Satisfy",
    "SepBy",
    "SepBy1",
    "Skip",
    "String",
    "Then",
    "Try",
]
