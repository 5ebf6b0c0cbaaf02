"""Pre-built character-class parsers.

Each class is a zero-argument constructor cached on first use, so nothing
is built at import time and every caller shares one immutable instance.

Python 3.13+. Zero external dependencies.
"""

from functools import cache

from byteparsec.combinators.base import Parser
from byteparsec.combinators.control import Either
from byteparsec.combinators.primitives import Eof, OneOf
from byteparsec.combinators.repetition import Many1, Skip

__all__ = [
    "alpha_num",
    "alpha_nums",
    "digit",
    "digits",
    "eol",
    "hex_digit",
    "hex_digits",
    "letter",
    "letters",
    "lowercase",
    "newline",
    "punctuation",
    "space",
    "spaces",
    "uppercase",
]

LOWERCASE_CHARS: str = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE_CHARS: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGIT_CHARS: str = "0123456789"
HEX_DIGIT_CHARS: str = "0123456789abcdefABCDEF"
PUNCTUATION_CHARS: str = "!@#$%^&*()-=+[]{}\\|;:'\",./<>?~`"
SPACE_CHARS: str = " \t"
NEWLINE_CHARS: str = "\r\n"


@cache
def lowercase() -> Parser[str]:
    """One ASCII lowercase letter."""
    return OneOf(LOWERCASE_CHARS)


@cache
def uppercase() -> Parser[str]:
    """One ASCII uppercase letter."""
    return OneOf(UPPERCASE_CHARS)


@cache
def letter() -> Parser[str]:
    """One ASCII letter of either case."""
    return Either(lowercase(), uppercase())


@cache
def letters() -> Parser[list[str]]:
    return Many1(letter())


@cache
def digit() -> Parser[str]:
    """One ASCII decimal digit."""
    return OneOf(DIGIT_CHARS)


@cache
def digits() -> Parser[list[str]]:
    return Many1(digit())


@cache
def alpha_num() -> Parser[str]:
    """One ASCII letter or digit."""
    return Either(letter(), digit())


@cache
def alpha_nums() -> Parser[list[str]]:
    return Many1(alpha_num())


@cache
def hex_digit() -> Parser[str]:
    """One hexadecimal digit, either case."""
    return OneOf(HEX_DIGIT_CHARS)


@cache
def hex_digits() -> Parser[list[str]]:
    return Many1(hex_digit())


@cache
def punctuation() -> Parser[str]:
    return OneOf(PUNCTUATION_CHARS)


@cache
def space() -> Parser[str]:
    """One blank: space or horizontal tab (not a line break)."""
    return OneOf(SPACE_CHARS)


@cache
def spaces() -> Parser[None]:
    """Skip any run of blanks, including none."""
    return Skip(space())


@cache
def newline() -> Parser[str]:
    """One CR or LF byte."""
    return OneOf(NEWLINE_CHARS)


@cache
def eol() -> Parser[str | None]:
    """End of input or one line-break byte."""
    return Either(Eof(), newline())
