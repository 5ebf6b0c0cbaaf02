"""Combinator base class.

Every combinator is an immutable value that owns its operands and is
invoked as parser(state). Composition builds new values; there is no
grammar tree beyond the operands each combinator holds.

Python 3.13+. Zero external dependencies.
"""

from abc import ABC, abstractmethod

from byteparsec.combinators.state import ParseError, ParseResult, ParseState

__all__ = ["Outcome", "Parser", "to_bytes"]

type Outcome[T] = ParseResult[T] | ParseError


class Parser[T](ABC):
    """A parsing function from cursor state to outcome.

    Subclasses are frozen, slotted dataclasses. Instances hold no per-run
    state, so one grammar can be shared between threads as long as each
    run gets its own ParseState.
    """

    __slots__ = ()

    @abstractmethod
    def __call__(self, state: ParseState) -> Outcome[T]:
        """Run against state, advancing it on consumption.

        Returns:
            ParseResult with the produced value, or ParseError
        """


def to_bytes(text: str | bytes) -> bytes:
    """Normalize a grammar literal to the byte sequence it matches.

    str literals are UTF-8 encoded, the same way str sources are.
    """
    if isinstance(text, str):
        return text.encode("utf-8")
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    msg = f"Expected str or bytes, got {type(text).__name__}"
    raise TypeError(msg)
