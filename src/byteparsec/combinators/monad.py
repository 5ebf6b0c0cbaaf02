"""Monadic core: value injection, failure injection and sequencing.

Sequencing is strict left to right. The first failure short-circuits the
chain and is returned unchanged; whatever the failing step consumed stays
consumed.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass

from byteparsec.combinators.base import Outcome, Parser
from byteparsec.combinators.state import ParseError, ParseResult, ParseState

__all__ = ["Bind", "Fail", "Return", "Then"]


@dataclass(frozen=True, slots=True)
class Return[T](Parser[T]):
    """Always succeed with value, consuming nothing."""

    value: T

    def __call__(self, state: ParseState) -> Outcome[T]:
        return ParseResult(self.value, state.position)


@dataclass(frozen=True, slots=True)
class Fail(Parser[None]):
    """Always fail with message as the reason, consuming nothing."""

    message: str

    def __call__(self, state: ParseState) -> Outcome[None]:
        return state.fail(self.message)


@dataclass(frozen=True, slots=True)
class Bind[T, U](Parser[U]):
    """Run parser, then the parser built from its value.

    continuation receives the value produced by parser and returns the
    combinator to run next, against the already advanced state. It is
    called once per successful run of parser, so it may close over the
    value freely.

    Example:
        >>> digit_pair = Bind(OneOf("0123456789"), lambda a: Bind(
        ...     OneOf("0123456789"), lambda b: Return(int(a + b))))
    """

    parser: Parser[T]
    continuation: Callable[[T], Parser[U]]

    def __call__(self, state: ParseState) -> Outcome[U]:
        result = self.parser(state)
        if isinstance(result, ParseError):
            return result
        return self.continuation(result.value)(state)


@dataclass(frozen=True, slots=True)
class Then[U](Parser[U]):
    """Run first, discard its value, then run second."""

    first: Parser[object]
    second: Parser[U]

    def __call__(self, state: ParseState) -> Outcome[U]:
        result = self.first(state)
        if isinstance(result, ParseError):
            return result
        return self.second(state)
