"""Repetition combinators.

Each combinator here is the iterative form of a recursive definition:

    Many1(p)        = p >>= x -> Many(p) >>= xs -> Return([x] + xs)
    Many(p)         = Option([], Many1(p))
    Skip(p)         = Maybe(Many(p))
    SepBy1(p, sep)  = p >>= x -> Many(sep >> p) >>= xs -> Return([x] + xs)
    SepBy(p, sep)   = Option([], SepBy1(p, sep))
    ManyTil(p, end) = Either(Try(end) >> Return([]),
                             p >>= x -> ManyTil(p, end) >>= xs -> Return([x] + xs))

Accumulating into a list keeps the outcome, the value order and the amount
of input consumed identical to the recursive forms while using constant
stack depth. In particular a repetition stops quietly only when its element
fails without consuming; an element that fails part way through fails the
whole repetition.

An element that succeeds without consuming would make the recursive forms
loop forever. Many-style loops stop after recording such an element;
ManyTil fails with a no-progress error instead, since it has not reached
its terminator.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from byteparsec.combinators.base import Outcome, Parser
from byteparsec.combinators.control import Try
from byteparsec.combinators.monad import Then
from byteparsec.combinators.state import ParseError, ParseResult, ParseState
from byteparsec.diagnostics import ErrorTemplate

__all__ = ["Between", "Many", "Many1", "ManyTil", "SepBy", "SepBy1", "Skip"]


def _collect[T](element: Parser[T], state: ParseState, values: list[T]) -> ParseError | None:
    """Append successes of element to values until it stops matching.

    Returns:
        None when element failed without consuming (or stopped making
        progress), or the ParseError of an element that failed after
        consuming input.
    """
    while True:
        start = state.position
        result = element(state)
        if isinstance(result, ParseError):
            return result if state.position != start else None
        values.append(result.value)
        if state.position == start:
            return None


def _one_or_more[T](
    head: Parser[T], tail: Parser[T], state: ParseState
) -> Outcome[list[T]]:
    """Match head once, then collect tail while it keeps matching.

    A head that matched without consuming is not repeated when it is also
    the tail; a distinct tail (a separator pair) is still attempted.
    """
    start = state.position
    first = head(state)
    if isinstance(first, ParseError):
        return first

    values = [first.value]
    if state.position != start or head is not tail:
        error = _collect(tail, state, values)
        if error is not None:
            return error
    return ParseResult(values, state.position)


@dataclass(frozen=True, slots=True)
class Many1[T](Parser[list[T]]):
    """One or more parser matches, in match order.

    Fails with the first attempt's error if that attempt fails; nothing
    it consumed is rolled back.
    """

    parser: Parser[T]

    def __call__(self, state: ParseState) -> Outcome[list[T]]:
        return _one_or_more(self.parser, self.parser, state)


@dataclass(frozen=True, slots=True)
class Many[T](Parser[list[T]]):
    """Zero or more parser matches, in match order.

    Produces an empty list when the first attempt fails without consuming.
    """

    parser: Parser[T]

    def __call__(self, state: ParseState) -> Outcome[list[T]]:
        values: list[T] = []
        error = _collect(self.parser, state, values)
        if error is not None:
            return error
        return ParseResult(values, state.position)


@dataclass(frozen=True, slots=True)
class Skip(Parser[None]):
    """Zero or more parser matches, discarding their values."""

    parser: Parser[object]

    def __call__(self, state: ParseState) -> Outcome[None]:
        error = _collect(self.parser, state, [])
        if error is not None:
            return error
        return ParseResult(None, state.position)


@dataclass(frozen=True, slots=True)
class Between[T](Parser[T]):
    """Match start, parser, end in sequence; produce the value of parser."""

    start: Parser[object]
    end: Parser[object]
    parser: Parser[T]

    def __call__(self, state: ParseState) -> Outcome[T]:
        opened = self.start(state)
        if isinstance(opened, ParseError):
            return opened
        result = self.parser(state)
        if isinstance(result, ParseError):
            return result
        closed = self.end(state)
        if isinstance(closed, ParseError):
            return closed
        return ParseResult(result.value, state.position)


@dataclass(frozen=True, slots=True)
class SepBy1[T](Parser[list[T]]):
    """One or more parser matches separated by sep; separator values are dropped.

    A separator followed by a failing element fails the whole list when the
    pair consumed input (the usual case). No trailing separator is ever
    consumed on success.
    """

    parser: Parser[T]
    sep: Parser[object]
    _tail: Parser[T] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_tail", Then(self.sep, self.parser))

    def __call__(self, state: ParseState) -> Outcome[list[T]]:
        return _one_or_more(self.parser, self._tail, state)


@dataclass(frozen=True, slots=True)
class SepBy[T](Parser[list[T]]):
    """Zero or more parser matches separated by sep."""

    parser: Parser[T]
    sep: Parser[object]
    _some: SepBy1[T] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_some", SepBy1(self.parser, self.sep))

    def __call__(self, state: ParseState) -> Outcome[list[T]]:
        start = state.position
        result = self._some(state)
        if isinstance(result, ParseError) and state.position == start:
            return ParseResult([], state.position)
        return result


@dataclass(frozen=True, slots=True)
class ManyTil[T](Parser[list[T]]):
    """Collect parser matches until end matches.

    Before every element, end is attempted under Try. When it matches its
    consumption is kept and the collected values are produced; when it
    fails the cursor is back where it was and one parser match is
    required. Running out of input before end matches fails with the
    element's error.

    Example:
        >>> parse(b"abcSTOP", ManyTil(AnyChar(), String("STOP"))).value
        ['a', 'b', 'c']
    """

    parser: Parser[T]
    end: Parser[object]
    _terminator: Try[object] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_terminator", Try(self.end))

    def __call__(self, state: ParseState) -> Outcome[list[T]]:
        values: list[T] = []
        while True:
            start = state.position
            if not isinstance(self._terminator(state), ParseError):
                return ParseResult(values, state.position)

            result = self.parser(state)
            if isinstance(result, ParseError):
                return result
            values.append(result.value)
            if state.position == start:
                return state.fail(ErrorTemplate.no_progress())
