"""Single-step byte matchers.

All matchers consume through ParseState.next(); String is the only one
that consumes more than one byte and it is atomic: on a mismatch it
rewinds to where it started.

Matched single bytes are produced as one-character str values (chr(byte)).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from byteparsec.combinators.base import Outcome, Parser, to_bytes
from byteparsec.combinators.state import ParseResult, ParseState
from byteparsec.diagnostics import ErrorTemplate

__all__ = ["AnyChar", "Char", "Eof", "NoneOf", "OneOf", "Satisfy", "String"]


def _accept_any(_byte: int) -> bool:
    return True


@dataclass(frozen=True, slots=True)
class AnyChar(Parser[str]):
    """Consume any single byte; fail only at end of input."""

    def __call__(self, state: ParseState) -> Outcome[str]:
        byte, ok = state.next(_accept_any)
        if ok:
            return ParseResult(chr(byte), state.position)
        return state.fail(ErrorTemplate.unexpected_eof())


@dataclass(frozen=True, slots=True)
class Eof(Parser[None]):
    """Succeed with None only at end of input. Never consumes."""

    def __call__(self, state: ParseState) -> Outcome[None]:
        byte = state.peek()
        if byte is None:
            return ParseResult(None, state.position)
        return state.fail(ErrorTemplate.expected_eof(byte))


@dataclass(frozen=True, slots=True)
class Char(Parser[str]):
    """Consume exactly one byte equal to char.

    Args:
        char: A one-byte literal (str or bytes)

    Raises:
        ValueError: If char does not encode to exactly one byte
    """

    char: str | bytes
    _byte: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        encoded = to_bytes(self.char)
        if len(encoded) != 1:
            msg = f"Char expects a single byte, got {self.char!r}"
            raise ValueError(msg)
        object.__setattr__(self, "_byte", encoded[0])

    def __call__(self, state: ParseState) -> Outcome[str]:
        expected = self._byte
        byte, ok = state.next(lambda b: b == expected)
        if ok:
            return ParseResult(chr(byte), state.position)
        return state.fail(ErrorTemplate.expected_char(expected))


@dataclass(frozen=True, slots=True)
class OneOf(Parser[str]):
    """Consume one byte that is a member of charset."""

    charset: str | bytes
    _members: frozenset[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_members", frozenset(to_bytes(self.charset)))

    def __call__(self, state: ParseState) -> Outcome[str]:
        byte, ok = state.next(self._members.__contains__)
        if ok:
            return ParseResult(chr(byte), state.position)
        return state.fail(ErrorTemplate.expected_one_of(_display(self.charset), byte))


@dataclass(frozen=True, slots=True)
class NoneOf(Parser[str]):
    """Consume one byte that is not a member of charset. Fails at end of input."""

    charset: str | bytes
    _members: frozenset[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_members", frozenset(to_bytes(self.charset)))

    def __call__(self, state: ParseState) -> Outcome[str]:
        members = self._members
        byte, ok = state.next(lambda b: b not in members)
        if ok:
            return ParseResult(chr(byte), state.position)
        return state.fail(ErrorTemplate.unexpected_char(byte))


@dataclass(frozen=True, slots=True)
class Satisfy(Parser[str]):
    """Consume one byte accepted by predicate.

    Args:
        predicate: Test applied to the byte value (0-255)
        description: Name used in the failure reason ("Expected <description> ...")
    """

    predicate: Callable[[int], bool]
    description: str = "matching byte"

    def __call__(self, state: ParseState) -> Outcome[str]:
        byte, ok = state.next(self.predicate)
        if ok:
            return ParseResult(chr(byte), state.position)
        return state.fail(ErrorTemplate.unsatisfied(self.description, byte))


@dataclass(frozen=True, slots=True)
class String(Parser[str | bytes]):
    """Consume an exact byte sequence, or nothing at all.

    Produces the literal exactly as passed. On the first mismatching byte the
    cursor is rewound to where the attempt began, so a failed String never
    consumes input and can always be followed by an alternative.
    """

    text: str | bytes
    _encoded: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_encoded", to_bytes(self.text))

    def __call__(self, state: ParseState) -> Outcome[str | bytes]:
        start = state.mark()
        for expected in self._encoded:
            _, ok = state.next(lambda b, expected=expected: b == expected)
            if not ok:
                state.rewind(start)
                return state.fail(ErrorTemplate.expected_string(_display(self.text)))
        return ParseResult(self.text, state.position)


def _display(text: str | bytes) -> str:
    if isinstance(text, str):
        return text
    return bytes(text).decode("latin-1")
