"""Tests for combinators.monad: Return, Fail, Bind, Then."""

from __future__ import annotations

from byteparsec.combinators.monad import Bind, Fail, Return, Then
from byteparsec.combinators.primitives import Char, OneOf, String
from byteparsec.combinators.state import ParseError, ParseResult, ParseState


class TestReturn:
    """Return injects a value."""

    def test_succeeds_without_consuming(self) -> None:
        """The value is produced at the current position."""
        state = ParseState(b"abc", position=1)

        assert Return(42)(state) == ParseResult(42, 1)
        assert state.position == 1

    def test_succeeds_at_eof(self) -> None:
        """Return does not look at the input."""
        assert Return("x")(ParseState(b"")) == ParseResult("x", 0)


class TestFail:
    """Fail injects a failure."""

    def test_fails_with_message_and_line(self) -> None:
        """The message is the reason; the current line is captured."""
        state = ParseState(b"a\nb", position=2, line=2)

        assert Fail("no good")(state) == ParseError("no good", 2, 2)
        assert state.position == 2


class TestBind:
    """Bind sequences with the first value in scope."""

    def test_continuation_receives_value(self) -> None:
        """The second step is built from the first value."""
        digit = OneOf("0123456789")
        pair = Bind(digit, lambda a: Bind(digit, lambda b: Return(int(a + b))))

        assert pair(ParseState(b"42x")) == ParseResult(42, 2)

    def test_failure_short_circuits(self) -> None:
        """The continuation is never called after a failure."""
        calls: list[object] = []

        def continuation(value: object) -> Return[object]:
            calls.append(value)
            return Return(value)

        result = Bind(Char("a"), continuation)(ParseState(b"b"))

        assert result == ParseError("Expected 'a'", 1, 0)
        assert calls == []

    def test_second_failure_keeps_first_consumption(self) -> None:
        """Input consumed by the first step stays consumed."""
        state = ParseState(b"ab")

        result = Bind(Char("a"), lambda _: Char("c"))(state)

        assert result == ParseError("Expected 'c'", 1, 1)
        assert state.position == 1

    def test_continuation_can_choose_parser(self) -> None:
        """The value can steer which parser runs next."""
        tagged = Bind(
            OneOf("ns"),
            lambda tag: OneOf("0123456789") if tag == "n" else String("str"),
        )

        assert tagged(ParseState(b"n7")) == ParseResult("7", 2)
        assert tagged(ParseState(b"sstr")) == ParseResult("str", 4)


class TestThen:
    """Then sequences and discards the first value."""

    def test_returns_second_value(self) -> None:
        """Only the second value survives."""
        assert Then(Char("a"), Char("b"))(ParseState(b"ab")) == ParseResult("b", 2)

    def test_first_failure(self) -> None:
        """The second parser does not run if the first fails."""
        state = ParseState(b"xb")

        assert Then(Char("a"), Char("b"))(state) == ParseError("Expected 'a'", 1, 0)
        assert state.position == 0

    def test_second_failure(self) -> None:
        """A second-step failure is reported after the first step's consumption."""
        state = ParseState(b"ax")

        assert Then(Char("a"), Char("b"))(state) == ParseError("Expected 'b'", 1, 1)
