"""Tests for runner: parse(), parse_or_raise() and ParseRunner."""

from __future__ import annotations

import logging

import pytest

import byteparsec
from byteparsec import (
    AnyChar,
    Char,
    Either,
    Eof,
    Forward,
    Many1,
    ManyTil,
    ParseError,
    ParseResult,
    ParseRunner,
    ParseSyntaxError,
    SepBy,
    String,
    Then,
    Try,
    parse,
    parse_or_raise,
)
from byteparsec.combinators.charsets import digit, lowercase
from byteparsec.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from byteparsec.diagnostics import DepthLimitExceededError

# ============================================================================
# Literal scenarios
# ============================================================================


class TestScenarios:
    """End-to-end runs through the entry point."""

    def test_lowercase_run(self) -> None:
        """One-or-more lowercase letters over 'abc123'."""
        assert parse("abc123", Many1(lowercase())) == ParseResult(["a", "b", "c"], 3)

    def test_eof_on_empty(self) -> None:
        """End-of-input on the empty source."""
        assert parse("", Eof()) == ParseResult(None, 0)

    def test_char_mismatch_message(self) -> None:
        """Exact character 'y' against 'x'."""
        result = parse("x", Char("y"))

        assert isinstance(result, ParseError)
        assert str(result) == "Expected 'y' on line 1"

    def test_digits_separated_by_comma(self) -> None:
        """Digits separated by commas."""
        assert parse("1,2,3", SepBy(digit(), Char(","))) == ParseResult(["1", "2", "3"], 5)

    def test_digits_on_empty(self) -> None:
        """One-or-more digits on the empty source reports end of file on line 1."""
        result = parse("", Many1(digit()))

        assert isinstance(result, ParseError)
        assert result.line == 1
        assert "end of file" in result.reason

    def test_many_til(self) -> None:
        """Read until a delimiter, leaving the cursor after it."""
        assert parse("abcSTOP", ManyTil(AnyChar(), String("STOP"))) == ParseResult(
            ["a", "b", "c"], 7
        )

    def test_error_line_after_newlines(self) -> None:
        """Errors report the line where the failure happened."""
        grammar = Then(String("a\nb\n"), Char("c"))

        assert str(parse("a\nb\nd", grammar)) == "Expected 'c' on line 3"


# ============================================================================
# Sources
# ============================================================================


class TestSources:
    """Accepted source types."""

    @pytest.mark.parametrize("source", [b"ab", bytearray(b"ab"), memoryview(b"ab"), "ab"])
    def test_bytes_like_and_str(self, source: bytes | bytearray | memoryview | str) -> None:
        """Every accepted type yields the same result."""
        assert parse(source, Many1(lowercase())) == ParseResult(["a", "b"], 2)

    def test_str_is_utf8_encoded(self) -> None:
        """Non-ASCII text is matched as UTF-8 code units."""
        result = parse("é", Many1(AnyChar()))

        assert isinstance(result, ParseResult)
        assert len(result.value) == 2

    def test_rejects_other_types(self) -> None:
        """Non-text sources are a TypeError."""
        with pytest.raises(TypeError, match="int"):
            parse(42, Eof())  # type: ignore[arg-type]

    def test_does_not_require_full_consumption(self) -> None:
        """Trailing input is left alone unless the grammar asks for Eof."""
        assert parse("ab!", Many1(lowercase())) == ParseResult(["a", "b"], 2)
        assert isinstance(parse("ab!", Then(Many1(lowercase()), Eof())), ParseError)


# ============================================================================
# Configuration
# ============================================================================


class TestConfiguration:
    """ParseRunner options."""

    def test_defaults(self) -> None:
        """Unset options fall back to module constants."""
        runner = ParseRunner()

        assert runner.max_source_size == MAX_SOURCE_SIZE
        assert runner.max_nesting_depth == MAX_DEPTH
        assert runner.restore_line_on_backtrack is True

    def test_source_size_limit(self) -> None:
        """Oversized sources are rejected before parsing."""
        runner = ParseRunner(max_source_size=4)

        with pytest.raises(ValueError, match="exceeds maximum"):
            runner.run(b"12345", Eof())

    def test_zero_disables_size_limit(self) -> None:
        """max_source_size=0 turns the check off."""
        runner = ParseRunner(max_source_size=0)

        assert isinstance(runner.run(b"x" * 64, Many1(AnyChar())), ParseResult)

    def test_nesting_depth(self) -> None:
        """Forward recursion is bounded by max_nesting_depth."""
        nested: Forward[str] = Forward()
        nested.define(Either(Then(Char("("), nested), Char("x")))

        assert parse("((x", nested, max_nesting_depth=5) == ParseResult("x", 3)
        with pytest.raises(DepthLimitExceededError):
            parse("((((((x", nested, max_nesting_depth=5)

    def test_line_restoration_modes(self) -> None:
        """restore_line_on_backtrack decides which line a later error reports."""
        grammar = Either(Try(Then(Char("\n"), Char("a"))), Char("b"))

        fixed = parse("\nz", grammar)
        legacy = parse("\nz", grammar, restore_line_on_backtrack=False)

        assert str(fixed) == "Expected 'b' on line 1"
        assert str(legacy) == "Expected 'b' on line 2"

    def test_runner_is_reusable(self) -> None:
        """Each run starts from a fresh state."""
        runner = ParseRunner()
        grammar = Many1(lowercase())

        assert runner.run("ab", grammar) == runner.run("ab", grammar)
        assert runner.run("cd", grammar) == ParseResult(["c", "d"], 2)

    def test_new_state(self) -> None:
        """new_state() applies the runner options."""
        state = ParseRunner(max_nesting_depth=7, restore_line_on_backtrack=False).new_state("x")

        assert state.source == b"x"
        assert (state.position, state.line) == (0, 1)
        assert state.depth_guard.max_depth == 7
        assert state.restore_line_on_backtrack is False


# ============================================================================
# Raising surface
# ============================================================================


class TestParseOrRaise:
    """parse_or_raise() and run_or_raise()."""

    def test_returns_value(self) -> None:
        """Success yields the bare value."""
        assert parse_or_raise("1,2", SepBy(digit(), Char(","))) == ["1", "2"]

    def test_raises_with_error(self) -> None:
        """Failure raises ParseSyntaxError carrying the ParseError."""
        with pytest.raises(ParseSyntaxError, match="Expected 'y' on line 1") as exc_info:
            parse_or_raise("x", Char("y"))

        assert exc_info.value.error == ParseError("Expected 'y'", 1, 0)

    def test_is_parsec_error(self) -> None:
        """ParseSyntaxError belongs to the package hierarchy."""
        assert issubclass(ParseSyntaxError, byteparsec.ParsecError)


# ============================================================================
# Logging
# ============================================================================


class TestLogging:
    """The runner logs through the module logger."""

    def test_debug_records(self, caplog: pytest.LogCaptureFixture) -> None:
        """Start and outcome are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="byteparsec.runner"):
            parse("x", Char("y"))

        messages = [record.getMessage() for record in caplog.records]
        assert "Parsing 1 bytes with Char" in messages
        assert "Parse failed at offset 0: Expected 'y' on line 1" in messages


class TestPackage:
    """Top-level package surface."""

    def test_version(self) -> None:
        """__version__ is always a string."""
        assert isinstance(byteparsec.__version__, str)

    def test_all_exports_resolve(self) -> None:
        """Everything in __all__ is importable from the package."""
        for name in byteparsec.__all__:
            assert hasattr(byteparsec, name)
