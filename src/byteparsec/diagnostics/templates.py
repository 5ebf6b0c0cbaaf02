"""Error message templates.

Centralized reason strings for every failure a combinator can report.
Python 3.13+. Zero external dependencies.
"""


def _show(byte: int | None) -> str:
    """Render an offending byte (or the end-of-input sentinel) for messages."""
    if byte is None:
        return "end of file"
    return f"'{chr(byte)}'"


class ErrorTemplate:
    """Centralized error message templates.

    All failure reasons are created here. NO f-strings at call sites!
    This keeps the exact texts in one place:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unexpected_eof() -> str:
        """Input ended where a byte was required."""
        return "Unexpected end of file"

    @staticmethod
    def expected_eof(got: int) -> str:
        """Input continued where it should have ended.

        Args:
            got: The byte found instead of the end of input
        """
        return f"Expected end of file but got {_show(got)}"

    @staticmethod
    def expected_char(expected: int) -> str:
        """A specific byte was required.

        Args:
            expected: The byte the parser was looking for
        """
        return f"Expected '{chr(expected)}'"

    @staticmethod
    def expected_one_of(charset: str, got: int | None) -> str:
        """A byte from a set was required.

        Args:
            charset: The set as written by the grammar author
            got: The byte found, or None at end of input
        """
        return f"Expected one of '{charset}' but got {_show(got)}"

    @staticmethod
    def unexpected_char(got: int | None) -> str:
        """A byte outside a set was required.

        Args:
            got: The excluded byte found, or None at end of input
        """
        if got is None:
            return ErrorTemplate.unexpected_eof()
        return f"Unexpected {_show(got)}"

    @staticmethod
    def expected_string(expected: str) -> str:
        """An exact byte sequence was required.

        Args:
            expected: The literal as written by the grammar author
        """
        return f"Expected '{expected}'"

    @staticmethod
    def unsatisfied(description: str, got: int | None) -> str:
        """A byte matching a predicate was required.

        Args:
            description: Human-readable name of the predicate
            got: The byte found, or None at end of input
        """
        return f"Expected {description} but got {_show(got)}"

    @staticmethod
    def no_progress() -> str:
        """A repeated parser succeeded without consuming input."""
        return "Repeated parser succeeded without consuming input"

    @staticmethod
    def undefined_forward() -> str:
        """A Forward reference was invoked before define() was called."""
        return "Forward reference used before definition"

    @staticmethod
    def depth_exceeded(max_depth: int) -> str:
        """Recursive grammar nested past the configured limit.

        Args:
            max_depth: The configured maximum nesting depth
        """
        return f"Maximum nesting depth ({max_depth}) exceeded"

    @staticmethod
    def stack_exhausted(depth: int) -> str:
        """Interpreter stack ran out before the nesting limit was reached.

        Args:
            depth: Forward nesting depth when the stack ran out
        """
        return (
            f"Interpreter stack exhausted at nesting depth {depth}. "
            "Lower max_nesting_depth or raise sys.setrecursionlimit()."
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> str:
        """Source exceeds the configured size limit.

        Args:
            size: Source length in bytes
            max_size: Configured maximum
        """
        return (
            f"Source size ({size:,} bytes) exceeds maximum ({max_size:,} bytes). "
            "Configure max_source_size in ParseRunner constructor to increase limit."
        )
