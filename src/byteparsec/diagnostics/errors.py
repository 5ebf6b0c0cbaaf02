"""byteparsec exception hierarchy.

Parse failures are ordinary return values (ParseError) while combinators run.
Exceptions are reserved for the outer surface: callers that prefer raising
over inspecting results, and resource limits that abort a run outright.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from byteparsec.combinators.state import ParseError

__all__ = ["DepthLimitExceededError", "ParseSyntaxError", "ParsecError"]


class ParsecError(Exception):
    """Base exception for all byteparsec errors."""


class ParseSyntaxError(ParsecError):
    """Source did not match the grammar.

    Raised by parse_or_raise(). The exception message is the formatted
    error text ("<reason> on line <line>").

    Attributes:
        error: The ParseError returned by the failing combinator
    """

    def __init__(self, error: ParseError) -> None:
        """Initialize ParseSyntaxError.

        Args:
            error: ParseError describing the failure
        """
        super().__init__(error.format_error())
        self.error = error


class DepthLimitExceededError(ParsecError):
    """Raised when Forward references nest deeper than the configured limit.

    This error indicates either:
    - A left-recursive grammar (a rule that reaches itself without consuming)
    - Adversarial input designed to cause stack overflow
    """
