"""Entry point: run one combinator against a source buffer.

The runner owns the ParseState for a single run and threads it through the
combinator. Nothing survives between runs, so a ParseRunner and the
grammars it runs can be shared freely; each call gets a fresh state.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation from extremely large sources, and a
    nesting limit for recursive grammars built with Forward.
"""

import logging

from byteparsec.combinators.base import Outcome, Parser
from byteparsec.combinators.state import ParseError, ParseState
from byteparsec.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from byteparsec.core.depth_guard import DepthGuard
from byteparsec.diagnostics import ErrorTemplate, ParseSyntaxError

__all__ = ["ParseRunner", "parse", "parse_or_raise"]

logger = logging.getLogger(__name__)

type Source = bytes | bytearray | memoryview | str


def _as_bytes(source: Source) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    msg = f"Expected bytes-like or str source, got {type(source).__name__}"
    raise TypeError(msg)


class ParseRunner:
    """Runs combinators against sources under configured limits.

    Attributes:
        max_source_size: Maximum allowed source size in bytes (default: 10 MB)
        max_nesting_depth: Maximum Forward nesting depth (default: 100)
        restore_line_on_backtrack: Whether rollbacks restore the line counter
            along with the position (default: True)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size", "_restore_line_on_backtrack")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
        restore_line_on_backtrack: bool = True,
    ) -> None:
        """Initialize runner with optional limits.

        Args:
            max_source_size: Maximum source size in bytes (default: 10 MB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum Forward nesting depth (default: 100).
                              Clamped against the interpreter recursion limit.
            restore_line_on_backtrack: Set to False to keep the line counter
                where an abandoned attempt left it, as older grammars expect.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )
        self._restore_line_on_backtrack = restore_line_on_backtrack

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in bytes."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed Forward nesting depth."""
        return self._max_nesting_depth

    @property
    def restore_line_on_backtrack(self) -> bool:
        """Whether rollbacks restore the line counter."""
        return self._restore_line_on_backtrack

    def new_state(self, source: Source) -> ParseState:
        """Create the cursor state for one run over source.

        Raises:
            TypeError: If source is not bytes-like or str
            ValueError: If source exceeds max_source_size
        """
        data = _as_bytes(source)
        if self._max_source_size > 0 and len(data) > self._max_source_size:
            raise ValueError(ErrorTemplate.source_too_large(len(data), self._max_source_size))
        return ParseState(
            data,
            restore_line_on_backtrack=self._restore_line_on_backtrack,
            depth_guard=DepthGuard(self._max_nesting_depth),
        )

    def run[T](self, source: Source, parser: Parser[T]) -> Outcome[T]:
        """Run parser against source.

        The parser does not have to consume the whole source; append Eof()
        to the grammar to require that.

        Args:
            source: Input bytes; str is UTF-8 encoded first
            parser: Combinator to run

        Returns:
            ParseResult with the value and final position, or ParseError

        Raises:
            DepthLimitExceededError: If Forward recursion exceeds max_nesting_depth
            ValueError: If source exceeds max_source_size
        """
        state = self.new_state(source)
        logger.debug("Parsing %d bytes with %s", len(state.source), type(parser).__name__)

        result = parser(state)

        if isinstance(result, ParseError):
            logger.debug("Parse failed at offset %d: %s", result.position, result)
        else:
            logger.debug("Parse succeeded at offset %d", result.position)
        return result

    def run_or_raise[T](self, source: Source, parser: Parser[T]) -> T:
        """Run parser against source and return its value.

        Raises:
            ParseSyntaxError: If the parser fails
        """
        result = self.run(source, parser)
        if isinstance(result, ParseError):
            raise ParseSyntaxError(result)
        return result.value


def parse[T](
    source: Source,
    parser: Parser[T],
    *,
    max_source_size: int | None = None,
    max_nesting_depth: int | None = None,
    restore_line_on_backtrack: bool = True,
) -> Outcome[T]:
    """Run parser against source with a one-off ParseRunner.

    Example:
        >>> from byteparsec.combinators.charsets import lowercase
        >>> result = parse("abc123", Many1(lowercase()))
        >>> result.value, result.position
        (['a', 'b', 'c'], 3)
        >>> print(parse("x", Char("y")))
        Expected 'y' on line 1
    """
    runner = ParseRunner(
        max_source_size=max_source_size,
        max_nesting_depth=max_nesting_depth,
        restore_line_on_backtrack=restore_line_on_backtrack,
    )
    return runner.run(source, parser)


def parse_or_raise[T](
    source: Source,
    parser: Parser[T],
    *,
    max_source_size: int | None = None,
    max_nesting_depth: int | None = None,
    restore_line_on_backtrack: bool = True,
) -> T:
    """Run parser against source, returning its value or raising ParseSyntaxError."""
    runner = ParseRunner(
        max_source_size=max_source_size,
        max_nesting_depth=max_nesting_depth,
        restore_line_on_backtrack=restore_line_on_backtrack,
    )
    return runner.run_or_raise(source, parser)
