"""Mutable cursor state and parse outcome types.

A parse run owns exactly one ParseState. Combinators advance it through
next(), the single consumption point, and control combinators rewind it to
a Checkpoint taken before an attempt.

Design Philosophy:
    - Source is immutable bytes, fixed for the lifetime of a run
    - Position and line are mutated in place (no allocation per byte)
    - EOF is a state (is_eof), next() reports it as a None byte
    - Outcomes are values: ParseResult on success, ParseError on failure

Line Ending Support:
    Only LF (0x0A) advances the line counter. CRLF files work because the
    LF is still present; CR-only files report everything on line 1.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from byteparsec.constants import LINE_FEED, MAX_DEPTH
from byteparsec.core.depth_guard import DepthGuard

__all__ = ["Checkpoint", "LineOffsetCache", "ParseError", "ParseResult", "ParseState"]


@dataclass(frozen=True, slots=True)
class Checkpoint:
    """Saved cursor location used for backtracking.

    Attributes:
        position: Byte offset at the time of the snapshot
        line: Line number at the time of the snapshot
    """

    position: int
    line: int


@dataclass(slots=True)
class ParseState:
    """Cursor over an in-memory byte buffer.

    Example:
        >>> state = ParseState(b"a\\nb")
        >>> state.next(lambda b: b == ord("a"))
        (97, True)
        >>> state.next(lambda b: True)
        (10, True)
        >>> state.position, state.line
        (2, 2)
        >>> state.next(lambda b: b == ord("x"))
        (98, False)
        >>> state.position
        2

    Attributes:
        source: Input bytes, never modified
        position: Offset of the next unread byte (0 <= position <= len(source))
        line: 1-based line number, incremented once per consumed line feed
        restore_line_on_backtrack: When False, rewind() restores only the
            position and leaves the line counter where the abandoned attempt
            left it
        depth_guard: Nesting counter for Forward references
    """

    source: bytes
    position: int = 0
    line: int = 1
    restore_line_on_backtrack: bool = True
    depth_guard: DepthGuard = field(default_factory=lambda: DepthGuard(MAX_DEPTH))

    @property
    def is_eof(self) -> bool:
        """True when every byte has been consumed."""
        return self.position >= len(self.source)

    def peek(self) -> int | None:
        """Byte under the cursor without consuming it, or None at EOF."""
        if self.is_eof:
            return None
        return self.source[self.position]

    def next(self, predicate: Callable[[int], bool]) -> tuple[int | None, bool]:
        """Consume one byte if it satisfies predicate.

        Args:
            predicate: Test applied to the byte under the cursor

        Returns:
            (byte, True) after consuming a matching byte.
            (byte, False) if the byte does not match (nothing consumed).
            (None, False) at end of input.
        """
        if self.is_eof:
            return None, False

        byte = self.source[self.position]
        if not predicate(byte):
            return byte, False

        self.position += 1
        if byte == LINE_FEED:
            self.line += 1
        return byte, True

    def mark(self) -> Checkpoint:
        """Snapshot the current location."""
        return Checkpoint(self.position, self.line)

    def rewind(self, checkpoint: Checkpoint) -> None:
        """Move the cursor back to a snapshot taken by mark()."""
        self.position = checkpoint.position
        if self.restore_line_on_backtrack:
            self.line = checkpoint.line

    def fail(self, reason: str) -> "ParseError":
        """Build a ParseError positioned at the current location."""
        return ParseError(reason, self.line, self.position)

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for the current position.

        Recomputed from the source, so the result is independent of the
        line counter (and of restore_line_on_backtrack).

        Returns:
            (line, column) tuple (1-indexed, like text editors)
        """
        line = self.source.count(LINE_FEED, 0, self.position) + 1
        last_newline = self.source.rfind(LINE_FEED, 0, self.position)
        col = self.position - last_newline if last_newline >= 0 else self.position + 1
        return (line, col)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search.

    Example:
        >>> cache = LineOffsetCache(b"abc\\ndef\\nghi")
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(4)
        (2, 1)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: bytes) -> None:
        """Build line offset cache from source.

        Args:
            source: Source bytes to index
        """
        offsets = [0]
        for i, byte in enumerate(source):
            if byte == LINE_FEED:
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    @property
    def line_count(self) -> int:
        """Number of lines in the source (an empty source has one line)."""
        return len(self._offsets)

    def line_start(self, line: int) -> int:
        """Byte offset where a 1-based line begins."""
        return self._offsets[line - 1]

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Byte offset in source (clamped to the valid range)

        Returns:
            (line, column) tuple (1-indexed, like text editors)
        """
        pos = max(0, min(pos, self._source_len))

        # Line number = index of largest offset <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Successful combinator outcome.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> result = ParseResult(["a", "b"], 2)
        >>> result.value
        ['a', 'b']
        >>> result.position
        2

    Attributes:
        value: Value produced by the combinator
        position: Cursor offset after the combinator returned
    """

    value: T
    position: int


@dataclass(frozen=True, slots=True)
class ParseError:
    """Failed combinator outcome.

    Only the first failure along the path actually taken is reported;
    errors of abandoned alternatives are discarded.

    Example:
        >>> error = ParseError("Expected 'y'", 1, 0)
        >>> error.format_error()
        "Expected 'y' on line 1"

    Attributes:
        reason: Free-text failure message
        line: Line counter at the moment of failure
        position: Cursor offset at the moment of failure
    """

    reason: str
    line: int
    position: int = 0

    def __str__(self) -> str:
        return self.format_error()

    def format_error(self) -> str:
        """Format as "<reason> on line <line>"."""
        return f"{self.reason} on line {self.line}"

    def format_with_context(self, source: bytes | str, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Shows the line holding the failure position, up to context_lines
        lines around it, and a caret under the failing byte. Line and column
        are recomputed from position, so the excerpt is correct even when
        the line counter was not rolled back.

        Args:
            source: The source the failing run was given
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context

        Example:
            >>> error = ParseError("Expected ';'", 2, 8)
            >>> print(error.format_with_context(b"a = 1;\\nb = 2"))
            Expected ';' on line 2
            <BLANKLINE>
               1 | a = 1;
               2 | b = 2
                 |  ^
        """
        data = source.encode("utf-8") if isinstance(source, str) else bytes(source)
        cache = LineOffsetCache(data)
        line, col = cache.get_line_col(self.position)

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(cache.line_count, line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            begin = cache.line_start(i)
            end = cache.line_start(i + 1) - 1 if i < cache.line_count else len(data)
            result_lines.append(line_num_str + data[begin:end].decode("latin-1"))

            if i == line:
                pointer = " " * (len(line_num_str) - 2) + "|" + " " * col + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)
