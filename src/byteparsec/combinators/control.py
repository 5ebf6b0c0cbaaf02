"""Choice and backtracking.

The backtracking discipline:
    - Either commits to its first branch as soon as that branch consumes
      input. Only a failure at the starting position lets the second
      branch run.
    - Try turns any failure into a zero-consumption failure by rewinding,
      which is what allows Either to move past a partially matched branch.

Neither combinator keeps the error of an abandoned branch.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from byteparsec.combinators.base import Outcome, Parser
from byteparsec.combinators.monad import Return
from byteparsec.combinators.state import ParseError, ParseResult, ParseState
from byteparsec.diagnostics import DepthLimitExceededError, ErrorTemplate, ParsecError

__all__ = ["Either", "Forward", "Maybe", "Option", "Try"]


@dataclass(frozen=True, slots=True)
class Either[T](Parser[T]):
    """Ordered choice with commitment on consumption.

    Runs first. On failure at an unchanged position, runs second from that
    same position and returns its outcome. On failure after consuming at
    least one byte, returns the failure of first without trying second.
    """

    first: Parser[T]
    second: Parser[T]

    def __call__(self, state: ParseState) -> Outcome[T]:
        start = state.position
        result = self.first(state)
        if isinstance(result, ParseError) and state.position == start:
            return self.second(state)
        return result


@dataclass(frozen=True, slots=True)
class Try[T](Parser[T]):
    """Run parser; on failure rewind to the starting location.

    The failure itself is propagated unchanged, so its line and position
    still describe where the attempt actually broke down.
    """

    parser: Parser[T]

    def __call__(self, state: ParseState) -> Outcome[T]:
        start = state.mark()
        result = self.parser(state)
        if isinstance(result, ParseError):
            state.rewind(start)
        return result


@dataclass(frozen=True, slots=True)
class Option[T](Parser[T]):
    """Run parser, or produce default if it fails without consuming.

    Same as Either(parser, Return(default)).
    """

    default: T
    parser: Parser[T]
    _choice: Either[T] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_choice", Either(self.parser, Return(self.default)))

    def __call__(self, state: ParseState) -> Outcome[T]:
        return self._choice(state)


@dataclass(frozen=True, slots=True)
class Maybe(Parser[None]):
    """Consume parser if it matches; always succeed with None.

    A failure after consumption still propagates, as with Option.
    """

    parser: Parser[object]

    def __call__(self, state: ParseState) -> Outcome[None]:
        start = state.position
        result = self.parser(state)
        if isinstance(result, ParseError) and state.position != start:
            return result
        return ParseResult(None, state.position)


@dataclass(slots=True, eq=False)
class Forward[T](Parser[T]):
    """Late-bound reference for recursive grammars.

    Example:
        >>> expr = Forward()
        >>> group = Between(Char("("), Char(")"), expr)
        >>> expr.define(Either(group, Many1(digit())))

    Each invocation is counted against the state's DepthGuard, so runaway
    recursion raises DepthLimitExceededError. A level may span many
    interpreter frames, so the stack can run out before the guard's limit;
    that RecursionError is reported as DepthLimitExceededError too.
    Invoking a reference that was never defined raises ParsecError.
    """

    target: Parser[T] | None = None

    def define(self, parser: Parser[T]) -> None:
        """Bind the reference to the parser it stands for."""
        self.target = parser

    def __call__(self, state: ParseState) -> Outcome[T]:
        if self.target is None:
            raise ParsecError(ErrorTemplate.undefined_forward())
        with state.depth_guard:
            try:
                return self.target(state)
            except RecursionError as e:
                depth = state.depth_guard.current_depth
                raise DepthLimitExceededError(ErrorTemplate.stack_exhausted(depth)) from e
