"""Error types and message templates for byteparsec.

Python 3.13+. Zero external dependencies.
"""

from .errors import DepthLimitExceededError, ParsecError, ParseSyntaxError
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "ErrorTemplate",
    "ParseSyntaxError",
    "ParsecError",
]
