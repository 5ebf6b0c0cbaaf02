"""Shared constants for byteparsec.

Constants are grouped by domain:
- Depth limits: Recursion protection for recursive grammars
- Input limits: DoS prevention via size constraints
- Byte values: Code units with special meaning to the cursor

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Byte values
    "LINE_FEED",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of Forward references during a single parse run.
# Repetition combinators are iterative and never count against this limit;
# only grammar self-reference (expr -> term -> expr) does.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in bytes (10 MB).
# The whole source is resident in memory for the lifetime of a parse run.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# BYTE VALUES
# ============================================================================

# Consuming this byte increments the line counter.
LINE_FEED: int = 0x0A
