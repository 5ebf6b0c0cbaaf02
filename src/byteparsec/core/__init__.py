"""Core utilities shared by the combinators and the runner.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    depth_clamp: Clamp a requested depth against the interpreter limit

Python 3.13+.
"""

from .depth_guard import DepthGuard, depth_clamp

__all__ = ["DepthGuard", "depth_clamp"]
