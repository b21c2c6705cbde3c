"""Nesting limits for parser invocations.

Every `Parser.parse` call enters the cursor's DepthGuard, so runaway
recursive grammars end in a DepthLimitExceededError instead of a
RecursionError raised from somewhere deep inside a combinator.
"""
import logging
import sys
from dataclasses import dataclass, field
from typing import Optional

from .Errors import DepthLimitExceededError

logger = logging.getLogger(__name__)

# Python frames consumed per nested Parser.parse call: parse() plus the
# combinator closure it runs. Helpers such as _many_accum add a third.
FRAMES_PER_LEVEL = 2

# Stack frames kept free for the caller (test runners, REPLs).
RESERVE_FRAMES = 50


def max_safe_depth(reserve_frames: int = RESERVE_FRAMES) -> int:
    """Deepest parser nesting the current sys.getrecursionlimit() can hold."""
    return max(1, (sys.getrecursionlimit() - reserve_frames) // FRAMES_PER_LEVEL)


@dataclass
class DepthGuard:
    """Context manager counting how deeply parser invocations are nested.

    Usage:
        with state.depth:
            result = parse_fn(state)

    Attributes:
        max_depth: Maximum allowed nesting. None means as deep as the
            interpreter recursion limit allows; explicit values are clamped to it.
        current_depth: Current nesting
    """

    max_depth: Optional[int] = None
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.max_depth is None:
            self.max_depth = max_safe_depth()
            return
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> 'DepthGuard':
        # Check before incrementing: __exit__ does not run when __enter__ raises.
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(self.max_depth)
        self.current_depth += 1
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        return self.current_depth

    def reset(self) -> None:
        self.current_depth = 0


def depth_clamp(requested_depth: int, reserve_frames: int = RESERVE_FRAMES) -> int:
    """Clamp a requested nesting depth so it cannot outrun sys.getrecursionlimit().

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames kept free for the caller

    Returns:
        The requested depth, or the largest safe depth if it was too large.
    """
    safe_depth = max_safe_depth(reserve_frames)
    if requested_depth > safe_depth:
        logger.warning(
            "Requested parser depth %d exceeds what the Python recursion limit (%d) allows. "
            "Clamping to %d. Raise sys.setrecursionlimit() for deeper grammars.",
            requested_depth,
            sys.getrecursionlimit(),
            safe_depth,
        )
        return safe_depth
    return requested_depth
