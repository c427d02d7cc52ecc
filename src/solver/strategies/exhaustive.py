"""
Exhaustive Strategy - Tries every right/down bit string up to maximum length.

Exponential in rows + columns, so only practical for small grids. Useful
as a correctness oracle for the dynamic-programming strategy.
"""

import logging
from typing import Optional, Tuple

from ..base import SolverStrategy
from ..grid import Grid
from ..path import Direction, Path
from ..factory import register_strategy

logger = logging.getLogger(__name__)

# Bit strings are enumerated with integers bounded by 2**max_len
MAX_PATH_LENGTH = 63


def solve_exhaustive(grid: Grid) -> Optional[Path]:
    """
    Solve by exhaustive search.

    Args:
        grid: Grid with rows + columns - 2 < 64

    Returns:
        Maximum-gold path, or None if the start cell is rock

    Raises:
        ValueError: If the grid is too large to enumerate
    """
    best, _ = _search(grid)
    return best


def _search(grid: Grid) -> Tuple[Optional[Path], int]:
    max_len = grid.max_path_length
    if max_len > MAX_PATH_LENGTH:
        raise ValueError(
            f"Grid {grid.rows}x{grid.columns} too large for exhaustive search "
            f"(max path length {max_len}, limit {MAX_PATH_LENGTH})"
        )

    if grid.is_rock(0, 0):
        logger.info("Start cell is rock, no path exists")
        return None, 0

    best: Optional[Path] = None
    explored = 0

    for length in range(max_len + 1):
        for bits in range(2 ** length):
            candidate = Path(grid)
            for k in range(length):
                # bit k set: move right, clear: move down
                direction = Direction.RIGHT if (bits >> k) & 1 else Direction.DOWN
                if candidate.is_step_valid(direction):
                    candidate.add_step(direction)
            explored += 1

            # Strictly greater keeps the earliest enumerated path on ties
            if best is None or candidate.better_than(best):
                best = candidate

    return best, explored


@register_strategy
class ExhaustiveStrategy(SolverStrategy):
    """
    Brute-force strategy over all path shapes.

    For every length from 0 to rows + columns - 2, replays every bit
    string of that length from the start, skipping steps that would
    leave the grid or hit rock. O(2^n * n) for n = rows + columns - 2.
    """
    name = "exhaustive"
    description = "Exhaustive (exponential) - Tries every right/down sequence"
    max_path_length = MAX_PATH_LENGTH

    def search(self, grid: Grid) -> Tuple[Optional[Path], int]:
        return _search(grid)
