"""
Dynamic Programming Strategy - Best path into every cell, built row by row.

An optimal path to (i, j) is an optimal path to (i-1, j) or (i, j-1)
extended by one step, so one row-major pass over the grid fills a table
of best partial paths. The answer is the richest entry in the table,
since a path may end on any reachable cell.
"""

import logging
from typing import List, Optional, Tuple

from ..base import SolverStrategy
from ..grid import Grid
from ..path import Direction, Path
from ..factory import register_strategy

logger = logging.getLogger(__name__)


def solve_dynamic_programming(grid: Grid) -> Optional[Path]:
    """
    Solve with dynamic programming in O(rows * columns).

    Args:
        grid: Grid to solve

    Returns:
        Maximum-gold path, or None if the start cell is rock
    """
    best, _ = _search(grid)
    return best


def _search(grid: Grid) -> Tuple[Optional[Path], int]:
    if grid.is_rock(0, 0):
        logger.info("Start cell is rock, no path exists")
        return None, 0

    # None marks a rock or unreachable cell
    table: List[List[Optional[Path]]] = [
        [None] * grid.columns for _ in range(grid.rows)
    ]
    table[0][0] = Path(grid)
    explored = 1

    for i in range(grid.rows):
        for j in range(grid.columns):
            if i == 0 and j == 0:
                continue
            if grid.is_rock(i, j):
                continue

            from_above: Optional[Path] = None
            from_left: Optional[Path] = None

            above = table[i - 1][j] if i > 0 else None
            if above is not None and above.is_step_valid(Direction.DOWN):
                from_above = above.extended(Direction.DOWN)
                explored += 1

            left = table[i][j - 1] if j > 0 else None
            if left is not None and left.is_step_valid(Direction.RIGHT):
                from_left = left.extended(Direction.RIGHT)
                explored += 1

            if from_above is not None and from_left is not None:
                # Ties go to the path from above
                table[i][j] = from_left if from_left.better_than(from_above) else from_above
            elif from_above is not None:
                table[i][j] = from_above
            else:
                table[i][j] = from_left

    best = table[0][0]
    for row in table:
        for entry in row:
            if entry is not None and entry.better_than(best):
                best = entry

    return best, explored


@register_strategy
class DynamicProgrammingStrategy(SolverStrategy):
    """
    Dynamic-programming strategy.

    Keeps one optional best path per cell and scans the whole table
    for the maximum at the end. O(rows * columns) time and space.
    """
    name = "dynamic_programming"
    description = "Dynamic programming (fast) - Best path into every cell"

    def search(self, grid: Grid) -> Tuple[Optional[Path], int]:
        return _search(grid)
