"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .grid import Grid
from .path import Path
from .solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses implement search() and define name and description
    class attributes. solve() wraps search() with timing and metrics.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for CLI listings
        max_path_length: Largest grid (rows + columns - 2) the strategy
                         accepts, or None for no limit
    """
    name: str = "base"
    description: str = "Base strategy"
    max_path_length: Optional[int] = None

    @abstractmethod
    def search(self, grid: Grid) -> Tuple[Optional[Path], int]:
        """
        Find the maximum-gold path.

        Args:
            grid: Grid to solve

        Returns:
            (best path or None if infeasible, candidates explored)
        """
        pass

    def accepts(self, grid: Grid) -> bool:
        """Check whether the grid is small enough for this strategy."""
        return self.max_path_length is None or grid.max_path_length <= self.max_path_length

    def solve(self, grid: Grid) -> Solution:
        """
        Compute solution for the given grid.

        Args:
            grid: Grid to solve

        Returns:
            Solution with best path and metrics
        """
        start_time = time.perf_counter()
        path, explored = self.search(grid)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.debug(
            f"{self.name}: {grid.rows}x{grid.columns} grid, "
            f"{explored} candidates, {elapsed_ms:.2f}ms"
        )

        return Solution(
            path=path,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                candidates_explored=explored,
                strategy_name=self.name
            )
        )
