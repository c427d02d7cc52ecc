"""
Solver Package - Greedy Gnomes gold collection solvers.

Finds the right/down path from the top-left cell of a grid that collects
the most gold without crossing rock. Two interchangeable strategies are
provided: an exhaustive search (exponential, small grids only) and a
dynamic-programming solver (linear in grid size).

Public API:
    - Grid, Cell, CellKind: Immutable grid representation
    - Path, Direction: Right/down walk with running gold total
    - Solution: Result of strategy computation
    - SolutionMetrics: Performance statistics
    - SolverStrategy: Abstract base for strategies
    - solve_exhaustive(), solve_dynamic_programming(): Direct entry points
    - create_strategy(): Factory function
    - compare_strategies(): Run several strategies on one grid

Usage:
    from src.solver import Grid, solve_dynamic_programming

    grid = Grid.from_2d_list([
        [0, 3, None],
        [5, 0, 2],
    ])
    path = solve_dynamic_programming(grid)
    if path is not None:
        print(path.describe(), path.total_gold)
"""

# Core data structures
from .grid import Grid, Cell, CellKind
from .path import Path, Direction, InvalidStepError
from .solution import Solution, SolutionMetrics, ComparisonResult

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
    compare_strategies,
)

# Import strategies to register them
from . import strategies
from .strategies import solve_exhaustive, solve_dynamic_programming

__all__ = [
    # Data structures
    "Grid",
    "Cell",
    "CellKind",
    "Path",
    "Direction",
    "InvalidStepError",
    "Solution",
    "SolutionMetrics",
    "ComparisonResult",
    # Entry points
    "solve_exhaustive",
    "solve_dynamic_programming",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "compare_strategies",
]
