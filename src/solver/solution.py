"""
Solution Module - Result of strategy computation.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .path import Path


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        candidates_explored: Number of candidate paths evaluated
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    candidates_explored: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        path: Best path found, or None if the start cell is rock
        metrics: Performance statistics
    """
    path: Optional[Path] = None
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def is_feasible(self) -> bool:
        """Check if any path exists."""
        return self.path is not None

    @property
    def total_gold(self) -> int:
        """Gold collected by the path (0 when infeasible)."""
        if self.path is None:
            return 0
        return self.path.total_gold

    @property
    def step_count(self) -> int:
        if self.path is None:
            return 0
        return len(self.path)

    @property
    def end_position(self) -> Optional[Tuple[int, int]]:
        if self.path is None:
            return None
        return self.path.position


@dataclass
class ComparisonResult:
    """
    Outcome of running several strategies on the same grid.

    Attributes:
        solutions: One Solution per strategy, in the order requested
    """
    solutions: List[Solution] = field(default_factory=list)

    @property
    def agree(self) -> bool:
        """True if every strategy reports the same total gold and feasibility."""
        outcomes = {(s.is_feasible, s.total_gold) for s in self.solutions}
        return len(outcomes) <= 1

    def summary(self) -> str:
        lines = []
        for s in self.solutions:
            lines.append(
                f"{s.metrics.strategy_name}: gold={s.total_gold} steps={s.step_count} "
                f"time={s.metrics.computation_time_ms:.2f}ms"
            )
        return "\n".join(lines)
