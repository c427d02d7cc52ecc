"""
Strategy Factory Module - Registry and factory for strategy instantiation.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Type

from .base import SolverStrategy
from .grid import Grid
from .solution import ComparisonResult

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "dynamic_programming"

# Global registry of strategies
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Decorator to register a strategy class.

    Usage:
        @register_strategy
        class MyStrategy(SolverStrategy):
            name = "my_strategy"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "exhaustive", "dynamic_programming")
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def get_strategy_names() -> List[str]:
    """
    Get list of available strategy names.

    Returns:
        List of registered strategy names
    """
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered strategies.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        "dynamic_programming" if available, else first registered
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    if _STRATEGIES:
        return next(iter(_STRATEGIES.keys()))
    return ""


def compare_strategies(
    grid: Grid,
    names: Optional[Sequence[str]] = None,
    size_limit: Optional[int] = None
) -> ComparisonResult:
    """
    Run several strategies on one grid.

    Strategies whose size limit the grid exceeds are skipped.

    Args:
        grid: Grid to solve
        names: Strategy names (default: all registered)
        size_limit: Tighter path-length limit applied to size-limited
                    strategies (e.g. keep exhaustive search to small grids)

    Returns:
        ComparisonResult with one Solution per strategy that ran
    """
    result = ComparisonResult()
    for name in names or get_strategy_names():
        strategy = create_strategy(name)
        too_large = not strategy.accepts(grid) or (
            size_limit is not None
            and strategy.max_path_length is not None
            and grid.max_path_length > size_limit
        )
        if too_large:
            logger.info(f"Skipping {name}: grid too large ({grid.rows}x{grid.columns})")
            continue
        result.solutions.append(strategy.solve(grid))
    return result
