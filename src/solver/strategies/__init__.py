"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .exhaustive import ExhaustiveStrategy, solve_exhaustive
from .dynamic_programming import DynamicProgrammingStrategy, solve_dynamic_programming

__all__ = [
    "ExhaustiveStrategy",
    "DynamicProgrammingStrategy",
    "solve_exhaustive",
    "solve_dynamic_programming",
]
