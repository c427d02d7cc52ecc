#!/usr/bin/env python3
"""
Timing tool for the solving strategies.

Runs every strategy on random square grids of increasing size and prints
a timing table. Exhaustive search is exponential, so it is only run up
to --exhaustive-max.

Usage:
    python benchmark_solvers.py [--max-size N] [--exhaustive-max N] [--seed S]

Examples:
    python tools/benchmark_solvers.py
    python tools/benchmark_solvers.py --max-size 40 --exhaustive-max 8
"""

import sys
import argparse
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.grid_loader import random_grid
from src.solver import create_strategy, get_strategy_names


def benchmark(max_size: int, exhaustive_max: int, seed: int, repeats: int) -> bool:
    """
    Time each strategy on n x n grids for n = 1..max_size.

    Returns:
        True if every strategy agreed on every grid
    """
    names = get_strategy_names()
    header = f"{'size':>6} " + " ".join(f"{name:>22}" for name in names) + "   gold"
    print(header)
    print("-" * len(header))

    all_agree = True
    for n in range(1, max_size + 1):
        timings = {}
        golds = set()
        for name in names:
            if name == "exhaustive" and n > exhaustive_max:
                continue
            strategy = create_strategy(name)
            samples = []
            for r in range(repeats):
                grid = random_grid(n, n, seed=seed + r)
                solution = strategy.solve(grid)
                samples.append(solution.metrics.computation_time_ms)
                golds.add((r, solution.total_gold))
            timings[name] = float(np.median(samples))

        cells = " ".join(
            f"{timings[name]:>20.3f}ms" if name in timings else f"{'-':>22}"
            for name in names
        )
        # One gold total per repeat means all strategies agreed
        agree = len(golds) == repeats
        all_agree = all_agree and agree
        size = f"{n}x{n}"
        print(f"{size:>6} {cells}   {'ok' if agree else 'MISMATCH'}")

    return all_agree


def main():
    parser = argparse.ArgumentParser(description="Time Greedy Gnomes strategies")
    parser.add_argument("--max-size", type=int, default=20, help="Largest n for n x n grids")
    parser.add_argument("--exhaustive-max", type=int, default=7,
                        help="Largest n to run exhaustive search on")
    parser.add_argument("--seed", type=int, default=0, help="Base seed for random grids")
    parser.add_argument("--repeats", type=int, default=3, help="Grids per size (median time)")
    args = parser.parse_args()

    if benchmark(args.max_size, args.exhaustive_max, args.seed, args.repeats):
        print("\nAll strategies agreed")
        return 0
    print("\nStrategies disagreed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
