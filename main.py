"""
Greedy Gnomes Solver - Entry Point

Loads or generates a grid, solves it and prints the best path.

Example:
    python main.py --grid grids/sample.txt
    python main.py --random 6x8 --seed 42 --compare
    python main.py --grid grids/sample.txt --strategy exhaustive --image out/path.png
"""

import sys
import logging
import argparse
from typing import List, Optional, Tuple

from src.grid_loader import load_grid, random_grid
from src.render import format_path, save_path_image
from src.settings import load_settings, save_settings
from src.solver import (
    Grid,
    compare_strategies,
    create_strategy,
    get_strategy_info,
    get_strategy_names,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DISAGREEMENT = 1
EXIT_BAD_INPUT = 2


def configure_logging(debug: bool) -> None:
    """Log to both console and solver.log."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def parse_dimensions(text: str) -> Tuple[int, int]:
    """
    Parse an 'RxC' size such as '4x6'.

    Raises:
        argparse.ArgumentTypeError: If the text is not two positive integers
    """
    parts = text.lower().split("x")
    try:
        rows, columns = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROWSxCOLUMNS, got {text!r}") from None
    if rows < 1 or columns < 1:
        raise argparse.ArgumentTypeError(f"dimensions must be positive, got {text!r}")
    return rows, columns


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    strategies = ", ".join(
        f"{info['name']} ({info['description']})" for info in get_strategy_info()
    )
    parser = argparse.ArgumentParser(
        description="Greedy Gnomes Solver - Maximum-gold right/down path through a grid",
        epilog=f"Strategies: {strategies}"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--grid", "-g",
        help="Grid file to solve"
    )
    source.add_argument(
        "--random", "-r",
        type=parse_dimensions,
        metavar="ROWSxCOLS",
        help="Solve a random grid of the given size"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for --random"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        default=None,
        help="Solving strategy (default: saved setting)"
    )
    parser.add_argument(
        "--remember",
        action="store_true",
        help="Save --strategy as the default in config.json"
    )
    parser.add_argument(
        "--compare", "-c",
        action="store_true",
        help="Run every strategy and check they agree on total gold"
    )
    parser.add_argument(
        "--image", "-i",
        default=None,
        help="Save a PNG of the solved path"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args(argv)
    if args.compare and args.strategy:
        parser.error("--compare runs every strategy; drop --strategy")
    if args.remember and not args.strategy:
        parser.error("--remember needs --strategy")
    return args


def build_grid(args, settings) -> Grid:
    """Load the grid file or generate a random grid."""
    if args.grid:
        return load_grid(args.grid)
    rows, columns = args.random
    logger.info(f"Generating random {rows}x{columns} grid (seed={args.seed})")
    return random_grid(
        rows,
        columns,
        seed=args.seed,
        rock_probability=settings["rock_probability"],
        gold_probability=settings["gold_probability"],
        max_gold=settings["max_gold"]
    )


def run(args, settings) -> int:
    """
    Solve and report.

    Returns:
        Exit code
    """
    strategy_name = args.strategy or settings.get("strategy_name")
    if args.strategy and args.remember:
        settings["strategy_name"] = args.strategy
        save_settings(settings)

    grid = build_grid(args, settings)
    logger.info(f"Grid: {grid.rows}x{grid.columns}, {grid.count_rocks()} rocks")

    size_limit = settings.get("exhaustive_size_limit")

    exit_code = EXIT_OK
    if args.compare:
        comparison = compare_strategies(grid, size_limit=size_limit)
        print(comparison.summary())
        if comparison.agree:
            logger.info("All strategies agree")
        else:
            logger.error("Strategies disagree on total gold")
            exit_code = EXIT_DISAGREEMENT
        solution = comparison.solutions[-1]
    else:
        strategy = create_strategy(strategy_name)
        if (strategy.max_path_length is not None and size_limit is not None
                and grid.max_path_length > size_limit):
            raise ValueError(
                f"{strategy.name} refused: {grid.rows}x{grid.columns} grid has path length "
                f"{grid.max_path_length}, above exhaustive_size_limit {size_limit}"
            )
        solution = strategy.solve(grid)
        logger.info(
            f"{strategy.name}: {solution.metrics.candidates_explored} candidates "
            f"in {solution.metrics.computation_time_ms:.2f}ms"
        )

    print(format_path(grid, solution.path))

    if args.image:
        save_path_image(
            grid, solution.path, args.image,
            cell_size=settings.get("image_cell_size", 32)
        )

    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, configure logging and run the solver."""
    args = parse_args(argv)
    settings = load_settings()
    configure_logging(args.debug or settings.get("debug_enabled", False))

    try:
        return run(args, settings)
    except (ValueError, OSError) as e:
        logger.error(f"Cannot solve: {e}")
        return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())
