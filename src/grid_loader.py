"""
Grid Loader Module for Greedy Gnomes Solver

Builds Grid objects from text files and from a seeded random generator.

File format: one grid row per line, whitespace-separated tokens.
    X    rock
    .    open cell, no gold
    N    open cell with N gold (non-negative integer)
Blank lines and lines starting with '#' are ignored.

Example:
    . 3 X
    5 . 2
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import numpy as np

from src.solver import Cell, Grid

logger = logging.getLogger(__name__)

ROCK_TOKEN = "X"
EMPTY_TOKEN = "."
COMMENT_PREFIX = "#"


class GridFormatError(ValueError):
    """Raised when grid text cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


def parse_grid(text: str) -> Grid:
    """
    Parse grid text into a Grid.

    Args:
        text: Grid document in the format described above

    Returns:
        Grid instance

    Raises:
        GridFormatError: On unknown tokens, negative gold, ragged rows
                         or a document with no rows
    """
    rows: List[List[Cell]] = []
    width = None

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        row = [_parse_token(token, line_number) for token in line.split()]
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise GridFormatError(
                f"expected {width} cells, found {len(row)}", line_number
            )
        rows.append(row)

    if not rows:
        raise GridFormatError("grid has no rows")

    return Grid(cells=tuple(tuple(row) for row in rows))


def _parse_token(token: str, line_number: int) -> Cell:
    if token.upper() == ROCK_TOKEN:
        return Cell.ROCK
    if token == EMPTY_TOKEN:
        return Cell.open(0)
    try:
        gold = int(token)
    except ValueError:
        raise GridFormatError(f"unknown cell token {token!r}", line_number) from None
    if gold < 0:
        raise GridFormatError(f"negative gold {gold}", line_number)
    return Cell.open(gold)


def format_grid_text(grid: Grid) -> str:
    """
    Serialize a grid in the file format.

    Open cells without gold are written as '.', so parse_grid() of the
    result gives back an equal grid.
    """
    lines = []
    for row in grid.cells:
        tokens = []
        for cell in row:
            if cell.is_rock:
                tokens.append(ROCK_TOKEN)
            elif cell.gold == 0:
                tokens.append(EMPTY_TOKEN)
            else:
                tokens.append(str(cell.gold))
        lines.append(" ".join(tokens))
    return "\n".join(lines) + "\n"


def load_grid(path: Union[str, Path]) -> Grid:
    """
    Load a grid file.

    Raises:
        OSError: If the file cannot be read
        GridFormatError: If the contents are malformed
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    grid = parse_grid(text)
    logger.debug(f"Loaded {grid.rows}x{grid.columns} grid from {path}")
    return grid


def save_grid(grid: Grid, path: Union[str, Path]) -> None:
    """Write a grid file."""
    with open(path, 'w', encoding='utf-8') as f:
        f.write(format_grid_text(grid))
    logger.debug(f"Saved {grid.rows}x{grid.columns} grid to {path}")


def random_grid(
    rows: int,
    columns: int,
    seed: Optional[int] = None,
    rock_probability: float = 0.2,
    gold_probability: float = 0.3,
    max_gold: int = 9
) -> Grid:
    """
    Generate a random grid.

    Each cell other than the start is rock with rock_probability,
    otherwise carries 1..max_gold gold with gold_probability, otherwise
    is empty. The start cell is always open with no gold.

    Args:
        rows: Number of rows (>= 1)
        columns: Number of columns (>= 1)
        seed: Seed for numpy's generator; same seed gives same grid
        rock_probability: Chance of rock per cell
        gold_probability: Chance of gold per non-rock cell
        max_gold: Largest gold value

    Returns:
        Grid instance

    Raises:
        ValueError: On non-positive dimensions or out-of-range probabilities
    """
    if rows < 1 or columns < 1:
        raise ValueError(f"Grid dimensions must be positive, got {rows}x{columns}")
    for name, p in (("rock_probability", rock_probability),
                    ("gold_probability", gold_probability)):
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"{name} must be in [0, 1], got {p}")
    if max_gold < 1:
        raise ValueError(f"max_gold must be at least 1, got {max_gold}")

    rng = np.random.default_rng(seed)
    rock = rng.random((rows, columns)) < rock_probability
    has_gold = rng.random((rows, columns)) < gold_probability
    gold = rng.integers(1, max_gold + 1, size=(rows, columns))

    values = np.where(has_gold, gold, 0)
    rock[0, 0] = False
    values[0, 0] = 0

    cells = tuple(
        tuple(
            Cell.ROCK if rock[r, c] else Cell.open(int(values[r, c]))
            for c in range(columns)
        )
        for r in range(rows)
    )
    return Grid(cells=cells)
