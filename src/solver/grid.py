"""
Grid Module - Immutable gold map for the Greedy Gnomes puzzle.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple


class CellKind(Enum):
    """Kind of a grid cell."""
    OPEN = "open"
    ROCK = "rock"


@dataclass(frozen=True)
class Cell:
    """
    Single grid cell.

    Attributes:
        kind: OPEN or ROCK
        gold: Gold carried by an open cell (always 0 for rock)
    """
    kind: CellKind
    gold: int = 0

    @classmethod
    def open(cls, gold: int = 0) -> 'Cell':
        """Create an open cell carrying the given gold."""
        return cls(kind=CellKind.OPEN, gold=gold)

    @property
    def is_rock(self) -> bool:
        return self.kind is CellKind.ROCK


Cell.ROCK = Cell(kind=CellKind.ROCK)

# Values accepted by from_2d_list for a rock cell
ROCK_MARKERS = (None, "X", "x")


@dataclass(frozen=True)
class Grid:
    """
    Immutable rectangular grid of open and rock cells.

    Uses tuple-of-tuples so grids are hashable and can be shared freely
    between solver calls. Dimensions are fixed at construction.

    Attributes:
        cells: Tuple of rows, each a tuple of Cell
    """
    cells: Tuple[Tuple[Cell, ...], ...]

    def __post_init__(self):
        # Lists passed in are frozen so the grid stays hashable and fixed
        object.__setattr__(self, "cells", tuple(tuple(row) for row in self.cells))
        if len(self.cells) == 0:
            raise ValueError("Grid must have at least one row")
        width = len(self.cells[0])
        if width == 0:
            raise ValueError("Grid must have at least one column")
        for r, row in enumerate(self.cells):
            if len(row) != width:
                raise ValueError(
                    f"Grid row {r} has {len(row)} cells, expected {width}"
                )
            for c, cell in enumerate(row):
                if not isinstance(cell, Cell):
                    raise TypeError(f"Cell ({r},{c}) is not a Cell: {cell!r}")
                if not isinstance(cell.kind, CellKind):
                    raise TypeError(f"Cell ({r},{c}) kind is not a CellKind: {cell.kind!r}")
                if isinstance(cell.gold, bool) or not isinstance(cell.gold, int) or cell.gold < 0:
                    raise ValueError(
                        f"Cell ({r},{c}) gold must be a non-negative integer, got {cell.gold!r}"
                    )
                if cell.is_rock and cell.gold != 0:
                    raise ValueError(f"Rock cell ({r},{c}) cannot carry gold")

    @classmethod
    def from_2d_list(cls, values: Sequence[Sequence[Any]]) -> 'Grid':
        """
        Create a Grid from a 2D list.

        Each value is None or "X" for rock, an int for an open cell with
        that much gold (0 allowed), or an existing Cell.

        Args:
            values: 2D list of cell values

        Returns:
            Grid instance

        Raises:
            ValueError: If the list is empty, ragged or holds negative gold
        """
        return cls(cells=tuple(
            tuple(_to_cell(value) for value in row) for row in values
        ))

    @property
    def rows(self) -> int:
        """Get number of rows in grid."""
        return len(self.cells)

    @property
    def columns(self) -> int:
        """Get number of columns in grid."""
        return len(self.cells[0])

    @property
    def max_path_length(self) -> int:
        """Longest possible right/down path, in steps."""
        return self.rows + self.columns - 2

    def get(self, row: int, col: int) -> Cell:
        """
        Get cell at an in-bounds position.

        No bounds checking is done here; Path validates coordinates
        before querying.
        """
        return self.cells[row][col]

    def is_rock(self, row: int, col: int) -> bool:
        return self.cells[row][col].is_rock

    def gold_at(self, row: int, col: int) -> int:
        return self.cells[row][col].gold

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def total_gold(self) -> int:
        """Sum of gold over every open cell."""
        return sum(cell.gold for row in self.cells for cell in row)

    def count_rocks(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.is_rock)

    def to_list(self) -> List[List[Optional[int]]]:
        """
        Convert to mutable 2D list representation.

        Returns:
            2D list with None for rock and gold value for open cells
        """
        return [
            [None if cell.is_rock else cell.gold for cell in row]
            for row in self.cells
        ]


def _to_cell(value: Any) -> Cell:
    """Convert a from_2d_list value into a Cell."""
    if isinstance(value, Cell):
        return value
    if value in ROCK_MARKERS:
        return Cell.ROCK
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Unsupported cell value: {value!r}")
    return Cell.open(value)
