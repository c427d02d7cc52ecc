"""
Path Module - Right/down walk over a grid with running gold total.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .grid import Grid


class Direction(Enum):
    """Single step of a path."""
    RIGHT = "right"
    DOWN = "down"

    @property
    def offset(self) -> Tuple[int, int]:
        """(row, col) delta for this step."""
        if self is Direction.RIGHT:
            return (0, 1)
        return (1, 0)


class InvalidStepError(ValueError):
    """Raised when a step would leave the grid or land on rock."""


class Path:
    """
    Ordered sequence of steps starting at cell (0,0) of a grid.

    The grid is shared, not copied. Position and gold are maintained
    incrementally as steps are appended, so copying a path is cheap
    (bounded by rows + columns - 2 steps).

    Attributes:
        grid: Grid this path walks over
    """

    def __init__(self, grid: Grid):
        """
        Create the zero-step path at the start cell.

        Args:
            grid: Grid to walk over

        Raises:
            ValueError: If the start cell is rock
        """
        if grid.is_rock(0, 0):
            raise ValueError("Path cannot start on a rock cell")
        self.grid = grid
        self._steps: List[Direction] = []
        self._row = 0
        self._col = 0
        self._gold = grid.gold_at(0, 0)

    @classmethod
    def from_steps(cls, grid: Grid, steps: Iterable[Direction]) -> 'Path':
        """
        Build a path by replaying steps from the start.

        Raises:
            InvalidStepError: On the first step that is not valid
        """
        path = cls(grid)
        for direction in steps:
            path.add_step(direction)
        return path

    @property
    def steps(self) -> Tuple[Direction, ...]:
        return tuple(self._steps)

    @property
    def position(self) -> Tuple[int, int]:
        """Current (row, col) after replaying all steps."""
        return (self._row, self._col)

    @property
    def total_gold(self) -> int:
        """Gold collected on every visited cell, start included."""
        return self._gold

    @property
    def is_empty(self) -> bool:
        """True if no step has been taken yet."""
        return not self._steps

    @property
    def last_step(self) -> Optional[Direction]:
        """Most recent step, or None for an empty path."""
        if self._steps:
            return self._steps[-1]
        return None

    def is_step_valid(self, direction: Direction) -> bool:
        """
        Check whether a step stays in bounds and avoids rock.

        Args:
            direction: Step to test

        Returns:
            True if add_step(direction) would succeed
        """
        dr, dc = direction.offset
        row, col = self._row + dr, self._col + dc
        if row >= self.grid.rows or col >= self.grid.columns:
            return False
        return not self.grid.is_rock(row, col)

    def add_step(self, direction: Direction) -> None:
        """
        Append a step and collect the destination cell's gold.

        Raises:
            InvalidStepError: If the step is not valid; the path is unchanged
        """
        if not self.is_step_valid(direction):
            raise InvalidStepError(
                f"Cannot move {direction.value} from {self.position}"
            )
        dr, dc = direction.offset
        self._row += dr
        self._col += dc
        self._steps.append(direction)
        self._gold += self.grid.gold_at(self._row, self._col)

    def copy(self) -> 'Path':
        """Copy steps and totals; the grid stays shared."""
        clone = Path.__new__(Path)
        clone.grid = self.grid
        clone._steps = list(self._steps)
        clone._row = self._row
        clone._col = self._col
        clone._gold = self._gold
        return clone

    def extended(self, direction: Direction) -> 'Path':
        """Return a copy with one more step appended."""
        clone = self.copy()
        clone.add_step(direction)
        return clone

    def better_than(self, other: 'Path') -> bool:
        """True if this path collects strictly more gold than other."""
        return self._gold > other._gold

    def cells(self) -> List[Tuple[int, int]]:
        """
        Visited cells in order, start included.

        Returns:
            List of (row, col) tuples, len(self) + 1 entries
        """
        row, col = 0, 0
        visited = [(row, col)]
        for direction in self._steps:
            dr, dc = direction.offset
            row += dr
            col += dc
            visited.append((row, col))
        return visited

    def describe(self) -> str:
        """Compact text form, e.g. 'start -> right -> down'."""
        return " -> ".join(["start"] + [d.value for d in self._steps])

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"Path(steps={len(self._steps)}, end={self.position}, gold={self._gold})"
