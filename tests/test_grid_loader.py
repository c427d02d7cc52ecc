"""
Test script for grid file parsing and random grid generation.

Usage:
    python test_grid_loader.py
    pytest tests/
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.grid_loader import (
    GridFormatError,
    format_grid_text,
    load_grid,
    parse_grid,
    random_grid,
    save_grid,
)
from src.solver import Grid


SAMPLE = """
# sample grid
. 3 X
5 . 12

"""


def test_parse_sample():
    grid = parse_grid(SAMPLE)
    print(f"  Parsed grid: {grid.rows}x{grid.columns}")
    assert grid.to_list() == [[0, 3, None], [5, 0, 12]]


def test_parse_lowercase_rock_and_zero():
    grid = parse_grid("0 x\n1 2\n")
    assert grid.to_list() == [[0, None], [1, 2]]


def test_format_then_parse_gives_same_grid():
    grid = Grid.from_2d_list([[0, 3, None], [5, 0, 12]])
    text = format_grid_text(grid)
    assert text == ". 3 X\n5 . 12\n"
    assert parse_grid(text) == grid


@pytest.mark.parametrize("text, line", [
    (". 3\n5\n", 2),
    (". gold\n", 1),
    ("# header\n. -4\n", 2),
])
def test_parse_errors_report_line(text, line):
    with pytest.raises(GridFormatError) as excinfo:
        parse_grid(text)
    assert excinfo.value.line_number == line
    assert f"line {line}" in str(excinfo.value)


def test_parse_empty_document():
    with pytest.raises(GridFormatError):
        parse_grid("# nothing here\n\n")
    # GridFormatError is a ValueError, so callers can catch either
    with pytest.raises(ValueError):
        parse_grid("")


def test_save_and_load(tmp_path):
    grid = random_grid(5, 7, seed=9)
    grid_file = tmp_path / "grid.txt"
    save_grid(grid, grid_file)
    assert load_grid(grid_file) == grid


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_grid(tmp_path / "missing.txt")


def test_random_grid_is_seeded():
    a = random_grid(6, 4, seed=123)
    b = random_grid(6, 4, seed=123)
    assert a == b
    assert a.rows == 6
    assert a.columns == 4


def test_random_grid_start_is_open_and_empty():
    for seed in range(20):
        grid = random_grid(3, 3, seed=seed, rock_probability=1.0, gold_probability=1.0)
        assert not grid.is_rock(0, 0)
        assert grid.gold_at(0, 0) == 0


def test_random_grid_probabilities():
    no_rock = random_grid(10, 10, seed=1, rock_probability=0.0, gold_probability=1.0, max_gold=3)
    assert no_rock.count_rocks() == 0
    values = [v for row in no_rock.to_list() for v in row][1:]
    assert all(1 <= v <= 3 for v in values)

    all_rock = random_grid(4, 4, seed=1, rock_probability=1.0)
    assert all_rock.count_rocks() == 15


@pytest.mark.parametrize("kwargs", [
    {"rows": 0, "columns": 3},
    {"rows": 3, "columns": -1},
    {"rows": 2, "columns": 2, "rock_probability": 1.5},
    {"rows": 2, "columns": 2, "gold_probability": -0.1},
    {"rows": 2, "columns": 2, "max_gold": 0},
])
def test_random_grid_rejects_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        random_grid(**kwargs)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-q"]))
