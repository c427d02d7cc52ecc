"""
Test script for path rendering and settings persistence.

Usage:
    python test_render.py
    pytest tests/
"""

import json
import sys
from pathlib import Path as FilePath

import pytest
from PIL import Image

# Add project root to path
sys.path.insert(0, str(FilePath(__file__).parent.parent))

from src.render import HEADER_HEIGHT, format_path, render_path_image, save_path_image
from src.settings import DEFAULT_SETTINGS, load_settings, save_settings
from src.solver import Grid, solve_dynamic_programming

X = None


def test_format_path_marks_visited_cells():
    grid = Grid.from_2d_list([
        [0, 3, X],
        [5, 0, 2],
    ])
    path = solve_dynamic_programming(grid)
    text = format_path(grid, path)
    print(text)

    lines = text.splitlines()
    # down, right, right: 0 + 5 + 0 + 2
    assert lines[0] == "S 3 X"
    assert lines[1] == "* * *"
    assert lines[2] == "Steps (3): start -> down -> right -> right"
    assert lines[3] == "Total gold: 7"


def test_format_path_pads_wide_values():
    grid = Grid.from_2d_list([[0, 12], [X, 3]])
    text = format_path(grid, solve_dynamic_programming(grid))
    assert text.splitlines()[:2] == [" S  *", " X  *"]


def test_format_infeasible():
    grid = Grid.from_2d_list([[X, 4]])
    text = format_path(grid, None)
    assert text.splitlines() == ["X 4", "No path: start cell is rock"]


def test_render_image_size():
    grid = Grid.from_2d_list([[0, 3, X], [5, 0, 2]])
    img = render_path_image(grid, solve_dynamic_programming(grid), cell_size=20)
    assert isinstance(img, Image.Image)
    assert img.size == (3 * 20 + 1, 2 * 20 + HEADER_HEIGHT + 1)


def test_save_path_image(tmp_path):
    grid = Grid.from_2d_list([[1, 2], [3, 4]])
    out = tmp_path / "out" / "path.png"
    save_path_image(grid, solve_dynamic_programming(grid), out)
    assert out.exists()
    with Image.open(out) as img:
        assert img.format == "PNG"

    infeasible = tmp_path / "none.png"
    save_path_image(Grid.from_2d_list([[X]]), None, infeasible)
    assert infeasible.exists()


def test_settings_defaults_when_missing(tmp_path):
    settings = load_settings(tmp_path / "config.json")
    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_settings_merge_and_save(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"strategy_name": "exhaustive"}), encoding="utf-8")

    settings = load_settings(config)
    assert settings["strategy_name"] == "exhaustive"
    assert settings["max_gold"] == DEFAULT_SETTINGS["max_gold"]

    settings["max_gold"] = 4
    save_settings(settings, config)
    assert load_settings(config)["max_gold"] == 4


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_settings_invalid_file(tmp_path, content):
    config = tmp_path / "config.json"
    config.write_text(content, encoding="utf-8")
    assert load_settings(config) == DEFAULT_SETTINGS


def test_settings_wrong_types_fall_back(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({
        "rock_probability": "high",
        "max_gold": True,
        "debug_enabled": 1,
        "gold_probability": 1,
        "strategy_name": "exhaustive",
        "extra_key": [1, 2],
    }), encoding="utf-8")

    settings = load_settings(config)
    assert settings["rock_probability"] == DEFAULT_SETTINGS["rock_probability"]
    assert settings["max_gold"] == DEFAULT_SETTINGS["max_gold"]
    assert settings["debug_enabled"] == DEFAULT_SETTINGS["debug_enabled"]
    # Whole numbers are fine where a float is expected
    assert settings["gold_probability"] == 1
    assert settings["strategy_name"] == "exhaustive"
    assert settings["extra_key"] == [1, 2]


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-q"]))
