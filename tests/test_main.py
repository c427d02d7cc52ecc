"""
Test script for the command line entry point.

Usage:
    pytest tests/test_main.py
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main as cli


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run each CLI test in an empty directory (config.json, solver.log)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_grid(directory: Path, text: str) -> str:
    grid_file = directory / "grid.txt"
    grid_file.write_text(text, encoding="utf-8")
    return str(grid_file)


def test_parse_dimensions():
    assert cli.parse_dimensions("4x6") == (4, 6)
    assert cli.parse_dimensions("3X2") == (3, 2)
    for bad in ["4", "4x", "0x3", "axb", "1x2x3"]:
        with pytest.raises(Exception):
            cli.parse_dimensions(bad)


def test_solve_grid_file(workdir, capsys):
    grid_file = write_grid(workdir, ". 3\n5 .\n")
    assert cli.main(["--grid", grid_file]) == cli.EXIT_OK

    out = capsys.readouterr().out
    assert "Total gold: 5" in out


def test_solve_with_exhaustive(workdir, capsys):
    grid_file = write_grid(workdir, ". 3\n5 .\n")
    assert cli.main(["--grid", grid_file, "--strategy", "exhaustive"]) == cli.EXIT_OK
    assert "Total gold: 5" in capsys.readouterr().out


def test_compare_random(workdir, capsys):
    code = cli.main(["--random", "4x4", "--seed", "7", "--compare"])
    assert code == cli.EXIT_OK

    out = capsys.readouterr().out
    assert "exhaustive: gold=" in out
    assert "dynamic_programming: gold=" in out


def test_blocked_start(workdir, capsys):
    grid_file = write_grid(workdir, "X 3\n5 .\n")
    assert cli.main(["--grid", grid_file]) == cli.EXIT_OK
    assert "No path" in capsys.readouterr().out


def test_bad_grid_file(workdir):
    grid_file = write_grid(workdir, ". 3\n5\n")
    assert cli.main(["--grid", grid_file]) == cli.EXIT_BAD_INPUT
    assert cli.main(["--grid", str(workdir / "missing.txt")]) == cli.EXIT_BAD_INPUT


def test_exhaustive_too_large(workdir):
    grid_file = write_grid(workdir, " ".join(["."] * 65) + "\n")
    assert cli.main(["--grid", grid_file, "--strategy", "exhaustive"]) == cli.EXIT_BAD_INPUT


def test_exhaustive_refused_above_size_limit(workdir):
    (workdir / "config.json").write_text(
        json.dumps({"exhaustive_size_limit": 4}), encoding="utf-8"
    )
    code = cli.main(["--random", "4x4", "--seed", "1", "--strategy", "exhaustive"])
    assert code == cli.EXIT_BAD_INPUT

    # Dynamic programming has no size limit
    assert cli.main(["--random", "4x4", "--seed", "1"]) == cli.EXIT_OK


def test_bad_config_value_uses_default(workdir, capsys):
    (workdir / "config.json").write_text(
        json.dumps({"rock_probability": "high"}), encoding="utf-8"
    )
    assert cli.main(["--random", "3x3", "--seed", "2"]) == cli.EXIT_OK
    assert "Total gold:" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["--random", "3x3", "--compare", "--strategy", "exhaustive"],
    ["--random", "3x3", "--remember"],
])
def test_conflicting_flags_are_usage_errors(workdir, argv):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    assert excinfo.value.code == 2
    assert not (workdir / "config.json").exists()


def test_image_output(workdir):
    grid_file = write_grid(workdir, ". 3\n5 .\n")
    image = workdir / "out" / "path.png"
    assert cli.main(["--grid", grid_file, "--image", str(image)]) == cli.EXIT_OK
    assert image.exists()


def test_remember_strategy(workdir):
    grid_file = write_grid(workdir, ". 1\n")
    cli.main(["--grid", grid_file, "--strategy", "exhaustive", "--remember"])

    saved = json.loads((workdir / "config.json").read_text(encoding="utf-8"))
    assert saved["strategy_name"] == "exhaustive"


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-q"]))
