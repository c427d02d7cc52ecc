"""
Path Rendering Utilities

Text and image views of a grid with a solved path traced over it.
"""

import logging
from pathlib import Path as FilePath
from typing import Optional, Union

from PIL import Image, ImageDraw, ImageFont

from src.solver import Grid, Path

logger = logging.getLogger(__name__)

# Text markers
START_MARK = "S"
VISITED_MARK = "*"
ROCK_MARK = "X"
EMPTY_MARK = "."

# Image colors
BACKGROUND_COLOR = "#fafafa"
GRID_LINE_COLOR = "#9e9e9e"
ROCK_COLOR = "#5d4037"
VISITED_COLOR = "#c8e6c9"
GOLD_COLOR = "#b8860b"
TRACE_COLOR = "#2e7d32"
TEXT_COLOR = "#212121"

DEFAULT_CELL_SIZE = 32
HEADER_HEIGHT = 20


def format_path(grid: Grid, path: Optional[Path]) -> str:
    """
    Render a grid and path as text.

    Visited cells are marked '*' (start 'S'), rock 'X', other cells
    show their gold or '.'. The step list and gold total follow.

    Args:
        grid: Grid the path was solved on
        path: Solved path, or None if no path exists

    Returns:
        Multi-line string
    """
    visited = set(path.cells()) if path is not None else set()
    width = max(len(str(cell.gold)) for row in grid.cells for cell in row)

    lines = []
    for r, row in enumerate(grid.cells):
        tokens = []
        for c, cell in enumerate(row):
            if path is not None and (r, c) == (0, 0):
                token = START_MARK
            elif (r, c) in visited:
                token = VISITED_MARK
            elif cell.is_rock:
                token = ROCK_MARK
            elif cell.gold == 0:
                token = EMPTY_MARK
            else:
                token = str(cell.gold)
            tokens.append(token.rjust(width))
        lines.append(" ".join(tokens))

    if path is None:
        lines.append("No path: start cell is rock")
    else:
        lines.append(f"Steps ({len(path)}): {path.describe()}")
        lines.append(f"Total gold: {path.total_gold}")
    return "\n".join(lines)


def render_path_image(
    grid: Grid,
    path: Optional[Path],
    cell_size: int = DEFAULT_CELL_SIZE
) -> Image.Image:
    """
    Draw the grid and path trace onto a new image.

    Args:
        grid: Grid the path was solved on
        path: Solved path, or None if no path exists
        cell_size: Pixel size of one cell

    Returns:
        RGB PIL Image
    """
    width = grid.columns * cell_size + 1
    height = grid.rows * cell_size + HEADER_HEIGHT + 1
    img = Image.new("RGB", (width, height), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)

    try:
        font = ImageFont.truetype("arial.ttf", max(8, cell_size // 3))
    except OSError:
        font = ImageFont.load_default()

    visited = set(path.cells()) if path is not None else set()

    for r, row in enumerate(grid.cells):
        for c, cell in enumerate(row):
            x0 = c * cell_size
            y0 = HEADER_HEIGHT + r * cell_size
            box = [x0, y0, x0 + cell_size, y0 + cell_size]

            if cell.is_rock:
                fill = ROCK_COLOR
            elif (r, c) in visited:
                fill = VISITED_COLOR
            else:
                fill = BACKGROUND_COLOR
            draw.rectangle(box, fill=fill, outline=GRID_LINE_COLOR)

            if not cell.is_rock and cell.gold > 0:
                draw.text((x0 + 4, y0 + 4), str(cell.gold), fill=GOLD_COLOR, font=font)

    if path is not None:
        centers = [
            (c * cell_size + cell_size // 2, HEADER_HEIGHT + r * cell_size + cell_size // 2)
            for r, c in path.cells()
        ]
        if len(centers) > 1:
            draw.line(centers, fill=TRACE_COLOR, width=max(2, cell_size // 8))
        sx, sy = centers[0]
        radius = max(2, cell_size // 6)
        draw.ellipse([sx - radius, sy - radius, sx + radius, sy + radius], fill=TRACE_COLOR)
        summary = f"Gold: {path.total_gold}, Steps: {len(path)}"
    else:
        summary = "No path"

    draw.text((4, 4), summary, fill=TEXT_COLOR, font=font)
    return img


def save_path_image(
    grid: Grid,
    path: Optional[Path],
    out_path: Union[str, FilePath],
    cell_size: int = DEFAULT_CELL_SIZE
) -> None:
    """
    Render the path and save it as PNG.

    Args:
        grid: Grid the path was solved on
        path: Solved path, or None
        out_path: Output file path
        cell_size: Pixel size of one cell
    """
    out_path = FilePath(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    render_path_image(grid, path, cell_size).save(out_path, "PNG")
    logger.info(f"Path image saved: {out_path}")
