"""Grid decoder: text, CSV and JSON grid content -> row strings.

The caller names the format; nothing here reads files or guesses formats.

Plain text, one row per line, ``#`` starts a comment line:
    K | k | k | K
    A A | G G | A A

CSV, one row per line, commas become seams:
    K,k,k,K
    A A,G G,A A

JSON, either a bare array or an object with a ``grid`` array:
    {"grid": ["K | k | k | K", "A A | G G | A A"]}
"""

from __future__ import annotations

import json
import logging
from typing import Literal

from kumiko.engine.errors import MalformedGrid
from kumiko.engine.layout import split_row

logger = logging.getLogger(__name__)

GridFormat = Literal["txt", "csv", "json"]
SUPPORTED_FORMATS: tuple[str, ...] = ("txt", "csv", "json")


def parse_grid(content: str, fmt: GridFormat = "txt") -> list[str]:
    """Decode grid ``content`` in the given format into row strings.

    Raises:
        MalformedGrid: unsupported format, empty content, or no row with a
            motif symbol.
    """
    if fmt not in SUPPORTED_FORMATS:
        raise MalformedGrid(
            f"Unsupported grid format: {fmt!r}. Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
    if not content.strip():
        raise MalformedGrid("Grid content is empty")

    if fmt == "json":
        rows = _parse_json(content)
    elif fmt == "csv":
        rows = _parse_csv(content)
    else:
        rows = _parse_text(content)

    validate_rows(rows)
    logger.debug("Decoded %d grid rows (%s)", len(rows), fmt)
    return rows


def validate_rows(rows: list[str]) -> list[str]:
    """Reject a grid in which no row holds a single motif symbol.

    Rows made only of seams or whitespace are allowed next to real rows;
    they still take up a row of height when rendered.
    """
    if not any(split_row(row) for row in rows):
        raise MalformedGrid("Grid has no motif symbols (every row is empty or only seams)")
    return rows


def _content_lines(content: str) -> list[str]:
    lines = (line.strip() for line in content.splitlines())
    return [line for line in lines if line and not line.startswith("#")]


def _parse_text(content: str) -> list[str]:
    rows = _content_lines(content)
    if not rows:
        raise MalformedGrid("No valid pattern lines found (all lines are empty or comments)")
    return rows


def _parse_csv(content: str) -> list[str]:
    rows = [" | ".join(cell.strip() for cell in line.split(",")) for line in _content_lines(content)]
    if not rows:
        raise MalformedGrid(
            "No valid pattern lines found in CSV content (all lines are empty or comments)"
        )
    return rows


def _parse_json(content: str) -> list[str]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedGrid(f"Invalid JSON format: {e}") from e

    if isinstance(data, list):
        grid, where = data, "JSON array"
    elif isinstance(data, dict) and "grid" in data:
        grid, where = data["grid"], "'grid' array"
        if not isinstance(grid, list):
            raise MalformedGrid("'grid' property must be an array")
    else:
        raise MalformedGrid("Invalid JSON format. Expected array or object with 'grid' property")

    if not grid:
        raise MalformedGrid(f"{where} is empty")
    if not all(isinstance(row, str) for row in grid):
        raise MalformedGrid(f"{where} must contain only strings")
    return list(grid)


def repeat_pattern(grid: list[str], repeat_x: int = 1, repeat_y: int = 1) -> list[str]:
    """Tile ``grid`` ``repeat_x`` times across and ``repeat_y`` times down.

    Horizontal copies are joined with a space, not a seam, so they continue
    the row's last segment.
    """
    if repeat_x < 1 or repeat_y < 1:
        raise MalformedGrid("repeat_x and repeat_y must be at least 1")
    if repeat_x == 1 and repeat_y == 1:
        return list(grid)

    rows = [" ".join([row] * repeat_x) for row in grid]
    return rows * repeat_y
