"""Shared test fixtures."""

from __future__ import annotations

import re

import numpy as np
import pytest

from kumiko.engine.geometry import Point


# Sample grids

WALLED_GRID = ["K | k"]

RUN_GRID = ["A A"]

SAMPLER_GRID = [
    "K | k | k | K",
    "A A | G G | A A",
    "S B S",
]

SAMPLER_TXT = """# sampler
K | k | k | K
A A | G G | A A

S B S
"""

SAMPLER_CSV = """K,k,k,K
A A,G G,A A
# trailing comment
S B S
"""

SAMPLER_JSON = '{"grid": ["K | k | k | K", "A A | G G | A A", "S B S"]}'

_NUMBER = re.compile(r"-?\d+(?:\.\d+)?(?:e[-+]?\d+)?")


def path_points(path: str) -> list[Point]:
    """Coordinates of every M/L command in a path string."""
    values = [float(v) for v in _NUMBER.findall(path)]
    return [Point(x, y) for x, y in zip(values[::2], values[1::2])]


def ring(points) -> np.ndarray:
    return np.array(points, dtype=np.float64)


def ring_area(points) -> float:
    """Unsigned shoelace area of a closed vertex ring."""
    xy = ring(points)
    x, y = xy[:, 0], xy[:, 1]
    return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2)


def ring_sides(points) -> np.ndarray:
    xy = ring(points)
    return np.linalg.norm(np.roll(xy, -1, axis=0) - xy, axis=1)


@pytest.fixture
def config() -> dict:
    return {"sideLength": 100}


@pytest.fixture
def sampler_grid() -> list[str]:
    return list(SAMPLER_GRID)
