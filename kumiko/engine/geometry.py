"""Vertex geometry for triangular grid cells.

Every cell is described by its visible triangle (p1, p2, p3, center) and by
the full equilateral triangle it logically belongs to. For FULL cells the two
are identical. Half cells sit on a segment seam: the visible part is a right
triangle with its right angle on the cut line, and ``full`` is the equilateral
triangle whose symmetry axis lies on that line.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Literal, NamedTuple

import numpy as np

from kumiko.engine.errors import InvalidGeometry

SQRT3_2 = math.sqrt(3) / 2


class Point(NamedTuple):
    x: float
    y: float


class Shape(str, enum.Enum):
    FULL = "FULL"
    HALF_LEFT = "HALF_LEFT"
    HALF_RIGHT = "HALF_RIGHT"


class Orientation(str, enum.Enum):
    UP = "UP"
    DOWN = "DOWN"

    @property
    def opposite(self) -> Orientation:
        return Orientation.DOWN if self is Orientation.UP else Orientation.UP


@dataclass(frozen=True)
class ClipBoundary:
    """Vertical cut line at ``x``; ``keep`` names the visible side."""

    x: float
    keep: Literal["left", "right"]

    def contains(self, p: Point) -> bool:
        return p.x <= self.x if self.keep == "left" else p.x >= self.x


@dataclass(frozen=True)
class Triangle:
    p1: Point
    p2: Point
    p3: Point
    center: Point

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        return (self.p1, self.p2, self.p3)


@dataclass(frozen=True)
class TriangleGeometry:
    """Visible cell triangle plus the full motif triangle it derives from."""

    p1: Point
    p2: Point
    p3: Point
    center: Point
    full: Triangle
    part_shape: Shape = Shape.FULL
    clip_boundary: ClipBoundary | None = None

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        return (self.p1, self.p2, self.p3)

    @property
    def is_half(self) -> bool:
        return self.part_shape is not Shape.FULL


def triangle_height(side_length: float) -> float:
    return side_length * SQRT3_2


def _full_triangle(orientation: Orientation, x: float, y: float, s: float) -> Triangle:
    h = triangle_height(s)
    if orientation is Orientation.UP:
        return Triangle(
            Point(x + s / 2, y),
            Point(x, y + h),
            Point(x + s, y + h),
            Point(x + s / 2, y + (2 / 3) * h),
        )
    return Triangle(
        Point(x, y),
        Point(x + s, y),
        Point(x + s / 2, y + h),
        Point(x + s / 2, y + (1 / 3) * h),
    )


def calculate_triangle(
    shape: Shape,
    orientation: Orientation,
    x: float,
    y: float,
    side_length: float,
) -> TriangleGeometry:
    """Compute the geometry of one grid cell anchored at (x, y).

    For half shapes ``orientation`` is the orientation of the full triangle
    the half belongs to. HALF_LEFT keeps the part right of the seam at ``x``;
    HALF_RIGHT keeps the part left of the seam at ``x + side_length / 2``.

    Raises:
        InvalidGeometry: if ``side_length`` is not positive.
    """
    if not side_length > 0:
        raise InvalidGeometry(side_length)

    s = side_length
    h = triangle_height(s)
    shape = Shape(shape)
    orientation = Orientation(orientation)

    if shape is Shape.FULL:
        full = _full_triangle(orientation, x, y, s)
        return TriangleGeometry(
            p1=full.p1,
            p2=full.p2,
            p3=full.p3,
            center=full.center,
            full=full,
            part_shape=shape,
        )

    if shape is Shape.HALF_LEFT:
        seam = x
        full = _full_triangle(orientation, x - s / 2, y, s)
        boundary = ClipBoundary(x=seam, keep="right")
        if orientation is Orientation.UP:
            p1, p2, p3 = Point(x, y), Point(x, y + h), Point(x + s / 2, y + h)
        else:
            p1, p2, p3 = Point(x, y), Point(x + s / 2, y), Point(x, y + h)
    else:
        seam = x + s / 2
        full = _full_triangle(orientation, x, y, s)
        boundary = ClipBoundary(x=seam, keep="left")
        if orientation is Orientation.UP:
            p1, p2, p3 = Point(x + s / 2, y), Point(x, y + h), Point(x + s / 2, y + h)
        else:
            p1, p2, p3 = Point(x, y), Point(x + s / 2, y), Point(x + s / 2, y + h)

    # half-cell centre is the mean of the visible vertices
    cx, cy = np.mean(np.array([p1, p2, p3], dtype=np.float64), axis=0)
    return TriangleGeometry(
        p1=p1,
        p2=p2,
        p3=p3,
        center=Point(float(cx), float(cy)),
        full=full,
        part_shape=shape,
        clip_boundary=boundary,
    )


def lerp(a: Point, b: Point, ratio: float) -> Point:
    """Linear interpolation from ``a`` (ratio 0) to ``b`` (ratio 1)."""
    return Point(a.x + (b.x - a.x) * ratio, a.y + (b.y - a.y) * ratio)


def fmt_num(value: float) -> str:
    """Shortest float text; integral values lose their trailing ``.0``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def line_path(start: Point, end: Point) -> str:
    return f"M {fmt_num(start.x)},{fmt_num(start.y)} L {fmt_num(end.x)},{fmt_num(end.y)}"


def triangle_path(p1: Point, p2: Point, p3: Point) -> str:
    return (
        f"M {fmt_num(p1.x)},{fmt_num(p1.y)} "
        f"L {fmt_num(p2.x)},{fmt_num(p2.y)} "
        f"L {fmt_num(p3.x)},{fmt_num(p3.y)} Z"
    )
