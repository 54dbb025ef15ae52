"""Line intersection and half-plane clipping for motif strokes.

Both functions return ``None`` for degenerate cases (parallel lines, segments
wholly outside the kept side) so callers can drop that one stroke.
"""

from __future__ import annotations

from typing import Literal

from kumiko.engine.geometry import ClipBoundary, Point

# Cross-product denominator below this is treated as parallel.
PARALLEL_EPS = 1e-10


def line_segment_intersection(
    line_p1: Point,
    line_p2: Point,
    seg_p1: Point,
    seg_p2: Point,
) -> Point | None:
    """Intersect the infinite line through line_p1/line_p2 with segment seg_p1-seg_p2.

    Returns the hit only when it lies within the segment parameter range [0, 1].
    """
    x1, y1 = line_p1
    x2, y2 = line_p2
    x3, y3 = seg_p1
    x4, y4 = seg_p2

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < PARALLEL_EPS:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    if 0.0 <= u <= 1.0:
        return Point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))
    return None


def clip_segment_to_halfplane(
    p1: Point,
    p2: Point,
    cut_x: float,
    keep: Literal["left", "right"],
) -> tuple[Point, Point] | None:
    """Return the part of segment p1-p2 on the ``keep`` side of x = cut_x.

    Points exactly on the cut count as inside. A straddling segment has its
    outside endpoint replaced by the crossing point, whose x is exactly cut_x.
    """
    boundary = ClipBoundary(x=cut_x, keep=keep)
    keep1 = boundary.contains(p1)
    keep2 = boundary.contains(p2)

    if keep1 and keep2:
        return (p1, p2)
    if not keep1 and not keep2:
        return None

    dx = p2.x - p1.x
    if abs(dx) < PARALLEL_EPS:
        return None

    t = (cut_x - p1.x) / dx
    crossing = Point(cut_x, p1.y + t * (p2.y - p1.y))
    if keep1:
        return (p1, crossing)
    return (crossing, p2)


def clip_to_boundary(
    p1: Point,
    p2: Point,
    boundary: ClipBoundary | None,
) -> tuple[Point, Point] | None:
    """Clip against an optional cell boundary; no boundary keeps the segment whole."""
    if boundary is None:
        return (p1, p2)
    return clip_segment_to_halfplane(p1, p2, boundary.x, boundary.keep)
