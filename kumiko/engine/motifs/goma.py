"""Goma (sesame): three chords parallel to the outline.

An inner triangle is pulled from each vertex toward the centre by ``inset``.
Each inner edge is extended to a full line and cut by the two outer edges it
is not parallel to; the two hits form one leaf chord. The chords come from
the full motif triangle so they stay continuous across a seam, then get
clipped back to the visible half.
"""

from __future__ import annotations

from pydantic import Field

from kumiko.engine.clipping import clip_to_boundary, line_segment_intersection
from kumiko.engine.geometry import Point, Triangle, TriangleGeometry, lerp, line_path, triangle_path
from kumiko.engine.motifs.base import MotifOptions, MotifRenderer, MotifRenderResult, base_result
from kumiko.engine.motifs.registry import MotifType, motif


class GomaOptions(MotifOptions):
    inset: float = Field(default=0.3, ge=0, le=1)


def inset_chords(
    outer: Triangle,
    inner: tuple[Point, Point, Point],
) -> list[tuple[Point, Point]]:
    """Chords of ``outer`` along the extended edges of ``inner``.

    Inner edge i1-i2 runs parallel to p1-p2, so it is cut by p2-p3 and p3-p1;
    likewise for the other two edges. A chord whose line misses either outer
    edge is left out.
    """
    p1, p2, p3 = outer.vertices
    i1, i2, i3 = inner
    pairs = [
        ((i1, i2), (p2, p3), (p3, p1)),
        ((i2, i3), (p3, p1), (p1, p2)),
        ((i3, i1), (p1, p2), (p2, p3)),
    ]
    chords: list[tuple[Point, Point]] = []
    for (a, b), edge1, edge2 in pairs:
        hit1 = line_segment_intersection(a, b, *edge1)
        hit2 = line_segment_intersection(a, b, *edge2)
        if hit1 is not None and hit2 is not None:
            chords.append((hit1, hit2))
    return chords


@motif(MotifType.GOMA, name="Goma (Sesame)", options=GomaOptions)
def create_goma(options: GomaOptions) -> MotifRenderer:
    def render(geom: TriangleGeometry) -> MotifRenderResult:
        full = geom.full
        inner = tuple(lerp(p, full.center, options.inset) for p in full.vertices)

        leaves: list[str] = []
        for start, end in inset_chords(full, inner):
            clipped = clip_to_boundary(start, end, geom.clip_boundary)
            if clipped is not None:
                leaves.append(line_path(*clipped))

        outline = triangle_path(geom.p1, geom.p2, geom.p3)
        return base_result(
            options,
            skeleton=[outline],
            leaves=leaves,
            clip_path=outline if geom.is_half else None,
        )

    return render
