"""Sakura (cherry blossom): thin stamens plus thick petal chords.

Stamens run from the centre toward each vertex of the full triangle. Petals
are goma-style chords, but their inner points are pushed beyond the centre
away from each vertex, which widens the chords. Petals carry their own
colour and thickness. Every leaf is clipped to the visible half.
"""

from __future__ import annotations

from pydantic import Field

from kumiko.engine.clipping import clip_to_boundary
from kumiko.engine.config import Color
from kumiko.engine.geometry import Point, TriangleGeometry, lerp, line_path, triangle_path
from kumiko.engine.motifs.base import (
    LeafPath,
    MotifOptions,
    MotifRenderer,
    MotifRenderResult,
    StyledPath,
    base_result,
)
from kumiko.engine.motifs.goma import inset_chords
from kumiko.engine.motifs.registry import MotifType, motif
from kumiko.engine.style import StyleSpec


class SakuraOptions(MotifOptions):
    inset: float = Field(default=0.3, ge=0, le=1)
    flower_thickness: float = Field(default=2.0, ge=0)
    flower_color: Color = "#FFB7C5"


@motif(MotifType.SAKURA, name="Sakura (Cherry Blossom)", options=SakuraOptions)
def create_sakura(options: SakuraOptions) -> MotifRenderer:
    reach = 1 - options.inset
    petal_style = StyleSpec(color=options.flower_color, thickness=options.flower_thickness * 2)

    def render(geom: TriangleGeometry) -> MotifRenderResult:
        full = geom.full
        center = full.center
        leaves: list[LeafPath] = []

        def add(start: Point, end: Point, style: StyleSpec | None = None) -> None:
            clipped = clip_to_boundary(start, end, geom.clip_boundary)
            if clipped is None:
                return
            path = line_path(*clipped)
            leaves.append(path if style is None else StyledPath(path, style))

        for p in full.vertices:
            add(center, lerp(center, p, reach))

        petal_points = tuple(lerp(center, p, -reach * 2) for p in full.vertices)
        for start, end in inset_chords(full, petal_points):
            add(start, end, petal_style)

        return base_result(
            options,
            skeleton=[triangle_path(geom.p1, geom.p2, geom.p3)],
            leaves=leaves,
        )

    return render
