"""Asanoha (hemp leaf): outline plus three centre-to-vertex leaves."""

from __future__ import annotations

from kumiko.engine.geometry import TriangleGeometry, line_path, triangle_path
from kumiko.engine.motifs.base import MotifOptions, MotifRenderer, MotifRenderResult, base_result
from kumiko.engine.motifs.registry import MotifType, motif


@motif(MotifType.ASANOHA, name="Asanoha (Hemp Leaf)")
def create_asanoha(options: MotifOptions) -> MotifRenderer:
    def render(geom: TriangleGeometry) -> MotifRenderResult:
        p1, p2, p3, center = geom.p1, geom.p2, geom.p3, geom.center
        return base_result(
            options,
            skeleton=[triangle_path(p1, p2, p3)],
            leaves=[line_path(center, p) for p in (p1, p2, p3)],
        )

    return render
