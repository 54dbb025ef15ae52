"""Blank: draws nothing but still occupies its grid cell."""

from __future__ import annotations

from kumiko.engine.geometry import TriangleGeometry
from kumiko.engine.motifs.base import MotifOptions, MotifRenderer, MotifRenderResult, base_result
from kumiko.engine.motifs.registry import MotifType, motif


@motif(MotifType.BLANK, name="Blank")
def create_blank(options: MotifOptions) -> MotifRenderer:
    def render(geom: TriangleGeometry) -> MotifRenderResult:
        return base_result(options)

    return render
