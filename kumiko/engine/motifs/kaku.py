"""Kaku-asanoha (angular hemp leaf): outline, inner outline and bridges."""

from __future__ import annotations

from pydantic import Field

from kumiko.engine.geometry import TriangleGeometry, lerp, line_path, triangle_path
from kumiko.engine.motifs.base import MotifOptions, MotifRenderer, MotifRenderResult, base_result
from kumiko.engine.motifs.registry import MotifType, motif


class KakuOptions(MotifOptions):
    # fraction of the centre-to-vertex distance kept by the inner triangle
    ratio: float = Field(default=0.65, ge=0, le=1)


@motif(MotifType.KAKU, name="Kaku-Asanoha (Angular Hemp Leaf)", options=KakuOptions)
def create_kaku(options: KakuOptions) -> MotifRenderer:
    def render(geom: TriangleGeometry) -> MotifRenderResult:
        outer = geom.vertices
        center = geom.center
        inner = [lerp(center, p, options.ratio) for p in outer]

        skeleton = [triangle_path(*outer), triangle_path(*inner)]
        skeleton.extend(line_path(p, ip) for p, ip in zip(outer, inner))

        return base_result(
            options,
            skeleton=skeleton,
            leaves=[line_path(center, ip) for ip in inner],
        )

    return render
