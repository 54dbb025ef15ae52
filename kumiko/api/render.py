"""POST /api/render: grid rows or grid content in, kumiko SVG out."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter

from kumiko.config import settings
from kumiko.engine import ColorConfig, KumikoConfig, RenderResult, render
from kumiko.grid.decoder import parse_grid, repeat_pattern, validate_rows
from kumiko.models.requests import RenderRequest
from kumiko.models.responses import (
    ClipRegionModel,
    LeafGroupModel,
    RenderResponse,
    StrokeGroupModel,
)
from kumiko.svg.serializer import serialize_svg

router = APIRouter()
logger = logging.getLogger(__name__)


def _default_config() -> KumikoConfig:
    return KumikoConfig(
        side_length=settings.default_side_length,
        colors=ColorConfig(
            skeleton=settings.default_skeleton_color,
            leaf=settings.default_leaf_color,
            background=settings.default_background_color,
        ),
    )


def _merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _request_config(config: KumikoConfig | None) -> KumikoConfig:
    """Fields the request sets, laid over the service defaults."""
    defaults = _default_config()
    if config is None:
        return defaults
    merged = _merge(defaults.model_dump(), config.model_dump(exclude_unset=True))
    return KumikoConfig.model_validate(merged)


def _to_response(result: RenderResult, svg: str, elapsed_ms: float) -> RenderResponse:
    return RenderResponse(
        svg=svg,
        canvas_width=result.canvas_width,
        canvas_height=result.canvas_height,
        cell_count=len(result.cells),
        skeleton_groups=[
            StrokeGroupModel(
                style_id=g.style_id, color=g.color, thickness=g.thickness, paths=list(g.paths)
            )
            for g in result.skeleton_groups
        ],
        leaf_groups=[
            LeafGroupModel(
                style_id=g.style_id,
                clip_id=g.clip_id,
                color=g.color,
                thickness=g.thickness,
                paths=list(g.paths),
            )
            for g in result.leaf_groups
        ],
        clip_regions=[ClipRegionModel(clip_id=c.clip_id, path=c.path) for c in result.clip_regions],
        processing_time_ms=round(elapsed_ms, 2),
    )


@router.post("/render", response_model=RenderResponse)
def render_grid(req: RenderRequest) -> RenderResponse:
    start = time.perf_counter()

    if req.grid is not None:
        grid = validate_rows(req.grid)
    else:
        grid = parse_grid(req.content or "", req.format)
    grid = repeat_pattern(grid, req.repeat_x, req.repeat_y)
    config = _request_config(req.config)

    result = render(grid, config, req.motifs)
    svg = serialize_svg(result, background=config.colors.background, title=req.title)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Rendered %d rows into %d cells in %.0fms", len(grid), len(result.cells), elapsed)
    return _to_response(result, svg, elapsed)
