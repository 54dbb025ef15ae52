"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from kumiko.engine.motifs import DEFAULT_MOTIFS, get_registry
from kumiko.models.responses import HealthResponse, MotifInfo, MotifListResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        motifs_registered=get_registry().count,
    )


@router.get("/motifs", response_model=MotifListResponse)
async def motifs() -> MotifListResponse:
    return MotifListResponse(
        motifs=[MotifInfo(id=spec.id.value, name=spec.name) for spec in get_registry().all()],
        default_characters={char: binding["type"] for char, binding in DEFAULT_MOTIFS.items()},
    )
