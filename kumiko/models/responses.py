"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    motifs_registered: int = 0


class MotifInfo(BaseModel):
    id: str
    name: str


class MotifListResponse(BaseModel):
    motifs: list[MotifInfo] = Field(default_factory=list)
    default_characters: dict[str, str] = Field(default_factory=dict)


class StrokeGroupModel(BaseModel):
    style_id: str
    color: str
    thickness: float
    paths: list[str] = Field(default_factory=list)


class LeafGroupModel(StrokeGroupModel):
    clip_id: str = "none"


class ClipRegionModel(BaseModel):
    clip_id: str
    path: str


class RenderResponse(BaseModel):
    svg: str
    canvas_width: float
    canvas_height: float
    cell_count: int = 0
    skeleton_groups: list[StrokeGroupModel] = Field(default_factory=list)
    leaf_groups: list[LeafGroupModel] = Field(default_factory=list)
    clip_regions: list[ClipRegionModel] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class ErrorResponse(BaseModel):
    error: str
    detail: str
