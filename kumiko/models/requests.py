"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from kumiko.engine.config import KumikoConfig, MotifBinding


class RenderRequest(BaseModel):
    grid: list[str] | None = Field(
        default=None,
        description="Grid rows, '|' for seams and whitespace between motif symbols",
    )
    content: str | None = Field(default=None, description="Raw grid content to decode")
    format: Literal["txt", "csv", "json"] = Field(
        default="txt", description="Format of `content`"
    )
    config: KumikoConfig | None = Field(
        default=None, description="Render settings (service defaults when omitted)"
    )
    motifs: dict[str, MotifBinding] | None = Field(
        default=None,
        description="Character -> motif bindings, replacing the built-in table",
    )
    repeat_x: int = Field(default=1, ge=1, description="Horizontal pattern repetitions")
    repeat_y: int = Field(default=1, ge=1, description="Vertical pattern repetitions")
    title: str = Field(default="", description="Optional SVG <title>")

    @model_validator(mode="after")
    def _one_grid_source(self) -> RenderRequest:
        if (self.grid is None) == (self.content is None):
            raise ValueError("Provide exactly one of 'grid' or 'content'")
        return self
