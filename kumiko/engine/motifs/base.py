"""Shared motif types: options models, render results and leaf paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from kumiko.engine.config import Color
from kumiko.engine.geometry import TriangleGeometry
from kumiko.engine.style import StyleSpec


class MotifOptions(BaseModel):
    """Overrides every motif accepts. Field names also accept camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    skeleton_color: Color | None = None
    leaf_color: Color | None = None
    skeleton_thickness: float | None = Field(default=None, ge=0)
    leaf_thickness: float | None = Field(default=None, ge=0)


@dataclass(frozen=True)
class StyledPath:
    path: str
    style: StyleSpec = field(default_factory=StyleSpec)


LeafPath = Union[str, StyledPath]


def normalize_leaf(leaf: LeafPath) -> StyledPath:
    """Bare path strings carry an empty style."""
    if isinstance(leaf, str):
        return StyledPath(path=leaf)
    return leaf


@dataclass
class MotifRenderResult:
    skeleton: list[str] = field(default_factory=list)
    leaves: list[LeafPath] = field(default_factory=list)
    skeleton_color: str | None = None
    leaf_color: str | None = None
    skeleton_thickness: float | None = None
    leaf_thickness: float | None = None
    # SVG path restricting paint of this cell's leaves
    clip_path: str | None = None

    @property
    def skeleton_style(self) -> StyleSpec:
        return StyleSpec(color=self.skeleton_color, thickness=self.skeleton_thickness)

    @property
    def leaf_style(self) -> StyleSpec:
        return StyleSpec(color=self.leaf_color, thickness=self.leaf_thickness)


MotifRenderer = Callable[[TriangleGeometry], MotifRenderResult]


def base_result(options: MotifOptions, **kwargs) -> MotifRenderResult:
    """MotifRenderResult pre-filled with the motif-level style overrides."""
    return MotifRenderResult(
        skeleton_color=options.skeleton_color,
        leaf_color=options.leaf_color,
        skeleton_thickness=options.skeleton_thickness,
        leaf_thickness=options.leaf_thickness,
        **kwargs,
    )
