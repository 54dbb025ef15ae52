"""Render configuration: canvas unit, colours, thickness and motif bindings."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from kumiko.engine.style import StyleSpec

# Global thickness defaults, as a fraction of the side length
SKELETON_THICKNESS_RATIO = 0.04
LEAF_THICKNESS_RATIO = 0.015

# Colours end up inside a CSS rule, so only hex, rgb[a]()/hsl[a]() and
# named colours get through.
COLOR_PATTERN = (
    r"^\s*(?:#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})"
    r"|(?:rgba?|hsla?)\(\s*[0-9.%+\-\s,/]*\)"
    r"|[a-zA-Z]+)\s*$"
)

Color = Annotated[str, StringConstraints(pattern=COLOR_PATTERN)]


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ColorConfig(_Model):
    skeleton: Color = "#633524ff"
    leaf: Color = "#8d6e63"
    background: Color = "#33312eff"


class ThicknessConfig(_Model):
    skeleton: float | None = Field(default=None, ge=0)
    leaf: float | None = Field(default=None, ge=0)


class KumikoConfig(_Model):
    """Global render settings.

    ``side_length`` is not range-checked here; the engine rejects
    non-positive values with InvalidGeometry before drawing anything.
    """

    side_length: float = 100.0
    colors: ColorConfig = Field(default_factory=ColorConfig)
    thickness: ThicknessConfig | None = None

    @property
    def skeleton_thickness(self) -> float:
        if self.thickness is not None and self.thickness.skeleton is not None:
            return self.thickness.skeleton
        return self.side_length * SKELETON_THICKNESS_RATIO

    @property
    def leaf_thickness(self) -> float:
        if self.thickness is not None and self.thickness.leaf is not None:
            return self.thickness.leaf
        return self.side_length * LEAF_THICKNESS_RATIO

    @property
    def skeleton_style(self) -> StyleSpec:
        return StyleSpec(color=self.colors.skeleton, thickness=self.skeleton_thickness)

    @property
    def leaf_style(self) -> StyleSpec:
        return StyleSpec(color=self.colors.leaf, thickness=self.leaf_thickness)


class MotifBinding(_Model):
    """One character's motif: ``{"type": "goma", "options": {"inset": 0.25}}``."""

    type: str
    options: dict[str, Any] = Field(default_factory=dict)
