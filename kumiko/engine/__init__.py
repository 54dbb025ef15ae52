"""Kumiko tessellation and motif-rendering engine."""

from kumiko.engine.assembler import (
    CellRecord,
    ClipRegion,
    LeafGroup,
    OutputAssembler,
    RenderResult,
    StrokeGroup,
)
from kumiko.engine.config import ColorConfig, KumikoConfig, MotifBinding, ThicknessConfig
from kumiko.engine.errors import InvalidGeometry, KumikoError, MalformedGrid, UnknownMotifType
from kumiko.engine.geometry import (
    ClipBoundary,
    Orientation,
    Point,
    Shape,
    Triangle,
    TriangleGeometry,
    calculate_triangle,
)
from kumiko.engine.layout import RenderSession, canvas_size, render
from kumiko.engine.motifs import MotifType, get_registry

__all__ = [
    "CellRecord",
    "ClipBoundary",
    "ClipRegion",
    "ColorConfig",
    "InvalidGeometry",
    "KumikoConfig",
    "KumikoError",
    "LeafGroup",
    "MalformedGrid",
    "MotifBinding",
    "MotifType",
    "Orientation",
    "OutputAssembler",
    "Point",
    "RenderResult",
    "RenderSession",
    "Shape",
    "StrokeGroup",
    "ThicknessConfig",
    "Triangle",
    "TriangleGeometry",
    "UnknownMotifType",
    "calculate_triangle",
    "canvas_size",
    "get_registry",
    "render",
]
