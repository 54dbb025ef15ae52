"""Grid layout engine: walks the grid and renders every cell.

Rows are ``|``-separated wall segments of whitespace-separated symbols. Cell
orientation alternates with (row + index within segment), so each segment
starts a fresh phase. The first and last symbol of a segment also emit a half
cell of the opposite orientation to close the segment's edges.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from kumiko.engine.assembler import CellRecord, OutputAssembler, RenderResult
from kumiko.engine.config import KumikoConfig
from kumiko.engine.errors import InvalidGeometry
from kumiko.engine.geometry import Orientation, Shape, calculate_triangle, triangle_height
from kumiko.engine.motifs import (
    DEFAULT_MOTIFS,
    FALLBACK_CHARACTER,
    MotifRegistry,
    MotifRenderer,
    get_registry,
)

logger = logging.getLogger(__name__)


def split_row(row: str) -> list[list[str]]:
    """Split a row into its wall segments' symbol lists, dropping empty segments."""
    segments = (segment.split() for segment in row.split("|"))
    return [symbols for symbols in segments if symbols]


def row_width(row: str, side_length: float) -> float:
    half = side_length / 2
    return sum(len(symbols) * half + half for symbols in split_row(row))


def canvas_size(grid: Sequence[str], side_length: float) -> tuple[float, float]:
    """Return (width, height) of the canvas holding ``grid``."""
    width = max((row_width(row, side_length) for row in grid), default=0.0)
    return width, len(grid) * triangle_height(side_length)


def cell_orientation(row_index: int, symbol_index: int) -> Orientation:
    return Orientation.DOWN if (row_index + symbol_index) % 2 == 0 else Orientation.UP


class RenderSession:
    """One render pass: owns the renderers, registries and output accumulator."""

    def __init__(
        self,
        config: KumikoConfig,
        motif_config: Mapping[str, Any] | None = None,
        registry: MotifRegistry | None = None,
    ) -> None:
        if not config.side_length > 0:
            raise InvalidGeometry(config.side_length)

        self.config = config
        self.registry = registry or get_registry()
        bindings = DEFAULT_MOTIFS if motif_config is None else motif_config
        self.renderers = self.registry.build_renderers(bindings)
        self.fallback = self._fallback_renderer()
        self.assembler = OutputAssembler(
            global_skeleton=config.skeleton_style,
            global_leaf=config.leaf_style,
        )
        self.cells: list[CellRecord] = []
        self._unbound: set[str] = set()

    def _fallback_renderer(self) -> MotifRenderer:
        renderer = self.renderers.get(FALLBACK_CHARACTER)
        if renderer is not None:
            return renderer
        default = DEFAULT_MOTIFS[FALLBACK_CHARACTER]
        return self.registry.create(FALLBACK_CHARACTER, default["type"], default.get("options"))

    def renderer_for(self, symbol: str) -> MotifRenderer:
        renderer = self.renderers.get(symbol)
        if renderer is not None:
            return renderer
        if symbol not in self._unbound:
            self._unbound.add(symbol)
            logger.debug("No motif bound to %r, using %r", symbol, FALLBACK_CHARACTER)
        return self.fallback

    def _draw(self, cell: CellRecord) -> None:
        geom = calculate_triangle(cell.shape, cell.orientation, cell.x, cell.y, self.config.side_length)
        renderer = self.renderer_for(cell.symbol)
        self.assembler.add(renderer(geom))
        self.cells.append(cell)

    def run(self, grid: Sequence[str]) -> RenderResult:
        start = time.perf_counter()
        side = self.config.side_length
        half = side / 2
        height = triangle_height(side)

        for row_index, row in enumerate(grid):
            y = row_index * height
            x = 0.0
            for segment_index, symbols in enumerate(split_row(row)):
                last = len(symbols) - 1
                for j, symbol in enumerate(symbols):
                    orientation = cell_orientation(row_index, j)
                    cell = CellRecord(row_index, segment_index, j, symbol, Shape.FULL, orientation, x, y)

                    if j == 0:
                        self._draw(replace(cell, shape=Shape.HALF_LEFT, orientation=orientation.opposite))
                    self._draw(cell)
                    if j == last:
                        self._draw(
                            replace(
                                cell,
                                shape=Shape.HALF_RIGHT,
                                orientation=orientation.opposite,
                                x=x + half,
                            )
                        )
                        x += half
                    x += half

        width, canvas_height = canvas_size(grid, side)
        result = self.assembler.build(width, canvas_height, self.cells)

        logger.info(
            "Render complete: %d cells, %d styles, %d clip regions in %.1fms",
            len(result.cells),
            len(self.assembler.styles),
            len(result.clip_regions),
            (time.perf_counter() - start) * 1000,
        )
        return result


def render(
    grid: Sequence[str],
    config: KumikoConfig | Mapping[str, Any],
    motif_config: Mapping[str, Any] | None = None,
    registry: MotifRegistry | None = None,
) -> RenderResult:
    """Render ``grid`` into grouped, styled stroke instructions.

    Args:
        grid: Row strings, ``|`` for seams, whitespace between symbols.
        config: KumikoConfig or an equivalent mapping (camelCase accepted).
        motif_config: Character -> ``{"type", "options"}`` bindings. Defaults
            to the built-in table; when given it replaces that table.
        registry: Motif registry to build renderers from.

    Raises:
        InvalidGeometry: non-positive side length.
        UnknownMotifType: a binding names an unregistered motif.
    """
    if not isinstance(config, KumikoConfig):
        config = KumikoConfig.model_validate(config)
    session = RenderSession(config, motif_config, registry)
    return session.run(grid)
