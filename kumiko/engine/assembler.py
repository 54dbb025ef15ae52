"""Output assembler: collects styled strokes into the minimal instruction set.

Leaf strokes are grouped by (style id, clip id); skeleton strokes by style id.
Group order and path order within a group follow cell visitation order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kumiko.engine.geometry import Orientation, Shape
from kumiko.engine.motifs.base import MotifRenderResult, normalize_leaf
from kumiko.engine.style import ClipRegistry, StyleRegistry, StyleSpec, resolve_style

NO_CLIP = "none"


@dataclass(frozen=True)
class StrokeGroup:
    style_id: str
    color: str
    thickness: float
    paths: tuple[str, ...]


@dataclass(frozen=True)
class LeafGroup:
    style_id: str
    clip_id: str
    color: str
    thickness: float
    paths: tuple[str, ...]

    @property
    def clipped(self) -> bool:
        return self.clip_id != NO_CLIP


@dataclass(frozen=True)
class ClipRegion:
    clip_id: str
    path: str


@dataclass(frozen=True)
class CellRecord:
    """One rendered cell, in visitation order."""

    row: int
    segment: int
    index: int
    symbol: str
    shape: Shape
    orientation: Orientation
    x: float
    y: float


@dataclass(frozen=True)
class RenderResult:
    canvas_width: float
    canvas_height: float
    skeleton_groups: tuple[StrokeGroup, ...] = ()
    leaf_groups: tuple[LeafGroup, ...] = ()
    clip_regions: tuple[ClipRegion, ...] = ()
    cells: tuple[CellRecord, ...] = ()

    @property
    def style_ids(self) -> list[str]:
        """Distinct style ids across leaf and skeleton groups, first-seen order."""
        seen: dict[str, None] = {}
        for g in self.leaf_groups:
            seen.setdefault(g.style_id, None)
        for g in self.skeleton_groups:
            seen.setdefault(g.style_id, None)
        return sorted(seen, key=lambda sid: int(sid[1:]))


@dataclass
class OutputAssembler:
    """Accumulates strokes for one render pass."""

    global_skeleton: StyleSpec
    global_leaf: StyleSpec
    styles: StyleRegistry = field(default_factory=StyleRegistry)
    clips: ClipRegistry = field(default_factory=ClipRegistry)
    _leaves: dict[tuple[str, str], list[str]] = field(default_factory=dict)
    _skeleton: dict[str, list[str]] = field(default_factory=dict)

    def add(self, result: MotifRenderResult) -> None:
        """Merge one cell's motif output. Leaves register before the skeleton."""
        if result.leaves:
            clip_id = self.clips.register(result.clip_path) if result.clip_path else NO_CLIP
            motif_leaf = result.leaf_style
            for leaf in result.leaves:
                styled = normalize_leaf(leaf)
                resolved = resolve_style(styled.style, motif_leaf, self.global_leaf)
                style_id = self.styles.register(resolved)
                self._leaves.setdefault((style_id, clip_id), []).append(styled.path)

        if result.skeleton:
            resolved = resolve_style(None, result.skeleton_style, self.global_skeleton)
            style_id = self.styles.register(resolved)
            self._skeleton.setdefault(style_id, []).extend(result.skeleton)

    def build(
        self,
        canvas_width: float,
        canvas_height: float,
        cells: list[CellRecord] | tuple[CellRecord, ...] = (),
    ) -> RenderResult:
        leaf_groups = []
        for (style_id, clip_id), paths in self._leaves.items():
            style = self.styles.get(style_id)
            leaf_groups.append(
                LeafGroup(style_id, clip_id, style.color, style.thickness, tuple(paths))
            )

        skeleton_groups = []
        for style_id, paths in self._skeleton.items():
            style = self.styles.get(style_id)
            skeleton_groups.append(
                StrokeGroup(style_id, style.color, style.thickness, tuple(paths))
            )

        return RenderResult(
            canvas_width=canvas_width,
            canvas_height=canvas_height,
            skeleton_groups=tuple(skeleton_groups),
            leaf_groups=tuple(leaf_groups),
            clip_regions=tuple(ClipRegion(cid, path) for cid, path in self.clips.items()),
            cells=tuple(cells),
        )
