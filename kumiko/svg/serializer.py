"""Write SVG markup from a render result."""

from __future__ import annotations

from html import escape

from kumiko.engine.assembler import RenderResult
from kumiko.engine.geometry import fmt_num
from kumiko.engine.style import format_thickness

_STROKE_PROPS = "fill: none; stroke-linecap: round; stroke-linejoin: round;"


def serialize_svg(
    result: RenderResult,
    background: str = "none",
    title: str = "",
) -> str:
    """Generate SVG markup. Leaf groups are painted before skeleton groups."""
    w = fmt_num(result.canvas_width)
    h = fmt_num(result.canvas_height)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {w} {h}"'
        f' width="{w}" height="{h}"'
        f' style="background-color:var(--kumiko-bg, {escape(background)})">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    styles: dict[str, str] = {}
    for group in (*result.leaf_groups, *result.skeleton_groups):
        styles.setdefault(
            group.style_id,
            f"stroke: {group.color}; stroke-width: {format_thickness(group.thickness)}; "
            + _STROKE_PROPS,
        )
    if styles:
        lines.append("  <style>")
        for style_id, props in sorted(styles.items(), key=lambda kv: int(kv[0][1:])):
            lines.append(f"    .{style_id} {{ {escape(props, quote=False)} }}")
        lines.append("  </style>")

    if result.clip_regions:
        lines.append("  <defs>")
        for region in result.clip_regions:
            lines.append(
                f'    <clipPath id="{region.clip_id}"><path d="{escape(region.path)}" /></clipPath>'
            )
        lines.append("  </defs>")

    for leaf in result.leaf_groups:
        if not leaf.paths:
            continue
        clip = f' clip-path="url(#{leaf.clip_id})"' if leaf.clipped else ""
        lines.append(f'  <path class="{leaf.style_id}" d="{escape(" ".join(leaf.paths))}"{clip} />')

    for skeleton in result.skeleton_groups:
        if not skeleton.paths:
            continue
        lines.append(f'  <path class="{skeleton.style_id}" d="{escape(" ".join(skeleton.paths))}" />')

    lines.append("</svg>")
    return "\n".join(lines)
