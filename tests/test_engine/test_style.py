"""Tests for style resolution and id registries."""

from __future__ import annotations

from kumiko.engine.style import (
    FALLBACK_COLOR,
    FALLBACK_THICKNESS,
    ClipRegistry,
    ResolvedStyle,
    StyleRegistry,
    StyleSpec,
    format_thickness,
    normalize_color,
    resolve_style,
    style_key,
)


def test_normalize_color():
    assert normalize_color("  #FFB7C5 ") == "#ffb7c5"
    assert normalize_color("RGB(1, 2, 3)") == "rgb(1, 2, 3)"


def test_format_thickness():
    assert format_thickness(4.0) == "4"
    assert format_thickness(1.5) == "1.5"
    assert format_thickness(1.23456) == "1.235"
    assert format_thickness(0) == "0"


def test_style_key():
    assert style_key(ResolvedStyle("#ABC", 1.5)) == "1.5|#abc"
    assert ResolvedStyle("#abc", 1.0004).key == ResolvedStyle("#ABC ", 1).key


def test_resolve_priority():
    stroke = StyleSpec(color="#111")
    motif = StyleSpec(color="#222", thickness=2)
    glob = StyleSpec(color="#333", thickness=3)

    assert resolve_style(stroke, motif, glob) == ResolvedStyle("#111", 2)
    assert resolve_style(None, motif, glob) == ResolvedStyle("#222", 2)
    assert resolve_style(None, StyleSpec(), glob) == ResolvedStyle("#333", 3)
    assert resolve_style(None, StyleSpec(), StyleSpec()) == ResolvedStyle(
        FALLBACK_COLOR, FALLBACK_THICKNESS
    )


def test_resolve_zero_thickness_is_kept():
    resolved = resolve_style(StyleSpec(thickness=0), StyleSpec(thickness=2), StyleSpec())
    assert resolved.thickness == 0


def test_style_registry_first_seen_order():
    reg = StyleRegistry()
    a = ResolvedStyle("#000000", 4)
    b = ResolvedStyle("#8d6e63", 1.5)
    assert reg.register(a) == "s0"
    assert reg.register(b) == "s1"
    assert reg.register(ResolvedStyle("#000000", 4.0)) == "s0"
    assert len(reg) == 2
    assert reg.get("s1") == b
    assert [sid for sid, _ in reg.items()] == ["s0", "s1"]
    assert a.key in reg


def test_clip_registry():
    reg = ClipRegistry()
    assert reg.register("M 0,0 L 1,0 L 0,1 Z") == "clip0"
    assert reg.register("M 5,0 L 6,0 L 5,1 Z") == "clip1"
    assert reg.register("M 0,0 L 1,0 L 0,1 Z") == "clip0"
    assert len(reg) == 2
