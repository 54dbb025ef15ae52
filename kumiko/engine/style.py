"""Stroke style resolution and per-pass deduplication registries.

Resolution priority:
    leaf:     stroke override > motif default > global default > fallback
    skeleton:                   motif default > global default > fallback

Every resolved style is reduced to a canonical key (thickness to 3 decimal
places plus normalized colour). Keys and clip paths receive ids in first-seen
order, and a key seen again always maps back to the same id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

FALLBACK_COLOR = "#000000"
FALLBACK_THICKNESS = 1.0


@dataclass(frozen=True)
class StyleSpec:
    """Partial stroke style; unset fields fall through to the next layer."""

    color: str | None = None
    thickness: float | None = None


@dataclass(frozen=True)
class ResolvedStyle:
    color: str
    thickness: float

    @property
    def key(self) -> str:
        return style_key(self)


def normalize_color(color: str) -> str:
    """Trim and lower-case.

    Hex colours (#rgb, #rrggbb) are not expanded; rgb() and named colours are
    only case-folded.
    """
    return color.strip().lower()


def normalize_thickness(thickness: float) -> float:
    return round(float(thickness), 3)


def format_thickness(thickness: float) -> str:
    text = f"{normalize_thickness(thickness):.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def style_key(style: ResolvedStyle) -> str:
    return f"{format_thickness(style.thickness)}|{normalize_color(style.color)}"


def _first_set(*values):
    for v in values:
        if v is not None:
            return v
    return None


def resolve_style(
    stroke: StyleSpec | None,
    motif: StyleSpec,
    global_default: StyleSpec,
) -> ResolvedStyle:
    """Merge style layers, highest priority first, onto the hard fallback."""
    stroke = stroke or StyleSpec()
    color = _first_set(stroke.color, motif.color, global_default.color, FALLBACK_COLOR)
    thickness = _first_set(
        stroke.thickness, motif.thickness, global_default.thickness, FALLBACK_THICKNESS
    )
    return ResolvedStyle(color=normalize_color(color), thickness=normalize_thickness(thickness))


K = TypeVar("K")
V = TypeVar("V")


class _IdRegistry(Generic[K, V]):
    """Lazily assigns ``<prefix><n>`` ids to keys in first-seen order."""

    prefix = ""

    def __init__(self) -> None:
        self._ids: dict[K, str] = {}
        self._values: dict[str, V] = {}

    def _intern(self, key: K, value: V) -> str:
        existing = self._ids.get(key)
        if existing is not None:
            return existing
        new_id = f"{self.prefix}{len(self._ids)}"
        self._ids[key] = new_id
        self._values[new_id] = value
        return new_id

    def get(self, entry_id: str) -> V:
        return self._values[entry_id]

    def items(self) -> list[tuple[str, V]]:
        return list(self._values.items())

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, key: object) -> bool:
        return key in self._ids


class StyleRegistry(_IdRegistry[str, ResolvedStyle]):
    """Canonical style key -> style class id (``s0``, ``s1``, ...)."""

    prefix = "s"

    def register(self, style: ResolvedStyle) -> str:
        return self._intern(style.key, style)


class ClipRegistry(_IdRegistry[str, str]):
    """Literal clip path -> clip region id (``clip0``, ``clip1``, ...)."""

    prefix = "clip"

    def register(self, clip_path: str) -> str:
        return self._intern(clip_path, clip_path)
