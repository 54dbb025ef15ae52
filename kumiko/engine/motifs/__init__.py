"""Built-in kumiko motifs. Importing this package registers every factory."""

from kumiko.engine.motifs.base import (
    LeafPath,
    MotifOptions,
    MotifRenderer,
    MotifRenderResult,
    StyledPath,
    normalize_leaf,
)
from kumiko.engine.motifs.registry import MotifRegistry, MotifSpec, MotifType, get_registry, motif

# Registration side effects
from kumiko.engine.motifs import asanoha, blank, goma, kaku, sakura  # noqa: E402,F401
from kumiko.engine.motifs.defaults import DEFAULT_MOTIFS, FALLBACK_CHARACTER
from kumiko.engine.motifs.goma import GomaOptions
from kumiko.engine.motifs.kaku import KakuOptions
from kumiko.engine.motifs.sakura import SakuraOptions

__all__ = [
    "DEFAULT_MOTIFS",
    "FALLBACK_CHARACTER",
    "GomaOptions",
    "KakuOptions",
    "LeafPath",
    "MotifOptions",
    "MotifRegistry",
    "MotifRenderResult",
    "MotifRenderer",
    "MotifSpec",
    "MotifType",
    "SakuraOptions",
    "StyledPath",
    "get_registry",
    "motif",
    "normalize_leaf",
]
