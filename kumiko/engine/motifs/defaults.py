"""Built-in character table used when no motif configuration is supplied."""

from __future__ import annotations

# Symbol rendered for characters that have no binding
FALLBACK_CHARACTER = "G"

DEFAULT_MOTIFS: dict[str, dict] = {
    "A": {"type": "asanoha"},
    "G": {"type": "goma"},
    "K": {"type": "kaku"},
    "k": {"type": "kaku", "options": {"ratio": 0.5}},
    "S": {"type": "sakura"},
    "B": {"type": "blank"},
}
