"""Motif registry: every built-in motif is a factory registered via decorator.

Usage:
    @motif(MotifType.GOMA, name="Goma (Sesame)", options=GomaOptions)
    def create_goma(options: GomaOptions) -> MotifRenderer:
        def render(geom: TriangleGeometry) -> MotifRenderResult:
            ...
        return render

The set of motif types is closed (``MotifType``); ``build_renderers`` refuses
to run until every member has a registered factory.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import ValidationError

from kumiko.engine.errors import KumikoError, UnknownMotifType
from kumiko.engine.motifs.base import MotifOptions, MotifRenderer

logger = logging.getLogger(__name__)


class MotifType(str, enum.Enum):
    ASANOHA = "asanoha"
    GOMA = "goma"
    KAKU = "kaku"
    SAKURA = "sakura"
    BLANK = "blank"


@dataclass(frozen=True)
class MotifSpec:
    id: MotifType
    name: str
    factory: Callable[[Any], MotifRenderer]
    options: type[MotifOptions] = MotifOptions

    def create(self, options: Mapping[str, Any] | MotifOptions | None = None) -> MotifRenderer:
        if isinstance(options, MotifOptions):
            parsed = options
        else:
            parsed = self.options.model_validate(dict(options or {}))
        return self.factory(parsed)


class MotifRegistry:
    """Registry of motif factories, one per MotifType member."""

    def __init__(self) -> None:
        self._motifs: dict[MotifType, MotifSpec] = {}

    def register(self, spec: MotifSpec) -> None:
        if spec.id in self._motifs:
            raise ValueError(f"Duplicate motif ID: {spec.id.value}")
        self._motifs[spec.id] = spec
        logger.debug("Registered motif %s (%s)", spec.id.value, spec.name)

    def get(self, motif_id: MotifType | str) -> MotifSpec:
        return self._motifs[MotifType(motif_id)]

    def all(self) -> list[MotifSpec]:
        return [self._motifs[m] for m in MotifType if m in self._motifs]

    def missing(self) -> set[MotifType]:
        return set(MotifType) - set(self._motifs)

    @property
    def count(self) -> int:
        return len(self._motifs)

    def create(self, character: str, motif_type: str, options: Any = None) -> MotifRenderer:
        """Build the renderer for one character binding.

        Raises:
            UnknownMotifType: if ``motif_type`` is not a registered motif.
            KumikoError: if the options do not validate for that motif.
        """
        try:
            spec = self.get(motif_type)
        except (ValueError, KeyError):
            raise UnknownMotifType(character, str(motif_type)) from None
        try:
            return spec.create(options)
        except ValidationError as e:
            raise KumikoError(
                f"Invalid options for character {character!r} ({spec.id.value}): {e}"
            ) from e

    def build_renderers(self, bindings: Mapping[str, Any]) -> dict[str, MotifRenderer]:
        """Map every bound character to a ready renderer.

        ``bindings`` maps a character to an object with ``type`` and
        ``options`` attributes or to a ``{"type": ..., "options": ...}`` dict.
        """
        missing = self.missing()
        if missing:
            raise RuntimeError(
                "No factory registered for motif types: "
                + ", ".join(sorted(m.value for m in missing))
            )

        renderers: dict[str, MotifRenderer] = {}
        for character, binding in bindings.items():
            if isinstance(binding, Mapping):
                motif_type, options = binding.get("type"), binding.get("options")
            else:
                motif_type, options = binding.type, binding.options
            renderers[character] = self.create(character, motif_type, options)
        logger.debug("Built %d motif renderers", len(renderers))
        return renderers


# Module-level registry, filled once at import time by the @motif decorators
_registry = MotifRegistry()


def get_registry() -> MotifRegistry:
    return _registry


def motif(
    motif_id: MotifType,
    *,
    name: str,
    options: type[MotifOptions] = MotifOptions,
):
    """Decorator to register a motif factory."""

    def decorator(fn: Callable[[Any], MotifRenderer]):
        _registry.register(MotifSpec(id=motif_id, name=name, factory=fn, options=options))
        return fn

    return decorator
