"""Domain errors raised by the kumiko engine and its grid decoder."""

from __future__ import annotations


class KumikoError(ValueError):
    """Base class for configuration and input defects."""


class InvalidGeometry(KumikoError):
    """Side length is not a positive number."""

    def __init__(self, side_length: float) -> None:
        self.side_length = side_length
        super().__init__(f"Side length must be positive, got {side_length!r}")


class UnknownMotifType(KumikoError):
    """A character binding references a motif identifier that is not registered."""

    def __init__(self, character: str, motif: str) -> None:
        self.character = character
        self.motif = motif
        super().__init__(f"Unknown motif type: {motif!r} for character: {character!r}")


class MalformedGrid(KumikoError):
    """Grid input could not be decoded into at least one usable row."""
