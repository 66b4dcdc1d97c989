"""Core data models used across loader, matcher, cache, and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class MatchKind(str, Enum):
    EXACT = "exact"
    ASPECT_RATIO = "aspect-ratio"


@dataclass(frozen=True)
class Resolution:
    """Native portrait pixel resolution of a device."""

    width: int
    height: int

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def rotated(self) -> Resolution:
        return Resolution(width=self.height, height=self.width)


@dataclass(frozen=True)
class Frame:
    color: str
    orientation: Orientation
    path: str


@dataclass(frozen=True)
class Device:
    name: str
    type: str
    generation: str
    variant: str
    display_size: str
    bezel_type: str
    resolution: Resolution
    frames: tuple[Frame, ...]

    @property
    def default_color(self) -> str | None:
        """Color of the first listed frame, used for every orientation."""
        return self.frames[0].color if self.frames else None


@dataclass(frozen=True)
class CatalogMetadata:
    version: str
    last_updated: str
    description: str
    source: str


@dataclass(frozen=True)
class Catalog:
    """Decoded bezel catalog.

    `devices` keeps the source document order; the first device satisfying a
    matching pass wins, so this order is the match priority.
    """

    devices: tuple[Device, ...]
    metadata: CatalogMetadata


@dataclass(frozen=True)
class BezelMatch:
    device: Device
    frame: Frame
    kind: MatchKind


@dataclass(frozen=True)
class ResolvedBezel:
    match: BezelMatch
    path: Path
