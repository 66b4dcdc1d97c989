"""Stable public API for building tooling on top of framectl.

This module is the supported integration surface for compositing tools and
scripts that need a device frame for a screenshot. Avoid importing from
private/internal modules unless intentionally depending on non-stable
internals.
"""

from __future__ import annotations

from pathlib import Path

from framectl.core.errors import (
    AssetDownloadError,
    CatalogLoadError,
    ConfigError,
    FramectlError,
    FrameOverrideError,
    TransportError,
    TransportRequestError,
)
from framectl.core.config import Settings
from framectl.core.model import (
    BezelMatch,
    Catalog,
    CatalogMetadata,
    Device,
    Frame,
    MatchKind,
    Orientation,
    ResolvedBezel,
    Resolution,
)
from framectl.core.service import BezelService, check_frame_override
from framectl.transports.base import Transport

__all__ = [
    "AssetDownloadError",
    "CatalogLoadError",
    "ConfigError",
    "FramectlError",
    "FrameOverrideError",
    "TransportError",
    "TransportRequestError",
    "BezelMatch",
    "Catalog",
    "CatalogMetadata",
    "Device",
    "Frame",
    "MatchKind",
    "Orientation",
    "ResolvedBezel",
    "Resolution",
    "Settings",
    "Transport",
    "Client",
]


class Client:
    """Public client for resolving device frames.

    A `Client` owns one catalog (fetched on first use and kept for the
    lifetime of the client) and one local frame cache. Lookups that find no
    suitable device return None; fetch and cache failures raise
    `FramectlError` subclasses.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._service = BezelService(settings=settings, transport=transport)

    @property
    def settings(self) -> Settings:
        return self._service.settings

    def close(self) -> None:
        self._service.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def list_devices(self) -> list[Device]:
        return self._service.list_devices()

    def metadata(self) -> CatalogMetadata:
        return self._service.metadata()

    def find_match(self, width: int, height: int) -> BezelMatch | None:
        return self._service.find_match(width, height)

    def resolve_bezel(self, width: int, height: int) -> ResolvedBezel | None:
        return self._service.resolve(width, height)

    def frame_path_for(
        self,
        width: int,
        height: int,
        *,
        frame_override: str | Path | None = None,
    ) -> Path | None:
        """Local frame image path for a screenshot, or None if nothing matches.

        An explicit `frame_override` is returned as-is (after an existence
        check) without touching the catalog or the cache.
        """
        if frame_override is not None:
            return check_frame_override(frame_override)

        resolved = self._service.resolve(width, height)
        return resolved.path if resolved else None
