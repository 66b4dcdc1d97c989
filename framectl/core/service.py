"""Service layer used by CLI and the public API."""

from __future__ import annotations

import logging
from pathlib import Path

from framectl.core.asset_cache import AssetCache
from framectl.core.bezel_match import match_bezel
from framectl.core.catalog_loader import CatalogLoader
from framectl.core.config import Settings, load_settings
from framectl.core.errors import FrameOverrideError
from framectl.core.model import BezelMatch, Catalog, CatalogMetadata, Device, MatchKind, ResolvedBezel
from framectl.transports.base import Transport
from framectl.transports.http import HTTPTransport

LOGGER = logging.getLogger(__name__)


class BezelService:
    def __init__(
        self,
        *,
        settings: Settings | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self._owns_transport = transport is None
        self.transport = transport or HTTPTransport()
        self.loader = CatalogLoader(self.settings.catalog_url, self.transport)
        self.cache = AssetCache(self.settings.cache_dir, self.settings.remote_base, self.transport)

    @property
    def catalog(self) -> Catalog:
        return self.loader.load()

    def list_devices(self) -> list[Device]:
        return list(self.catalog.devices)

    def metadata(self) -> CatalogMetadata:
        return self.catalog.metadata

    def find_match(self, width: int, height: int) -> BezelMatch | None:
        match = match_bezel(self.catalog, width, height)
        if match is None:
            LOGGER.info("No bezel matches a %dx%d screenshot", width, height)
        elif match.kind == MatchKind.EXACT:
            LOGGER.info("Found matching device: %s (%s)", match.device.name, match.frame.color)
        else:
            LOGGER.warning(
                "No exact resolution match found. Using %s (%s) based on aspect ratio",
                match.device.name,
                match.frame.color,
            )
        return match

    def close(self) -> None:
        """Release the HTTP session this service created; injected transports are left open."""
        if self._owns_transport:
            self.transport.close()

    def resolve(self, width: int, height: int) -> ResolvedBezel | None:
        match = self.find_match(width, height)
        if match is None:
            return None
        path = self.cache.ensure_local(match.frame.path)
        return ResolvedBezel(match=match, path=path)


def check_frame_override(frame: str | Path) -> Path:
    override = Path(frame).expanduser()
    if not override.is_file():
        raise FrameOverrideError(f"Frame file {override} does not exist")
    return override
