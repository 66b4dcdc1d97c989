"""Remote bezel catalog loading and validation."""

from __future__ import annotations

import json
import logging
from typing import Any

from jsonschema import ValidationError

from framectl.core.errors import CatalogLoadError, TransportError
from framectl.core.model import Catalog, CatalogMetadata, Device, Frame, Orientation, Resolution
from framectl.schemas import load_validator
from framectl.transports.base import Transport

LOGGER = logging.getLogger(__name__)


def _build_device(doc: dict[str, Any]) -> Device:
    return Device(
        name=doc["name"],
        type=doc["type"],
        generation=doc["generation"],
        variant=doc["variant"],
        display_size=doc["displaySize"],
        bezel_type=doc["bezelType"],
        resolution=Resolution(
            width=int(doc["resolution"]["width"]),
            height=int(doc["resolution"]["height"]),
        ),
        frames=tuple(
            Frame(
                color=frame["color"],
                orientation=Orientation(frame["orientation"]),
                path=frame["path"],
            )
            for frame in doc["frames"]
        ),
    )


def parse_catalog(doc: Any, *, source: str = "<catalog>") -> Catalog:
    """Validate a decoded catalog document and build the typed model.

    Unknown fields are ignored. Device order is kept as given.
    """
    validator = load_validator("catalog.schema.json")
    try:
        validator.validate(doc)
    except ValidationError as exc:
        path = ".".join(str(p) for p in exc.path)
        where = f" ({path})" if path else ""
        raise CatalogLoadError(f"Schema validation failed for {source}{where}: {exc.message}") from exc

    metadata = doc["metadata"]
    return Catalog(
        devices=tuple(_build_device(device) for device in doc["devices"]),
        metadata=CatalogMetadata(
            version=metadata["version"],
            last_updated=metadata["lastUpdated"],
            description=metadata["description"],
            source=metadata["source"],
        ),
    )


class CatalogLoader:
    """Fetches the catalog document on first use and keeps it for later calls."""

    def __init__(self, url: str, transport: Transport) -> None:
        self.url = url
        self.transport = transport
        self._catalog: Catalog | None = None

    @property
    def loaded(self) -> bool:
        return self._catalog is not None

    def load(self) -> Catalog:
        if self._catalog is not None:
            return self._catalog

        try:
            raw = self.transport.fetch(self.url)
        except TransportError as exc:
            raise CatalogLoadError(f"Could not fetch bezel catalog from {self.url}: {exc}") from exc

        try:
            doc = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CatalogLoadError(f"Invalid JSON in bezel catalog {self.url}: {exc}") from exc

        self._catalog = parse_catalog(doc, source=self.url)
        LOGGER.info(
            "Loaded bezel catalog %s with %d devices",
            self._catalog.metadata.version,
            len(self._catalog.devices),
        )
        return self._catalog
