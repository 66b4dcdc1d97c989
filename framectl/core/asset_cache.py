"""Write-once local mirror of remote frame assets, keyed by logical path."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path, PurePosixPath
from urllib.parse import quote

from framectl.core.errors import AssetDownloadError, TransportError
from framectl.transports.base import Transport

LOGGER = logging.getLogger(__name__)


def _split_logical_path(path: str) -> tuple[str, ...]:
    logical = PurePosixPath(path)
    parts = tuple(part for part in logical.parts if part not in ("", "."))
    if logical.is_absolute() or not parts or ".." in parts:
        raise AssetDownloadError(f"Frame path '{path}' is not a relative path inside the cache")
    return parts


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


class AssetCache:
    """Maps frame paths under `root` and downloads each one at most once.

    Entries are never revalidated or evicted: a logical path is assumed to
    always name the same bytes.
    """

    def __init__(self, root: Path, remote_base: str, transport: Transport) -> None:
        self.root = Path(root)
        self.remote_base = remote_base.rstrip("/")
        self.transport = transport

    def local_path(self, path: str) -> Path:
        return self.root.joinpath(*_split_logical_path(path))

    def remote_url(self, path: str) -> str:
        return f"{self.remote_base}/{'/'.join(quote(part) for part in _split_logical_path(path))}"

    def is_cached(self, path: str) -> bool:
        return self.local_path(path).is_file()

    def ensure_local(self, path: str) -> Path:
        target = self.local_path(path)
        if target.is_file():
            LOGGER.debug("Using cached frame %s", target)
            return target

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise AssetDownloadError(f"Could not create cache directory {target.parent}: {exc}") from exc

        url = self.remote_url(path)
        try:
            payload = self.transport.fetch(url)
        except TransportError as exc:
            raise AssetDownloadError(f"Could not download frame '{path}': {exc}") from exc

        self._write_atomic(target, payload)
        LOGGER.info("Downloaded frame %s (%d bytes)", path, len(payload))
        return target

    def _write_atomic(self, target: Path, payload: bytes) -> None:
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".part",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(payload)
            # NamedTemporaryFile is always 0600; give the entry a plain-write mode.
            os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, target)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise AssetDownloadError(f"Could not write frame to {target}: {exc}") from exc
