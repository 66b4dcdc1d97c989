"""Transport interfaces."""

from __future__ import annotations

from typing import Protocol


class Transport(Protocol):
    def fetch(self, url: str) -> bytes:
        """Fetch the full body at `url`, raising TransportError on failure."""
