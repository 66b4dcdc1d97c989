"""HTTP transport implementation using requests."""

from __future__ import annotations

import requests

from framectl.core.errors import TransportRequestError


class HTTPTransport:
    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session or requests.Session()

    def fetch(self, url: str) -> bytes:
        try:
            response = self.session.get(url)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "?"
            raise TransportRequestError(f"GET {url} returned HTTP {status}") from exc
        except requests.RequestException as exc:
            raise TransportRequestError(f"GET {url} failed: {exc}") from exc
        return response.content

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> HTTPTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
