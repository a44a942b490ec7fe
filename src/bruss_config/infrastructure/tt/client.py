"""Trentino Trasporti ("tt") HTTP client handle.

``TTClient`` binds a base URL and API secret. It performs no I/O on
construction; ``http_client()`` hands out an ``httpx.Client`` preconfigured with
the base URL and auth headers for the transit-data fetcher to issue requests
with.
"""

from __future__ import annotations

from typing import Any, Dict

import httpx


class TTClient:
    """Transit-data API client bound to one base URL and secret."""

    def __init__(self, base_url: str, secret: str):
        self._base_url = base_url.rstrip("/")
        self._secret = secret

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Basic {self._secret}"}

    def http_client(self, **kwargs: Any) -> httpx.Client:
        """Return a new ``httpx.Client`` bound to the base URL with auth headers.

        Extra keyword arguments (``timeout``, ``transport``...) are passed
        through to ``httpx.Client``. The caller owns the client and should
        close it (``with client.http_client() as http: ...``).
        """
        headers = dict(self.headers)
        headers.update(kwargs.pop("headers", None) or {})
        return httpx.Client(base_url=self._base_url, headers=headers, **kwargs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TTClient):
            return NotImplemented
        return self._base_url == other._base_url and self._secret == other._secret

    def __repr__(self) -> str:
        return f"TTClient(base_url={self._base_url!r})"
