"""Blocking Scryfall client.

Same contract as :class:`scryfall_sdk.client.Scryfall`; each request
occupies the calling thread for the whole round trip.  The client can be
shared between threads: ``httpx.Client`` is thread-safe and is the only
state it holds.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

import httpx

from scryfall_sdk import __version__
from scryfall_sdk.client import build_request, build_transport, decode_body, transport_failure
from scryfall_sdk.config import DEFAULT_BASE_URL, ClientConfig
from scryfall_sdk.resources import HttpResource
from scryfall_sdk.resources.envelope import Response

M = TypeVar("M")

SYNC_USER_AGENT = f"scryfall-sdk-python/{__version__} (sync)"


class ScryfallBlocking:
    """Scryfall blocking client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = SYNC_USER_AGENT,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client or build_transport(httpx.Client, user_agent, timeout)

    @classmethod
    def from_url(cls, base_url: str) -> "ScryfallBlocking":
        """Create a client bound to ``base_url``."""
        return cls(base_url=base_url)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "ScryfallBlocking":
        return cls(
            base_url=config.base_url,
            user_agent=config.user_agent or SYNC_USER_AGENT,
            timeout=config.timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> httpx.Client:
        """The wrapped transport, shared so its connection pool is reused."""
        return self._http_client

    def request(self, resource: HttpResource[M]) -> Response[M]:
        """Make an HTTP request to the endpoint ``resource`` describes."""
        try:
            request = build_request(self._http_client, self._base_url, resource)
            response = self._http_client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return transport_failure(resource, exc)

        try:
            response.read()
        except httpx.HTTPError as exc:
            return transport_failure(resource, exc)
        finally:
            response.close()

        return decode_body(resource, response)

    def close(self) -> None:
        if not self._http_client.is_closed:
            self._http_client.close()

    def __enter__(self) -> "ScryfallBlocking":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ScryfallBlocking(base_url={self._base_url!r})"
