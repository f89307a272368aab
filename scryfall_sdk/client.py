"""Async Scryfall client, and the request plumbing both clients share.

A request goes: resource -> ``httpx.Request`` -> send -> read body ->
envelope decode.  Anything that goes wrong on our side of the wire
(connection, timeout, unreadable body) comes back as ``Err`` with a
``CLIENT_ERR``/599 body; an error sent by Scryfall comes back as ``Err``
with Scryfall's own body.  Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, TypeVar

import httpx

from scryfall_sdk import __version__
from scryfall_sdk.config import DEFAULT_BASE_URL, ClientConfig
from scryfall_sdk.resources import HttpResource
from scryfall_sdk.resources.envelope import Err, Ok, Response
from scryfall_sdk.resources.errors import ErrorBody

logger = logging.getLogger(__name__)

M = TypeVar("M")
C = TypeVar("C")

ASYNC_USER_AGENT = f"scryfall-sdk-python/{__version__} (async)"


class Scryfall:
    """Scryfall async client.

    Holds one ``httpx.AsyncClient``; its connection pool is shared by every
    request made through this client, including concurrent ones.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = ASYNC_USER_AGENT,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client or build_transport(
            httpx.AsyncClient, user_agent, timeout
        )

    @classmethod
    def from_url(cls, base_url: str) -> "Scryfall":
        """Create a client bound to ``base_url``."""
        return cls(base_url=base_url)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "Scryfall":
        return cls(
            base_url=config.base_url,
            user_agent=config.user_agent or ASYNC_USER_AGENT,
            timeout=config.timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> httpx.AsyncClient:
        """The wrapped transport, shared so its connection pool is reused."""
        return self._http_client

    async def request(self, resource: HttpResource[M]) -> Response[M]:
        """Make an HTTP request to the endpoint ``resource`` describes."""
        try:
            request = build_request(self._http_client, self._base_url, resource)
            response = await self._http_client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return transport_failure(resource, exc)

        try:
            await response.aread()
        except httpx.HTTPError as exc:
            return transport_failure(resource, exc)
        finally:
            await response.aclose()

        return decode_body(resource, response)

    async def aclose(self) -> None:
        if not self._http_client.is_closed:
            await self._http_client.aclose()

    async def __aenter__(self) -> "Scryfall":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"Scryfall(base_url={self._base_url!r})"


# ------------------------------------------------------------------
# Shared plumbing
# ------------------------------------------------------------------


def build_transport(
    factory: Callable[..., C], user_agent: str, timeout: Optional[float]
) -> C:
    """Create the httpx client; fall back to a default one if that fails.

    A failure here is logged, never raised: the caller always gets a
    usable client, possibly without our user agent or timeout.
    """
    kwargs: Dict[str, Any] = {
        "headers": {"User-Agent": user_agent, "Accept": "application/json"},
    }
    if timeout is not None:
        kwargs["timeout"] = timeout
    try:
        return factory(**kwargs)
    except (TypeError, ValueError, OSError) as exc:
        logger.warning("Could not configure HTTP client (%s), using defaults", exc)
        return factory()


def build_request(http_client: Any, base_url: str, resource: HttpResource[Any]) -> httpx.Request:
    url = f"{base_url}/{resource.path()}"
    method = resource.method().value
    logger.debug("%s %s", method, url)
    return http_client.build_request(
        method,
        url,
        headers={"Content-Type": "application/json"},
        content=resource.body(),
    )


def decode_body(resource: HttpResource[M], response: httpx.Response) -> Response[M]:
    """Decode a fully read response into the resource's envelope."""
    try:
        result = resource.decode(response.json())
    except (ValueError, RecursionError) as exc:
        # Invalid JSON, nesting too deep to parse, or a shape matching neither variant.
        logger.warning(
            "Undecodable response from %s (HTTP %d): %s",
            resource.path_without_query(),
            response.status_code,
            exc,
        )
        return Err(ErrorBody.from_transport_error(exc))

    if isinstance(result, Ok):
        logger.debug(
            "Decoded %s from %s", type(result.value).__name__, resource.path_without_query()
        )
    else:
        logger.info(
            "Scryfall error from %s: %s (status %d)",
            resource.path_without_query(),
            result.error,
            result.error.status,
        )
    return result


def transport_failure(resource: HttpResource[Any], exc: Exception) -> Err:
    logger.warning("Request to %s failed: %s", resource.path_without_query(), exc)
    return Err(ErrorBody.from_transport_error(exc))
