"""Scryfall API resources.

A resource describes one API call: HTTP method, path relative to the
client's base URL, and an optional JSON body.  Each resource family
(cards, sets, rulings, ...) is a subclass of :class:`HttpResource` that
names the model its responses decode to and builds the path for each of
its variants in a single ``path()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Generic, Optional, Type, TypeVar
from urllib.parse import quote

from scryfall_sdk.resources.envelope import Response, decode_response

M = TypeVar("M")


class Method(str, Enum):
    """HTTP verbs a resource can use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class HttpResource(ABC, Generic[M]):
    """Base class for every endpoint binding.

    Subclasses must implement ``path()``.  It must never start with ``/``
    nor include the base URL; the client joins the two.
    """

    model: ClassVar[Type[Any]]

    def method(self) -> Method:
        return Method.GET

    @abstractmethod
    def path(self) -> str:
        ...

    def body(self) -> Optional[str]:
        """Serialized JSON body, for write endpoints only."""
        return None

    def path_without_query(self) -> str:
        """``path()`` with the query string (if any) stripped.

        ``symbology/parse-mana?cost=1b`` becomes ``symbology/parse-mana``.
        """
        return self.path().split("?", 1)[0]

    def decode(self, payload: Any) -> Response[M]:
        return decode_response(payload, self.model)


def segment(value: Any) -> str:
    """Percent-encode a value for use as one path segment or query value."""
    return quote(str(value), safe="")


__all__ = ["HttpResource", "Method", "segment"]
