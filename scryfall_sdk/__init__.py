"""Typed client for the Scryfall API (https://scryfall.com/docs/api).

Two clients share one contract: :class:`Scryfall` (async) and
:class:`ScryfallBlocking`.  Both take a resource from
:mod:`scryfall_sdk.resources` and return ``Ok(model)`` or ``Err(ErrorBody)``.
"""

__version__ = "0.1.0"

from scryfall_sdk.blocking import ScryfallBlocking
from scryfall_sdk.client import Scryfall
from scryfall_sdk.config import ClientConfig, load_config
from scryfall_sdk.resources import HttpResource, Method
from scryfall_sdk.resources.envelope import Err, Ok, Response, decode_response
from scryfall_sdk.resources.errors import ErrorBody, ScryfallError

__all__ = [
    "ClientConfig",
    "Err",
    "ErrorBody",
    "HttpResource",
    "Method",
    "Ok",
    "Response",
    "Scryfall",
    "ScryfallBlocking",
    "ScryfallError",
    "decode_response",
    "load_config",
]
