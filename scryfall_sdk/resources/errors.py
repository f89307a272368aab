"""Error object returned by Scryfall, and its local stand-in for transport failures.

See https://scryfall.com/docs/api/errors for the vendor's definition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from scryfall_sdk.models import (
    ResourceKind,
    expect_object,
    kind_of,
    optional,
    optional_list,
    required,
)

CLIENT_ERROR_CODE = "CLIENT_ERR"
CLIENT_ERROR_STATUS = 599


@dataclass(frozen=True)
class ErrorBody:
    """Error response body.

    ``status`` is the status carried inside the body, which is not always
    the HTTP status of the response that delivered it.
    """

    code: str
    details: str
    status: int
    kind: ResourceKind = ResourceKind.ERROR
    error_type: Optional[str] = None
    warnings: Optional[List[str]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.details}"

    @property
    def is_client_error(self) -> bool:
        """True when this body was synthesized locally, not sent by Scryfall."""
        return self.code == CLIENT_ERROR_CODE and self.status == CLIENT_ERROR_STATUS

    @classmethod
    def from_dict(cls, raw: Any) -> "ErrorBody":
        raw = expect_object(raw, "error")
        return cls(
            kind=kind_of(raw, ResourceKind.ERROR),
            code=required(raw, "code", str),
            details=required(raw, "details", str),
            status=required(raw, "status", int),
            error_type=_error_type(raw),
            warnings=optional_list(raw, "warnings", str),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "code": self.code,
            "details": self.details,
            "status": self.status,
            "error_type": self.error_type,
            "warnings": self.warnings,
        }

    @classmethod
    def from_transport_error(cls, exc: BaseException) -> "ErrorBody":
        """Build the ``CLIENT_ERR``/599 body for a failure on our side of the wire.

        Covers connection errors, timeouts and bodies that decode to neither
        the expected model nor a Scryfall error.
        """
        return cls(
            code=CLIENT_ERROR_CODE,
            details=str(exc) or type(exc).__name__,
            status=CLIENT_ERROR_STATUS,
        )


class ScryfallError(Exception):
    """Raised by ``Err.unwrap()``; carries the :class:`ErrorBody`."""

    def __init__(self, body: ErrorBody) -> None:
        super().__init__(str(body))
        self.body = body

    @property
    def code(self) -> str:
        return self.body.code

    @property
    def status(self) -> int:
        return self.body.status


def _error_type(raw: Dict[str, Any]) -> Optional[str]:
    # Written as "error_type"; some payloads carry it as "type".
    value = optional(raw, "error_type", str)
    if value is None:
        value = optional(raw, "type", str)
    return value
