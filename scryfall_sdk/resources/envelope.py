"""Two-variant response envelope: the expected model, or a Scryfall error.

Scryfall does not wrap its payloads; an error is told apart from a real
resource only by its shape and by ``"object": "error"``.  Decoding is
therefore an ordered trial: the caller's model first, the error body
second.  A payload whose discriminant is ``"error"`` skips the model
entirely, so it is never accepted as the caller's model, even when that
model is lenient enough to swallow it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Tuple, Type, TypeVar, Union

from scryfall_sdk.models import DecodeError, ResourceKind
from scryfall_sdk.resources.errors import ErrorBody, ScryfallError

logger = logging.getLogger(__name__)

M = TypeVar("M")


@dataclass(frozen=True)
class Ok(Generic[M]):
    """A successfully decoded model."""

    value: M

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> M:
        return self.value


@dataclass(frozen=True)
class Err:
    """A Scryfall error body, or a synthesized ``CLIENT_ERR`` one."""

    error: ErrorBody

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise ScryfallError(self.error)


Response = Union[Ok[M], Err]


def decode_response(payload: Any, model: Type[M]) -> Response[M]:
    """Decode a parsed JSON payload into ``Ok(model)`` or ``Err(ErrorBody)``.

    Raises :class:`DecodeError` when the payload matches neither shape.
    """
    attempts: List[Tuple[str, Callable[[Any], Response[M]]]] = [
        (model.__name__, lambda raw: Ok(model.from_dict(raw))),  # type: ignore[attr-defined]
        ("ErrorBody", lambda raw: Err(ErrorBody.from_dict(raw))),
    ]
    if _discriminant(payload) == ResourceKind.ERROR.value:
        attempts = attempts[1:]

    failures: List[str] = []
    for name, attempt in attempts:
        try:
            return attempt(payload)
        except DecodeError as exc:
            failures.append(f"{name}: {exc}")

    logger.debug("Payload matched no shape: %s", "; ".join(failures))
    raise DecodeError("response matches neither shape (" + "; ".join(failures) + ")")


def _discriminant(payload: Any) -> Any:
    if isinstance(payload, dict):
        return payload.get("object")
    return None
