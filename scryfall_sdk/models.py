"""Shared model plumbing for Scryfall objects.

Every model in :mod:`scryfall_sdk.resources` is a dataclass with a strict
``from_dict`` and a ``to_dict``.  The readers here do the structural checks
so a payload that does not have a model's shape fails loudly with
:class:`DecodeError` instead of producing a half-filled object.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol, Type, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class DecodeError(ValueError):
    """Raised when a JSON payload does not match a model's shape."""


class ResourceKind(str, Enum):
    """Value of the ``object`` field Scryfall puts on every resource."""

    BULK_DATA = "bulk_data"
    CARD = "card"
    CARD_FACE = "card_face"
    CARD_SYMBOL = "card_symbol"
    CATALOG = "catalog"
    ERROR = "error"
    LIST = "list"
    MANA_COST = "mana_cost"
    RELATED_CARD = "related_card"
    RULING = "ruling"
    SET = "set"


class ColorSymbol(str, Enum):
    """A single color."""

    B = "B"
    G = "G"
    R = "R"
    U = "U"
    W = "W"


class Model(Protocol):
    """Anything a response body can be decoded into."""

    @classmethod
    def from_dict(cls: Type[T], raw: Any) -> T:
        ...

    def to_dict(self) -> Dict[str, Any]:
        ...


# ------------------------------------------------------------------
# Field readers
# ------------------------------------------------------------------


def expect_object(raw: Any, what: str) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise DecodeError(f"{what}: expected a JSON object, got {type(raw).__name__}")
    return raw


def _check(value: Any, kind: type, key: str) -> Any:
    # bool is an int subclass; JSON true/false must not pass as numbers.
    if isinstance(value, bool) and kind is not bool:
        raise DecodeError(f"field '{key}': expected {kind.__name__}, got bool")
    if kind is float and isinstance(value, int):
        return float(value)
    if not isinstance(value, kind):
        raise DecodeError(
            f"field '{key}': expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def required(raw: Dict[str, Any], key: str, kind: type) -> Any:
    if key not in raw or raw[key] is None:
        raise DecodeError(f"missing required field '{key}'")
    return _check(raw[key], kind, key)


def optional(raw: Dict[str, Any], key: str, kind: type) -> Any:
    value = raw.get(key)
    if value is None:
        return None
    return _check(value, kind, key)


def required_list(raw: Dict[str, Any], key: str, kind: type) -> List[Any]:
    items = required(raw, key, list)
    return [_check(item, kind, key) for item in items]


def optional_list(raw: Dict[str, Any], key: str, kind: type) -> Optional[List[Any]]:
    items = optional(raw, key, list)
    if items is None:
        return None
    return [_check(item, kind, key) for item in items]


def enum_value(enum_cls: Type[E], value: Any, key: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise DecodeError(f"field '{key}': unknown {enum_cls.__name__} {value!r}") from None


def required_enum(raw: Dict[str, Any], key: str, enum_cls: Type[E]) -> E:
    return enum_value(enum_cls, required(raw, key, str), key)


def enum_list(raw: Dict[str, Any], key: str, enum_cls: Type[E]) -> List[E]:
    return [enum_value(enum_cls, v, key) for v in required_list(raw, key, str)]


def optional_enum_list(raw: Dict[str, Any], key: str, enum_cls: Type[E]) -> Optional[List[E]]:
    values = optional_list(raw, key, str)
    if values is None:
        return None
    return [enum_value(enum_cls, v, key) for v in values]


def kind_of(raw: Dict[str, Any], *expected: ResourceKind) -> ResourceKind:
    """Read the ``object`` discriminant and check it is one of ``expected``."""
    kind = required_enum(raw, "object", ResourceKind)
    if expected and kind not in expected:
        names = ", ".join(k.value for k in expected)
        raise DecodeError(f"object is '{kind.value}', expected one of: {names}")
    return kind


def nested(raw: Dict[str, Any], key: str, parse: Callable[[Any], T]) -> T:
    if key not in raw or raw[key] is None:
        raise DecodeError(f"missing required field '{key}'")
    return parse(raw[key])


def optional_nested(raw: Dict[str, Any], key: str, parse: Callable[[Any], T]) -> Optional[T]:
    value = raw.get(key)
    if value is None:
        return None
    return parse(value)


def nested_list(raw: Dict[str, Any], key: str, parse: Callable[[Any], T]) -> List[T]:
    return [parse(item) for item in required(raw, key, list)]


def optional_nested_list(
    raw: Dict[str, Any], key: str, parse: Callable[[Any], T]
) -> Optional[List[T]]:
    items = optional(raw, key, list)
    if items is None:
        return None
    return [parse(item) for item in items]


def parse_date(value: Any, key: str) -> date:
    try:
        return date.fromisoformat(_check(value, str, key))
    except ValueError as exc:
        raise DecodeError(f"field '{key}': {exc}") from None


def parse_datetime(value: Any, key: str) -> datetime:
    text = _check(value, str, key)
    # fromisoformat before 3.11 rejects a trailing "Z"
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise DecodeError(f"field '{key}': {exc}") from None


def optional_date(raw: Dict[str, Any], key: str) -> Optional[date]:
    value = raw.get(key)
    return None if value is None else parse_date(value, key)


def iso(value: Optional[date]) -> Optional[str]:
    return None if value is None else value.isoformat()


def enum_values(values: Optional[List[Enum]]) -> Optional[List[str]]:
    if values is None:
        return None
    return [v.value for v in values]
