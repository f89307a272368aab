"""Ruling resource definitions.

See https://scryfall.com/docs/api/rulings
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

from scryfall_sdk.models import (
    ResourceKind,
    expect_object,
    kind_of,
    nested_list,
    parse_date,
    required,
)
from scryfall_sdk.resources import HttpResource, segment


@dataclass
class Ruling:
    """An Oracle ruling or a note from Wizards/Scryfall."""

    oracle_id: str
    source: str
    published_at: date
    comment: str
    kind: ResourceKind = ResourceKind.RULING

    @classmethod
    def from_dict(cls, raw: Any) -> "Ruling":
        raw = expect_object(raw, "ruling")
        return cls(
            kind=kind_of(raw, ResourceKind.RULING),
            oracle_id=required(raw, "oracle_id", str),
            source=required(raw, "source", str),
            published_at=parse_date(required(raw, "published_at", str), "published_at"),
            comment=required(raw, "comment", str),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "oracle_id": self.oracle_id,
            "source": self.source,
            "published_at": self.published_at.isoformat(),
            "comment": self.comment,
        }


@dataclass
class RulingList:
    has_more: bool
    data: List[Ruling] = field(default_factory=list)
    kind: ResourceKind = ResourceKind.LIST

    @classmethod
    def from_dict(cls, raw: Any) -> "RulingList":
        raw = expect_object(raw, "list")
        return cls(
            kind=kind_of(raw, ResourceKind.LIST),
            has_more=required(raw, "has_more", bool),
            data=nested_list(raw, "data", Ruling.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "has_more": self.has_more,
            "data": [ruling.to_dict() for ruling in self.data],
        }


class RulingListResource(HttpResource[RulingList]):
    """Endpoints for ``/cards/**/rulings``."""

    model = RulingList

    def path(self) -> str:
        if isinstance(self, ByCardId):
            card = segment(self.id)
        elif isinstance(self, BySetCode):
            card = f"{segment(self.code)}/{segment(self.number)}"
        elif isinstance(self, ByArenaId):
            card = f"arena/{self.id}"
        elif isinstance(self, ByMtgoId):
            card = f"mtgo/{self.id}"
        elif isinstance(self, ByMultiverseId):
            card = f"multiverse/{self.id}"
        else:
            raise TypeError(f"Unknown ruling resource: {self!r}")
        return f"cards/{card}/rulings"


@dataclass(frozen=True)
class ByCardId(RulingListResource):
    """``GET /cards/:id/rulings`` (Scryfall id)"""

    id: str


@dataclass(frozen=True)
class BySetCode(RulingListResource):
    """``GET /cards/:code/:number/rulings``"""

    code: str
    number: int


@dataclass(frozen=True)
class ByArenaId(RulingListResource):
    """``GET /cards/arena/:id/rulings``"""

    id: int


@dataclass(frozen=True)
class ByMtgoId(RulingListResource):
    """``GET /cards/mtgo/:id/rulings``"""

    id: int


@dataclass(frozen=True)
class ByMultiverseId(RulingListResource):
    """``GET /cards/multiverse/:id/rulings``"""

    id: int
