"""Card sets resource definitions.

See https://scryfall.com/docs/api/sets
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from scryfall_sdk.models import (
    ResourceKind,
    expect_object,
    iso,
    kind_of,
    nested_list,
    optional,
    optional_date,
    required,
)
from scryfall_sdk.resources import HttpResource, segment


class SetKind(str, Enum):
    """Value of ``set.set_type``."""

    ALCHEMY = "alchemy"
    ARCHENEMY = "archenemy"
    ARSENAL = "arsenal"
    BOX = "box"
    COMMANDER = "commander"
    CORE = "core"
    DRAFT_INNOVATION = "draft_innovation"
    DUEL_DECK = "duel_deck"
    ETERNAL = "eternal"
    EXPANSION = "expansion"
    FROM_THE_VAULT = "from_the_vault"
    FUNNY = "funny"
    MASTERPIECE = "masterpiece"
    MASTERS = "masters"
    MEMORABILIA = "memorabilia"
    MINIGAME = "minigame"
    PLANECHASE = "planechase"
    PREMIUM_DECK = "premium_deck"
    PROMO = "promo"
    SPELLBOOK = "spellbook"
    STARTER = "starter"
    TOKEN = "token"
    TREASURE_CHEST = "treasure_chest"
    VANGUARD = "vanguard"


@dataclass
class CardSet:
    """A set (expansion, promo group, token set, ...).

    ``kind`` is a :class:`SetKind` for the set types listed there and the raw
    ``set_type`` string for any type Scryfall adds later.
    """

    id: str
    code: str
    name: str
    uri: str
    scryfall_uri: str
    search_uri: str
    kind: Union[SetKind, str]
    card_count: int
    digital: bool
    nonfoil_only: bool
    foil_only: bool
    icon_svg_uri: str
    released_at: Optional[date] = None
    mtgo_code: Optional[str] = None
    arena_code: Optional[str] = None
    tcgplayer_id: Optional[int] = None
    parent_set_code: Optional[str] = None
    block_code: Optional[str] = None
    block: Optional[str] = None
    printed_size: Optional[int] = None
    item_kind: ResourceKind = ResourceKind.SET

    @classmethod
    def from_dict(cls, raw: Any) -> "CardSet":
        raw = expect_object(raw, "set")
        return cls(
            item_kind=kind_of(raw, ResourceKind.SET),
            id=required(raw, "id", str),
            code=required(raw, "code", str),
            mtgo_code=optional(raw, "mtgo_code", str),
            arena_code=optional(raw, "arena_code", str),
            tcgplayer_id=optional(raw, "tcgplayer_id", int),
            name=required(raw, "name", str),
            uri=required(raw, "uri", str),
            scryfall_uri=required(raw, "scryfall_uri", str),
            search_uri=required(raw, "search_uri", str),
            released_at=optional_date(raw, "released_at"),
            kind=_set_kind(required(raw, "set_type", str)),
            card_count=required(raw, "card_count", int),
            printed_size=optional(raw, "printed_size", int),
            digital=required(raw, "digital", bool),
            nonfoil_only=required(raw, "nonfoil_only", bool),
            foil_only=required(raw, "foil_only", bool),
            icon_svg_uri=required(raw, "icon_svg_uri", str),
            parent_set_code=optional(raw, "parent_set_code", str),
            block_code=optional(raw, "block_code", str),
            block=optional(raw, "block", str),
        )

    @property
    def set_type(self) -> str:
        """``set_type`` as sent by Scryfall."""
        return self.kind.value if isinstance(self.kind, SetKind) else self.kind

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.item_kind.value,
            "id": self.id,
            "code": self.code,
            "mtgo_code": self.mtgo_code,
            "arena_code": self.arena_code,
            "tcgplayer_id": self.tcgplayer_id,
            "name": self.name,
            "uri": self.uri,
            "scryfall_uri": self.scryfall_uri,
            "search_uri": self.search_uri,
            "released_at": iso(self.released_at),
            "set_type": self.set_type,
            "card_count": self.card_count,
            "printed_size": self.printed_size,
            "digital": self.digital,
            "nonfoil_only": self.nonfoil_only,
            "foil_only": self.foil_only,
            "icon_svg_uri": self.icon_svg_uri,
            "parent_set_code": self.parent_set_code,
            "block_code": self.block_code,
            "block": self.block,
        }


@dataclass
class CardSetList:
    """Every set, newest first."""

    has_more: bool
    data: List[CardSet] = field(default_factory=list)
    kind: ResourceKind = ResourceKind.LIST

    @classmethod
    def from_dict(cls, raw: Any) -> "CardSetList":
        raw = expect_object(raw, "list")
        return cls(
            kind=kind_of(raw, ResourceKind.LIST),
            has_more=required(raw, "has_more", bool),
            data=nested_list(raw, "data", CardSet.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "has_more": self.has_more,
            "data": [card_set.to_dict() for card_set in self.data],
        }


@dataclass(frozen=True)
class CardSetListResource(HttpResource[CardSetList]):
    """``GET /sets``"""

    model = CardSetList

    def path(self) -> str:
        return "sets"


class CardSetResource(HttpResource[CardSet]):
    """Endpoints for ``/sets/*`` (single set)."""

    model = CardSet

    def path(self) -> str:
        if isinstance(self, Filter):
            return f"sets/{segment(self.value)}"
        if isinstance(self, WithTcgPlayerId):
            return f"sets/tcgplayer/{segment(self.id)}"
        raise TypeError(f"Unknown card set resource: {self!r}")


@dataclass(frozen=True)
class Filter(CardSetResource):
    """``GET /sets/:code`` or ``GET /sets/:id``.

    Both endpoints look a set up by one value, so one variant covers them.
    """

    value: str


@dataclass(frozen=True)
class WithTcgPlayerId(CardSetResource):
    """``GET /sets/tcgplayer/:id``"""

    id: str


def _set_kind(value: str) -> Union[SetKind, str]:
    try:
        return SetKind(value)
    except ValueError:
        return value
