"""Catalog resource definitions.

See https://scryfall.com/docs/api/catalogs
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from scryfall_sdk.models import (
    ResourceKind,
    expect_object,
    kind_of,
    optional,
    required,
    required_list,
)
from scryfall_sdk.resources import HttpResource


class Catalogs(str, Enum):
    """The named catalogs under ``/catalog``."""

    ABILITY_WORDS = "ability-words"
    ARTIFACT_TYPES = "artifact-types"
    ARTIST_NAMES = "artist-names"
    CARD_NAMES = "card-names"
    CREATURE_TYPES = "creature-types"
    ENCHANTMENT_TYPES = "enchantment-types"
    KEYWORD_ABILITIES = "keyword-abilities"
    KEYWORD_ACTIONS = "keyword-actions"
    LAND_TYPES = "land-types"
    LOYALTIES = "loyalties"
    PLANESWALKER_TYPES = "planeswalker-types"
    POWERS = "powers"
    SPELL_TYPES = "spell-types"
    TOUGHNESSES = "toughnesses"
    WATERMARKS = "watermarks"
    WORD_BANK = "word-bank"


@dataclass
class Catalog:
    """A list of strings, e.g. every creature type."""

    total_values: int
    data: List[str] = field(default_factory=list)
    uri: Optional[str] = None
    kind: ResourceKind = ResourceKind.CATALOG

    @classmethod
    def from_dict(cls, raw: Any) -> "Catalog":
        raw = expect_object(raw, "catalog")
        return cls(
            kind=kind_of(raw, ResourceKind.CATALOG),
            uri=optional(raw, "uri", str),
            total_values=required(raw, "total_values", int),
            data=required_list(raw, "data", str),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "uri": self.uri,
            "total_values": self.total_values,
            "data": list(self.data),
        }


@dataclass(frozen=True)
class CatalogResource(HttpResource[Catalog]):
    """``GET /catalog/:name``"""

    catalog: Catalogs

    model = Catalog

    def path(self) -> str:
        return f"catalog/{Catalogs(self.catalog).value}"
