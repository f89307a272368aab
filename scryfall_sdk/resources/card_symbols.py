"""Card symbols resource definitions.

See https://scryfall.com/docs/api/card-symbols
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from scryfall_sdk.models import (
    ColorSymbol,
    ResourceKind,
    enum_list,
    enum_values,
    expect_object,
    kind_of,
    nested_list,
    optional,
    optional_list,
    required,
)
from scryfall_sdk.resources import HttpResource, segment


@dataclass
class CardSymbol:
    """A symbol that can appear on a card, e.g. ``{T}`` or ``{W/U}``."""

    symbol: str
    english: str
    transposable: bool
    represents_mana: bool
    appears_in_mana_costs: bool
    funny: bool
    colors: List[ColorSymbol] = field(default_factory=list)
    svg_uri: Optional[str] = None
    loose_variant: Optional[str] = None
    cmc: Optional[float] = None
    gatherer_alternates: Optional[List[str]] = None
    kind: ResourceKind = ResourceKind.CARD_SYMBOL

    @classmethod
    def from_dict(cls, raw: Any) -> "CardSymbol":
        raw = expect_object(raw, "card_symbol")
        return cls(
            kind=kind_of(raw, ResourceKind.CARD_SYMBOL),
            symbol=required(raw, "symbol", str),
            svg_uri=optional(raw, "svg_uri", str),
            loose_variant=optional(raw, "loose_variant", str),
            english=required(raw, "english", str),
            transposable=required(raw, "transposable", bool),
            represents_mana=required(raw, "represents_mana", bool),
            appears_in_mana_costs=required(raw, "appears_in_mana_costs", bool),
            cmc=optional(raw, "cmc", float),
            funny=required(raw, "funny", bool),
            colors=enum_list(raw, "colors", ColorSymbol),
            gatherer_alternates=optional_list(raw, "gatherer_alternates", str),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "symbol": self.symbol,
            "svg_uri": self.svg_uri,
            "loose_variant": self.loose_variant,
            "english": self.english,
            "transposable": self.transposable,
            "represents_mana": self.represents_mana,
            "appears_in_mana_costs": self.appears_in_mana_costs,
            "cmc": self.cmc,
            "funny": self.funny,
            "colors": enum_values(self.colors),
            "gatherer_alternates": self.gatherer_alternates,
        }


@dataclass
class CardSymbolList:
    """Every card symbol Scryfall knows."""

    has_more: bool
    data: List[CardSymbol] = field(default_factory=list)
    kind: ResourceKind = ResourceKind.LIST

    @classmethod
    def from_dict(cls, raw: Any) -> "CardSymbolList":
        raw = expect_object(raw, "list")
        return cls(
            kind=kind_of(raw, ResourceKind.LIST),
            has_more=required(raw, "has_more", bool),
            data=nested_list(raw, "data", CardSymbol.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "has_more": self.has_more,
            "data": [symbol.to_dict() for symbol in self.data],
        }


@dataclass
class ManaCost:
    """A parsed mana cost."""

    cost: str
    cmc: float
    colorless: bool
    monocolored: bool
    multicolored: bool
    colors: List[ColorSymbol] = field(default_factory=list)
    kind: ResourceKind = ResourceKind.MANA_COST

    @classmethod
    def from_dict(cls, raw: Any) -> "ManaCost":
        raw = expect_object(raw, "mana_cost")
        return cls(
            kind=kind_of(raw, ResourceKind.MANA_COST),
            cost=required(raw, "cost", str),
            colors=enum_list(raw, "colors", ColorSymbol),
            cmc=required(raw, "cmc", float),
            colorless=required(raw, "colorless", bool),
            monocolored=required(raw, "monocolored", bool),
            multicolored=required(raw, "multicolored", bool),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "cost": self.cost,
            "colors": enum_values(self.colors),
            "cmc": self.cmc,
            "colorless": self.colorless,
            "monocolored": self.monocolored,
            "multicolored": self.multicolored,
        }


@dataclass(frozen=True)
class CardSymbolsResource(HttpResource[CardSymbolList]):
    """``GET /symbology``"""

    model = CardSymbolList

    def path(self) -> str:
        return "symbology"


@dataclass(frozen=True)
class ManaCostResource(HttpResource[ManaCost]):
    """``GET /symbology/parse-mana?cost=:cost``"""

    cost: str

    model = ManaCost

    def path(self) -> str:
        return f"symbology/parse-mana?cost={segment(self.cost)}"
