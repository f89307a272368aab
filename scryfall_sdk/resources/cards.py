"""Card resource definitions.

See https://scryfall.com/docs/api/cards
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from scryfall_sdk.models import (
    ColorSymbol,
    ResourceKind,
    enum_list,
    enum_value,
    enum_values,
    expect_object,
    iso,
    kind_of,
    nested,
    nested_list,
    optional,
    optional_enum_list,
    optional_list,
    optional_nested,
    optional_nested_list,
    parse_date,
    required,
    required_list,
)
from scryfall_sdk.resources import HttpResource, Method, segment
from scryfall_sdk.resources.catalog import Catalog


class Legality(str, Enum):
    LEGAL = "legal"
    NOT_LEGAL = "not_legal"
    RESTRICTED = "restricted"
    BANNED = "banned"


class _StringFields:
    """Containers whose fields are all optional strings (URIs, prices)."""

    @classmethod
    def from_dict(cls, raw: Any):
        raw = expect_object(raw, cls.__name__)
        return cls(**{f.name: optional(raw, f.name, str) for f in fields(cls)})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ImageUris(_StringFields):
    small: Optional[str] = None
    normal: Optional[str] = None
    large: Optional[str] = None
    png: Optional[str] = None
    art_crop: Optional[str] = None
    border_crop: Optional[str] = None


@dataclass
class Prices(_StringFields):
    """Prices as decimal strings, ``None`` when Scryfall has no price."""

    usd: Optional[str] = None
    usd_foil: Optional[str] = None
    usd_etched: Optional[str] = None
    eur: Optional[str] = None
    eur_foil: Optional[str] = None
    tix: Optional[str] = None


@dataclass
class PurchaseUris(_StringFields):
    tcgplayer: Optional[str] = None
    cardmarket: Optional[str] = None
    cardhoarder: Optional[str] = None


@dataclass
class RelatedUris(_StringFields):
    gatherer: Optional[str] = None
    tcgplayer_infinite_articles: Optional[str] = None
    tcgplayer_infinite_decks: Optional[str] = None
    edhrec: Optional[str] = None


@dataclass
class CardFace:
    """One face of a multi-faced card (split, flip, transform, ...)."""

    name: str
    mana_cost: Optional[str] = None
    type_line: Optional[str] = None
    oracle_text: Optional[str] = None
    colors: Optional[List[ColorSymbol]] = None
    power: Optional[str] = None
    toughness: Optional[str] = None
    loyalty: Optional[str] = None
    flavor_text: Optional[str] = None
    artist: Optional[str] = None
    artist_id: Optional[str] = None
    illustration_id: Optional[str] = None
    flavor_name: Optional[str] = None
    image_uris: Optional[ImageUris] = None
    kind: ResourceKind = ResourceKind.CARD_FACE

    @classmethod
    def from_dict(cls, raw: Any) -> "CardFace":
        raw = expect_object(raw, "card_face")
        return cls(
            kind=kind_of(raw, ResourceKind.CARD_FACE),
            name=required(raw, "name", str),
            mana_cost=optional(raw, "mana_cost", str),
            type_line=optional(raw, "type_line", str),
            oracle_text=optional(raw, "oracle_text", str),
            colors=optional_enum_list(raw, "colors", ColorSymbol),
            power=optional(raw, "power", str),
            toughness=optional(raw, "toughness", str),
            loyalty=optional(raw, "loyalty", str),
            flavor_text=optional(raw, "flavor_text", str),
            artist=optional(raw, "artist", str),
            artist_id=optional(raw, "artist_id", str),
            illustration_id=optional(raw, "illustration_id", str),
            flavor_name=optional(raw, "flavor_name", str),
            image_uris=optional_nested(raw, "image_uris", ImageUris.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "name": self.name,
            "mana_cost": self.mana_cost,
            "type_line": self.type_line,
            "oracle_text": self.oracle_text,
            "colors": enum_values(self.colors),
            "power": self.power,
            "toughness": self.toughness,
            "loyalty": self.loyalty,
            "flavor_text": self.flavor_text,
            "artist": self.artist,
            "artist_id": self.artist_id,
            "illustration_id": self.illustration_id,
            "flavor_name": self.flavor_name,
            "image_uris": self.image_uris.to_dict() if self.image_uris else None,
        }


@dataclass
class RelatedCard:
    """An entry of ``all_parts``: a token, meld part or combo piece."""

    id: str
    component: str
    name: str
    type_line: str
    uri: str
    kind: ResourceKind = ResourceKind.RELATED_CARD

    @classmethod
    def from_dict(cls, raw: Any) -> "RelatedCard":
        raw = expect_object(raw, "related_card")
        return cls(
            kind=kind_of(raw, ResourceKind.RELATED_CARD),
            id=required(raw, "id", str),
            component=required(raw, "component", str),
            name=required(raw, "name", str),
            type_line=required(raw, "type_line", str),
            uri=required(raw, "uri", str),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "id": self.id,
            "component": self.component,
            "name": self.name,
            "type_line": self.type_line,
            "uri": self.uri,
        }


@dataclass
class Card:
    """A single printing of a card.

    Fields Scryfall omits for some layouts (reversible cards, tokens, art
    series) are optional even when they are present on most cards.
    """

    # Core
    id: str
    lang: str
    layout: str
    uri: str
    scryfall_uri: str
    rulings_uri: str
    prints_search_uri: str
    oracle_id: Optional[str] = None
    arena_id: Optional[int] = None
    mtgo_id: Optional[int] = None
    mtgo_foil_id: Optional[int] = None
    multiverse_ids: Optional[List[int]] = None
    tcgplayer_id: Optional[int] = None
    tcgplayer_etched_id: Optional[int] = None
    cardmarket_id: Optional[int] = None

    # Gameplay
    name: str = ""
    cmc: Optional[float] = None
    type_line: Optional[str] = None
    mana_cost: Optional[str] = None
    oracle_text: Optional[str] = None
    power: Optional[str] = None
    toughness: Optional[str] = None
    loyalty: Optional[str] = None
    defense: Optional[str] = None
    colors: Optional[List[ColorSymbol]] = None
    color_identity: List[ColorSymbol] = field(default_factory=list)
    color_indicator: Optional[List[ColorSymbol]] = None
    keywords: List[str] = field(default_factory=list)
    produced_mana: Optional[List[str]] = None
    card_faces: Optional[List[CardFace]] = None
    all_parts: Optional[List[RelatedCard]] = None
    legalities: Dict[str, Legality] = field(default_factory=dict)
    reserved: bool = False
    edhrec_rank: Optional[int] = None
    penny_rank: Optional[int] = None

    # Print
    released_at: Optional[date] = None
    set_id: str = ""
    set: str = ""
    set_name: str = ""
    set_type: str = ""
    set_uri: str = ""
    set_search_uri: str = ""
    scryfall_set_uri: str = ""
    collector_number: str = ""
    rarity: str = ""
    games: List[str] = field(default_factory=list)
    finishes: List[str] = field(default_factory=list)
    highres_image: bool = False
    image_status: str = ""
    image_uris: Optional[ImageUris] = None
    foil: bool = False
    nonfoil: bool = False
    oversized: bool = False
    promo: bool = False
    reprint: bool = False
    variation: bool = False
    digital: bool = False
    full_art: bool = False
    textless: bool = False
    booster: bool = False
    story_spotlight: bool = False
    border_color: str = ""
    frame: str = ""
    frame_effects: Optional[List[str]] = None
    security_stamp: Optional[str] = None
    card_back_id: Optional[str] = None
    artist: Optional[str] = None
    artist_ids: Optional[List[str]] = None
    illustration_id: Optional[str] = None
    flavor_text: Optional[str] = None
    watermark: Optional[str] = None
    prices: Prices = field(default_factory=Prices)
    related_uris: Optional[RelatedUris] = None
    purchase_uris: Optional[PurchaseUris] = None
    kind: ResourceKind = ResourceKind.CARD

    @classmethod
    def from_dict(cls, raw: Any) -> "Card":
        raw = expect_object(raw, "card")
        return cls(
            kind=kind_of(raw, ResourceKind.CARD),
            id=required(raw, "id", str),
            oracle_id=optional(raw, "oracle_id", str),
            arena_id=optional(raw, "arena_id", int),
            mtgo_id=optional(raw, "mtgo_id", int),
            mtgo_foil_id=optional(raw, "mtgo_foil_id", int),
            multiverse_ids=optional_list(raw, "multiverse_ids", int),
            tcgplayer_id=optional(raw, "tcgplayer_id", int),
            tcgplayer_etched_id=optional(raw, "tcgplayer_etched_id", int),
            cardmarket_id=optional(raw, "cardmarket_id", int),
            lang=required(raw, "lang", str),
            layout=required(raw, "layout", str),
            uri=required(raw, "uri", str),
            scryfall_uri=required(raw, "scryfall_uri", str),
            rulings_uri=required(raw, "rulings_uri", str),
            prints_search_uri=required(raw, "prints_search_uri", str),
            name=required(raw, "name", str),
            cmc=optional(raw, "cmc", float),
            type_line=optional(raw, "type_line", str),
            mana_cost=optional(raw, "mana_cost", str),
            oracle_text=optional(raw, "oracle_text", str),
            power=optional(raw, "power", str),
            toughness=optional(raw, "toughness", str),
            loyalty=optional(raw, "loyalty", str),
            defense=optional(raw, "defense", str),
            colors=optional_enum_list(raw, "colors", ColorSymbol),
            color_identity=enum_list(raw, "color_identity", ColorSymbol),
            color_indicator=optional_enum_list(raw, "color_indicator", ColorSymbol),
            keywords=required_list(raw, "keywords", str),
            produced_mana=optional_list(raw, "produced_mana", str),
            card_faces=optional_nested_list(raw, "card_faces", CardFace.from_dict),
            all_parts=optional_nested_list(raw, "all_parts", RelatedCard.from_dict),
            legalities=nested(raw, "legalities", _parse_legalities),
            reserved=required(raw, "reserved", bool),
            edhrec_rank=optional(raw, "edhrec_rank", int),
            penny_rank=optional(raw, "penny_rank", int),
            released_at=parse_date(required(raw, "released_at", str), "released_at"),
            set_id=required(raw, "set_id", str),
            set=required(raw, "set", str),
            set_name=required(raw, "set_name", str),
            set_type=required(raw, "set_type", str),
            set_uri=required(raw, "set_uri", str),
            set_search_uri=required(raw, "set_search_uri", str),
            scryfall_set_uri=required(raw, "scryfall_set_uri", str),
            collector_number=required(raw, "collector_number", str),
            rarity=required(raw, "rarity", str),
            games=required_list(raw, "games", str),
            finishes=required_list(raw, "finishes", str),
            highres_image=required(raw, "highres_image", bool),
            image_status=required(raw, "image_status", str),
            image_uris=optional_nested(raw, "image_uris", ImageUris.from_dict),
            foil=required(raw, "foil", bool),
            nonfoil=required(raw, "nonfoil", bool),
            oversized=required(raw, "oversized", bool),
            promo=required(raw, "promo", bool),
            reprint=required(raw, "reprint", bool),
            variation=required(raw, "variation", bool),
            digital=required(raw, "digital", bool),
            full_art=required(raw, "full_art", bool),
            textless=required(raw, "textless", bool),
            booster=required(raw, "booster", bool),
            story_spotlight=required(raw, "story_spotlight", bool),
            border_color=required(raw, "border_color", str),
            frame=required(raw, "frame", str),
            frame_effects=optional_list(raw, "frame_effects", str),
            security_stamp=optional(raw, "security_stamp", str),
            card_back_id=optional(raw, "card_back_id", str),
            artist=optional(raw, "artist", str),
            artist_ids=optional_list(raw, "artist_ids", str),
            illustration_id=optional(raw, "illustration_id", str),
            flavor_text=optional(raw, "flavor_text", str),
            watermark=optional(raw, "watermark", str),
            prices=nested(raw, "prices", Prices.from_dict),
            related_uris=optional_nested(raw, "related_uris", RelatedUris.from_dict),
            purchase_uris=optional_nested(raw, "purchase_uris", PurchaseUris.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "id": self.id,
            "oracle_id": self.oracle_id,
            "arena_id": self.arena_id,
            "mtgo_id": self.mtgo_id,
            "mtgo_foil_id": self.mtgo_foil_id,
            "multiverse_ids": self.multiverse_ids,
            "tcgplayer_id": self.tcgplayer_id,
            "tcgplayer_etched_id": self.tcgplayer_etched_id,
            "cardmarket_id": self.cardmarket_id,
            "lang": self.lang,
            "layout": self.layout,
            "uri": self.uri,
            "scryfall_uri": self.scryfall_uri,
            "rulings_uri": self.rulings_uri,
            "prints_search_uri": self.prints_search_uri,
            "name": self.name,
            "cmc": self.cmc,
            "type_line": self.type_line,
            "mana_cost": self.mana_cost,
            "oracle_text": self.oracle_text,
            "power": self.power,
            "toughness": self.toughness,
            "loyalty": self.loyalty,
            "defense": self.defense,
            "colors": enum_values(self.colors),
            "color_identity": enum_values(self.color_identity),
            "color_indicator": enum_values(self.color_indicator),
            "keywords": list(self.keywords),
            "produced_mana": self.produced_mana,
            "card_faces": _dicts(self.card_faces),
            "all_parts": _dicts(self.all_parts),
            "legalities": {fmt: value.value for fmt, value in self.legalities.items()},
            "reserved": self.reserved,
            "edhrec_rank": self.edhrec_rank,
            "penny_rank": self.penny_rank,
            "released_at": iso(self.released_at),
            "set_id": self.set_id,
            "set": self.set,
            "set_name": self.set_name,
            "set_type": self.set_type,
            "set_uri": self.set_uri,
            "set_search_uri": self.set_search_uri,
            "scryfall_set_uri": self.scryfall_set_uri,
            "collector_number": self.collector_number,
            "rarity": self.rarity,
            "games": list(self.games),
            "finishes": list(self.finishes),
            "highres_image": self.highres_image,
            "image_status": self.image_status,
            "image_uris": self.image_uris.to_dict() if self.image_uris else None,
            "foil": self.foil,
            "nonfoil": self.nonfoil,
            "oversized": self.oversized,
            "promo": self.promo,
            "reprint": self.reprint,
            "variation": self.variation,
            "digital": self.digital,
            "full_art": self.full_art,
            "textless": self.textless,
            "booster": self.booster,
            "story_spotlight": self.story_spotlight,
            "border_color": self.border_color,
            "frame": self.frame,
            "frame_effects": self.frame_effects,
            "security_stamp": self.security_stamp,
            "card_back_id": self.card_back_id,
            "artist": self.artist,
            "artist_ids": self.artist_ids,
            "illustration_id": self.illustration_id,
            "flavor_text": self.flavor_text,
            "watermark": self.watermark,
            "prices": self.prices.to_dict(),
            "related_uris": self.related_uris.to_dict() if self.related_uris else None,
            "purchase_uris": self.purchase_uris.to_dict() if self.purchase_uris else None,
        }


@dataclass
class CardPage:
    """One page of search results."""

    total_cards: int
    has_more: bool
    data: List[Card] = field(default_factory=list)
    next_page: Optional[str] = None
    warnings: Optional[List[str]] = None
    kind: ResourceKind = ResourceKind.LIST

    @classmethod
    def from_dict(cls, raw: Any) -> "CardPage":
        raw = expect_object(raw, "list")
        return cls(
            kind=kind_of(raw, ResourceKind.LIST),
            total_cards=required(raw, "total_cards", int),
            has_more=required(raw, "has_more", bool),
            next_page=optional(raw, "next_page", str),
            data=nested_list(raw, "data", Card.from_dict),
            warnings=optional_list(raw, "warnings", str),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "total_cards": self.total_cards,
            "has_more": self.has_more,
            "next_page": self.next_page,
            "data": [card.to_dict() for card in self.data],
            "warnings": self.warnings,
        }


@dataclass
class CardCollection:
    """Result of a collection lookup.

    ``not_found`` holds the identifiers (as sent) that matched no card.
    """

    data: List[Card] = field(default_factory=list)
    not_found: List[Dict[str, Any]] = field(default_factory=list)
    kind: ResourceKind = ResourceKind.LIST

    @classmethod
    def from_dict(cls, raw: Any) -> "CardCollection":
        raw = expect_object(raw, "list")
        return cls(
            kind=kind_of(raw, ResourceKind.LIST),
            not_found=required_list(raw, "not_found", dict),
            data=nested_list(raw, "data", Card.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "not_found": [dict(item) for item in self.not_found],
            "data": [card.to_dict() for card in self.data],
        }


def _parse_legalities(raw: Any) -> Dict[str, Legality]:
    raw = expect_object(raw, "legalities")
    return {fmt: enum_value(Legality, value, fmt) for fmt, value in raw.items()}


def _dicts(items: Optional[Sequence[Any]]) -> Optional[List[Dict[str, Any]]]:
    if items is None:
        return None
    return [item.to_dict() for item in items]


# ------------------------------------------------------------------
# Single card endpoints
# ------------------------------------------------------------------


class CardResource(HttpResource[Card]):
    """Endpoints for ``/cards/*`` that return a single card."""

    model = Card

    def path(self) -> str:
        if isinstance(self, ById):
            card = segment(self.id)
        elif isinstance(self, ByArenaId):
            card = f"arena/{segment(self.id)}"
        elif isinstance(self, ByCardmarketId):
            card = f"cardmarket/{segment(self.id)}"
        elif isinstance(self, ByCode):
            card = f"{segment(self.code)}/{segment(self.number)}"
        elif isinstance(self, ByMtgoId):
            card = f"mtgo/{segment(self.id)}"
        elif isinstance(self, ByMultiverseId):
            card = f"multiverse/{segment(self.id)}"
        elif isinstance(self, ByTcgplayerId):
            card = f"tcgplayer/{segment(self.id)}"
        elif isinstance(self, NamedExact):
            card = f"named?exact={segment(self.name)}"
        elif isinstance(self, NamedFuzzy):
            card = f"named?fuzzy={segment(self.name)}"
        elif isinstance(self, Random):
            card = "random" if self.q is None else f"random?q={segment(self.q)}"
        else:
            raise TypeError(f"Unknown card resource: {self!r}")
        return f"cards/{card}"


@dataclass(frozen=True)
class ById(CardResource):
    """``GET /cards/:id`` (Scryfall id)"""

    id: str


@dataclass(frozen=True)
class ByArenaId(CardResource):
    """``GET /cards/arena/:id``"""

    id: int


@dataclass(frozen=True)
class ByCardmarketId(CardResource):
    """``GET /cards/cardmarket/:id``"""

    id: int


@dataclass(frozen=True)
class ByCode(CardResource):
    """``GET /cards/:code/:number`` (set code and collector number)"""

    code: str
    number: str


@dataclass(frozen=True)
class ByMtgoId(CardResource):
    """``GET /cards/mtgo/:id``"""

    id: int


@dataclass(frozen=True)
class ByMultiverseId(CardResource):
    """``GET /cards/multiverse/:id``"""

    id: int


@dataclass(frozen=True)
class ByTcgplayerId(CardResource):
    """``GET /cards/tcgplayer/:id``"""

    id: int


@dataclass(frozen=True)
class NamedExact(CardResource):
    """``GET /cards/named?exact=:name``"""

    name: str


@dataclass(frozen=True)
class NamedFuzzy(CardResource):
    """``GET /cards/named?fuzzy=:name``

    Returns the exact match when there is one.
    """

    name: str


@dataclass(frozen=True)
class Random(CardResource):
    """``GET /cards/random``, optionally limited by a search query ``q``."""

    q: Optional[str] = None


# ------------------------------------------------------------------
# Search and autocomplete
# ------------------------------------------------------------------


class UniqueMode(str, Enum):
    CARDS = "cards"
    ART = "art"
    PRINTS = "prints"


class SortOrder(str, Enum):
    NAME = "name"
    SET = "set"
    RELEASED = "released"
    RARITY = "rarity"
    COLOR = "color"
    USD = "usd"
    TIX = "tix"
    EUR = "eur"
    CMC = "cmc"
    POWER = "power"
    TOUGHNESS = "toughness"
    EDHREC = "edhrec"
    PENNY = "penny"
    ARTIST = "artist"
    REVIEW = "review"


class SortDirection(str, Enum):
    AUTO = "auto"
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SearchQueryParams:
    """Query parameters of ``/cards/search``; ``None`` means Scryfall's default."""

    q: str
    unique: Optional[UniqueMode] = None
    order: Optional[SortOrder] = None
    dir: Optional[SortDirection] = None
    include_extras: Optional[bool] = None
    include_multilingual: Optional[bool] = None
    include_variations: Optional[bool] = None
    page: Optional[int] = None

    def to_query(self) -> str:
        params = [("q", self.q)]
        for name in ("unique", "order", "dir"):
            value = getattr(self, name)
            if value is not None:
                params.append((name, _enum_text(value)))
        for name in ("include_extras", "include_multilingual", "include_variations"):
            value = getattr(self, name)
            if value is not None:
                params.append((name, "true" if value else "false"))
        if self.page is not None:
            params.append(("page", str(self.page)))
        return "&".join(f"{key}={segment(value)}" for key, value in params)


def _enum_text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


@dataclass(frozen=True)
class Search(HttpResource[CardPage]):
    """``GET /cards/search``"""

    params: SearchQueryParams

    model = CardPage

    def path(self) -> str:
        return f"cards/search?{self.params.to_query()}"


@dataclass(frozen=True)
class Autocomplete(HttpResource[Catalog]):
    """``GET /cards/autocomplete?q=:q``: up to 20 card names starting with ``q``."""

    q: str
    include_extras: Optional[bool] = None

    model = Catalog

    def path(self) -> str:
        path = f"cards/autocomplete?q={segment(self.q)}"
        if self.include_extras is not None:
            path += f"&include_extras={'true' if self.include_extras else 'false'}"
        return path


# ------------------------------------------------------------------
# Collection lookup
# ------------------------------------------------------------------


class CardIdentifier:
    """One identifier in a collection lookup.

    Identifiers go on the wire untagged: each variant writes only its own
    field names, which is how Scryfall tells them apart.
    """

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ScryfallId(CardIdentifier):
    id: str


@dataclass(frozen=True)
class OracleId(CardIdentifier):
    oracle_id: str


@dataclass(frozen=True)
class MtgoId(CardIdentifier):
    mtgo_id: int


@dataclass(frozen=True)
class MultiverseId(CardIdentifier):
    multiverse_id: int


@dataclass(frozen=True)
class IllustrationId(CardIdentifier):
    illustration_id: str


@dataclass(frozen=True)
class Name(CardIdentifier):
    name: str


@dataclass(frozen=True)
class NameAndSet(CardIdentifier):
    name: str
    set: str


@dataclass(frozen=True)
class CollectorNumberAndSet(CardIdentifier):
    collector_number: str
    set: str


@dataclass(frozen=True)
class Collection(HttpResource[CardCollection]):
    """``POST /cards/collection``

    Not idempotent from this library's point of view; the client never
    repeats it.
    """

    identifiers: Sequence[CardIdentifier]

    model = CardCollection

    def method(self) -> Method:
        return Method.POST

    def path(self) -> str:
        return "cards/collection"

    def body(self) -> Optional[str]:
        payload = {"identifiers": [ident.to_dict() for ident in self.identifiers]}
        return json.dumps(payload, separators=(",", ":"))
