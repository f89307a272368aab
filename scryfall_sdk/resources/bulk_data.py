"""Bulk data resource definitions.

See https://scryfall.com/docs/api/bulk-data
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from scryfall_sdk.models import (
    ResourceKind,
    enum_value,
    expect_object,
    kind_of,
    nested_list,
    optional,
    parse_datetime,
    required,
)
from scryfall_sdk.resources import HttpResource, segment


class EntryKind(str, Enum):
    """Value of ``bulk_data.type``."""

    ALL_CARDS = "all_cards"
    DEFAULT_CARDS = "default_cards"
    ORACLE_CARDS = "oracle_cards"
    RULINGS = "rulings"
    UNIQUE_ARTWORK = "unique_artwork"


@dataclass
class BulkDataEntry:
    """One downloadable bulk file."""

    id: str
    kind: EntryKind
    updated_at: datetime
    uri: str
    name: str
    description: str
    compressed_size: Optional[int]
    download_uri: str
    content_type: str
    content_encoding: str
    item_kind: ResourceKind = ResourceKind.BULK_DATA

    @classmethod
    def from_dict(cls, raw: Any) -> "BulkDataEntry":
        raw = expect_object(raw, "bulk_data")
        return cls(
            item_kind=kind_of(raw, ResourceKind.BULK_DATA),
            id=required(raw, "id", str),
            kind=enum_value(EntryKind, required(raw, "type", str), "type"),
            updated_at=parse_datetime(required(raw, "updated_at", str), "updated_at"),
            uri=required(raw, "uri", str),
            name=required(raw, "name", str),
            description=required(raw, "description", str),
            compressed_size=_compressed_size(raw),
            download_uri=required(raw, "download_uri", str),
            content_type=required(raw, "content_type", str),
            content_encoding=required(raw, "content_encoding", str),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.item_kind.value,
            "id": self.id,
            "type": self.kind.value,
            "updated_at": self.updated_at.isoformat(),
            "uri": self.uri,
            "name": self.name,
            "description": self.description,
            "compressed_size": self.compressed_size,
            "download_uri": self.download_uri,
            "content_type": self.content_type,
            "content_encoding": self.content_encoding,
        }


@dataclass
class BulkData:
    """List of bulk data entries."""

    has_more: bool
    data: List[BulkDataEntry] = field(default_factory=list)
    kind: ResourceKind = ResourceKind.LIST

    @classmethod
    def from_dict(cls, raw: Any) -> "BulkData":
        raw = expect_object(raw, "list")
        kind = kind_of(raw, ResourceKind.LIST, ResourceKind.BULK_DATA)
        if kind is ResourceKind.BULK_DATA:
            # Filtering by id or type returns the bare entry.
            return cls(has_more=False, data=[BulkDataEntry.from_dict(raw)])
        return cls(
            kind=kind,
            has_more=required(raw, "has_more", bool),
            data=nested_list(raw, "data", BulkDataEntry.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object": self.kind.value,
            "has_more": self.has_more,
            "data": [entry.to_dict() for entry in self.data],
        }


class BulkDataResource(HttpResource[BulkData]):
    """Endpoints for ``/bulk-data``."""

    model = BulkData

    def path(self) -> str:
        if isinstance(self, All):
            return "bulk-data"
        if isinstance(self, Filter):
            return f"bulk-data/{segment(self.value)}"
        raise TypeError(f"Unknown bulk data resource: {self!r}")


@dataclass(frozen=True)
class All(BulkDataResource):
    """``GET /bulk-data``"""


@dataclass(frozen=True)
class Filter(BulkDataResource):
    """``GET /bulk-data/:id`` or ``GET /bulk-data/:type``.

    Scryfall has two endpoints here; both filter by a single value, so one
    variant covers them.
    """

    value: str


def _compressed_size(raw: Dict[str, Any]) -> Optional[int]:
    # Newer payloads call it "size".
    value = optional(raw, "compressed_size", int)
    if value is None:
        value = optional(raw, "size", int)
    return value
