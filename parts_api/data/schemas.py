"""
Part records, dataset snapshots, and listing filter/page schemas.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

Number = Union[int, float]

CANONICAL_FIELDS = ("serial", "name", "price", "qty")


@dataclass(frozen=True)
class Part:
    """One source row with its canonical fields resolved.

    `fields` keeps every trimmed source column in header order; the
    canonical values overlay it when the record is read or serialised.
    """
    fields: Mapping[str, Any]
    serial: Optional[str] = None
    name: Optional[str] = None
    price: Union[Number, str, None] = None
    qty: Union[Number, str, None] = None

    def get(self, key: str, default: Any = None) -> Any:
        """Field value as exposed to clients (canonical overlay applied)."""
        if key in CANONICAL_FIELDS:
            value = getattr(self, key)
            return default if value is None else value
        return self.fields.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.fields)
        for key in CANONICAL_FIELDS:
            value = getattr(self, key)
            if value is None:
                out.pop(key, None)
            else:
                out[key] = value
        return out


@dataclass(frozen=True)
class Snapshot:
    """One fully loaded version of the dataset. Never mutated once built."""
    parts: tuple[Part, ...] = ()
    index: Mapping[str, Part] = field(default_factory=lambda: MappingProxyType({}))
    source: Optional[Path] = None
    loaded_at: Optional[dt.datetime] = None

    @property
    def count(self) -> int:
        return len(self.parts)

    def lookup(self, serial: str) -> Optional[Part]:
        """Case-insensitive exact serial lookup."""
        return self.index.get(str(serial).lower())


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass
class PartFilter:
    """Listing parameters. Paging values are clamped when applied, never rejected."""
    query: Optional[str] = None
    serial: Optional[str] = None
    sort_by: Optional[str] = None
    sort_order: SortOrder = SortOrder.ASC
    limit: Optional[int] = None
    page: Optional[int] = None


@dataclass
class Page:
    total: int
    page: int
    per_page: int
    total_pages: int
    data: list[Part] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "page": self.page,
            "per_page": self.per_page,
            "total_pages": self.total_pages,
            "data": [p.to_dict() for p in self.data],
        }
