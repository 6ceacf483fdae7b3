"""
Row normalisation: trimming, canonical field probing, numeric coercion.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Optional

import pandas as pd

from parts_api.config import NAME_FIELDS, PRICE_FIELDS, QTY_FIELDS, SERIAL_FIELDS
from parts_api.data.schemas import Part


# ---------------------------------------------------------------------------
# Numeric coercion
# ---------------------------------------------------------------------------

# Whole-string decimal literal: no hex, no "inf"/"nan", no digit separators
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def try_number(value: Any) -> Any:
    """Return value as int/float when the entire string is numeric, else unchanged.

    Used both when storing price/qty and when comparing values for sorting,
    so the two always agree on what counts as a number.
    """
    if value is None or is_number(value):
        return value
    if not isinstance(value, str):
        return value
    text = value.strip()
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    if _NUMBER_RE.fullmatch(text):
        return float(text)
    return value


# ---------------------------------------------------------------------------
# Canonical fields
# ---------------------------------------------------------------------------

def probe(fields: dict[str, Any], candidates: list[str]) -> Optional[Any]:
    """First non-empty value among candidate field names, or None."""
    for key in candidates:
        value = fields.get(key)
        if value is not None and value != "":
            return value
    return None


def clean_row(row: dict[Any, Any]) -> dict[str, Any]:
    """Trim header names and string values; drop cells pandas filled with NaN."""
    fields: dict[str, Any] = {}
    for key, value in row.items():
        if not isinstance(value, str) and pd.isna(value):
            continue
        fields[str(key).strip()] = value.strip() if isinstance(value, str) else value
    return fields


def normalize_row(row: dict[Any, Any]) -> Part:
    """Build a Part from one raw source row."""
    fields = clean_row(row)
    serial = probe(fields, SERIAL_FIELDS)
    name = probe(fields, NAME_FIELDS)
    return Part(
        fields=MappingProxyType(fields),
        serial=None if serial is None else str(serial),
        name=None if name is None else str(name),
        price=try_number(probe(fields, PRICE_FIELDS)),
        qty=try_number(probe(fields, QTY_FIELDS)),
    )
