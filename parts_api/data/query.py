"""
Query engine: search, exact lookup, type-aware sorting, pagination.

All functions are pure over a Snapshot (or a list of parts) and never raise
on missing fields or empty results.
"""
from __future__ import annotations

import math
from functools import cmp_to_key
from typing import Any, Optional

from parts_api.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from parts_api.data.normalize import is_number, try_number
from parts_api.data.schemas import Page, Part, PartFilter, Snapshot, SortOrder


# ---------------------------------------------------------------------------
# Lookup & filtering
# ---------------------------------------------------------------------------

def get_part(snapshot: Snapshot, serial: str) -> Optional[Part]:
    """Exact serial lookup, case-insensitive. None when absent."""
    return snapshot.lookup(serial)


def _contains(value: Optional[str], needle: str) -> bool:
    return value is not None and needle in str(value).lower()


def search_parts(parts: list[Part] | tuple[Part, ...], query: str) -> list[Part]:
    """Parts whose name or serial contains query (case-insensitive)."""
    needle = str(query).lower()
    return [p for p in parts if _contains(p.name, needle) or _contains(p.serial, needle)]


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

def _sort_text(value: Any) -> str:
    return "" if value is None else str(value).lower()


def compare_values(a: Any, b: Any) -> int:
    """Numeric compare when both sides are numeric, else case-insensitive text."""
    na, nb = try_number(a), try_number(b)
    if is_number(na) and is_number(nb):
        return (na > nb) - (na < nb)
    sa, sb = _sort_text(na), _sort_text(nb)
    return (sa > sb) - (sa < sb)


def sort_parts(
    parts: list[Part] | tuple[Part, ...],
    sort_by: str,
    order: SortOrder = SortOrder.ASC,
) -> list[Part]:
    """Stable sort by one field. Equal keys keep their input order in both directions."""
    direction = -1 if order == SortOrder.DESC else 1

    def _cmp(x: Part, y: Part) -> int:
        return compare_values(x.get(sort_by), y.get(sort_by)) * direction

    return sorted(parts, key=cmp_to_key(_cmp))


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

def paginate(parts: list[Part] | tuple[Part, ...], limit: Optional[int] = None, page: Optional[int] = None) -> Page:
    per_page = min(MAX_PAGE_SIZE, max(1, limit or DEFAULT_PAGE_SIZE))
    page_num = max(1, page or 1)
    total = len(parts)
    start = (page_num - 1) * per_page
    return Page(
        total=total,
        page=page_num,
        per_page=per_page,
        total_pages=math.ceil(total / per_page),
        data=list(parts[start:start + per_page]),
    )


def list_parts(snapshot: Snapshot, flt: PartFilter) -> Page:
    """Filter → sort → paginate against a single snapshot."""
    results: list[Part] | tuple[Part, ...]
    if flt.serial:
        found = snapshot.lookup(flt.serial)
        results = [found] if found is not None else []
    elif flt.query:
        results = search_parts(snapshot.parts, flt.query)
    else:
        results = snapshot.parts

    if flt.sort_by:
        results = sort_parts(results, flt.sort_by, flt.sort_order)

    return paginate(results, flt.limit, flt.page)
