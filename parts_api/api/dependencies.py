"""
FastAPI dependencies — store/snapshot access, listing parameter parsing.
"""
from __future__ import annotations

import math
from typing import Optional

from fastapi import Depends, HTTPException, Query, Request

from parts_api.data.normalize import is_number, try_number
from parts_api.data.reloader import Reloader
from parts_api.data.schemas import PartFilter, Snapshot, SortOrder
from parts_api.data.store import PartStore

# ---------------------------------------------------------------------------
# Store access (store and reloader live on app.state, set during startup)
# ---------------------------------------------------------------------------


def get_store(request: Request) -> PartStore:
    store: PartStore | None = getattr(request.app.state, "store", None)
    if store is None or not store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return store


def get_snapshot(store: PartStore = Depends(get_store)) -> Snapshot:
    """The snapshot a request works against, taken once when it starts."""
    return store.current()


def get_reloader(request: Request) -> Reloader:
    reloader: Reloader | None = getattr(request.app.state, "reloader", None)
    if reloader is None:
        raise HTTPException(503, "Server not initialized yet")
    return reloader


# ---------------------------------------------------------------------------
# Listing parameters. Bad paging values fall back to defaults.
# ---------------------------------------------------------------------------

def _lenient_int(value: Optional[str]) -> Optional[int]:
    """Integer from a query string value, or None when it isn't a finite number."""
    number = try_number(value)
    if not is_number(number) or not math.isfinite(number):
        return None
    return int(number)


def parse_part_filter(
    query: Optional[str] = Query(None, description="Substring search in name or serial"),
    serial: Optional[str] = Query(None, description="Exact serial (case-insensitive)"),
    limit: Optional[str] = Query(None, description="Items per page, 1-1000 (default 50)"),
    page: Optional[str] = Query(None, description="1-based page number"),
    sort_by: Optional[str] = Query(None, description="Any field name"),
    sort_order: Optional[str] = Query(None, description="asc|desc"),
) -> PartFilter:
    order = SortOrder.DESC if (sort_order or "").lower() == SortOrder.DESC.value else SortOrder.ASC
    return PartFilter(
        query=query or None,
        serial=serial or None,
        sort_by=sort_by or None,
        sort_order=order,
        limit=_lenient_int(limit),
        page=_lenient_int(page),
    )
