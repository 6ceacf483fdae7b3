"""
Parts endpoints: filtered/sorted/paginated listing and exact serial lookup.
"""
from __future__ import annotations

import sys
import traceback

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from parts_api.api.dependencies import get_snapshot, parse_part_filter
from parts_api.api.response_models import PartsPageResponse
from parts_api.data.query import get_part, list_parts
from parts_api.data.schemas import PartFilter, Snapshot

router = APIRouter(prefix="/parts", tags=["parts"])


@router.get("", response_model=PartsPageResponse)
def list_parts_endpoint(
    snapshot: Snapshot = Depends(get_snapshot),
    flt: PartFilter = Depends(parse_part_filter),
):
    """List parts. An unmatched `serial` filter is an empty page, not a 404."""
    try:
        page = list_parts(snapshot, flt)
    except Exception:
        print("Error while listing parts", file=sys.stderr)
        traceback.print_exc()
        return JSONResponse(status_code=500, content={"error": "Server error"})
    return page.to_dict()


@router.get("/{serial}")
def get_part_endpoint(serial: str, snapshot: Snapshot = Depends(get_snapshot)):
    part = get_part(snapshot, serial)
    if part is None:
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return part.to_dict()
