"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class PartsPageResponse(BaseModel):
    total: int
    page: int
    per_page: int
    total_pages: int
    data: list[dict[str, Any]]


class HealthResponse(BaseModel):
    status: str
    count: int
    indexed: int
    source: Optional[str] = None
    loaded_at: Optional[str] = None
    watching: bool = False
    reloading: bool = False


class ReloadResponse(BaseModel):
    ok: bool
    count: Optional[int] = None
    error: Optional[str] = None
