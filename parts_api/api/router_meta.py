"""
Meta endpoints: health, reload.
"""
from __future__ import annotations

import sys

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from parts_api.api.dependencies import get_reloader
from parts_api.api.response_models import HealthResponse, ReloadResponse
from parts_api.data.reloader import Reloader
from parts_api.errors import LoadError

router = APIRouter(tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(request: Request, reloader: Reloader = Depends(get_reloader)):
    store = reloader.store
    watcher = getattr(request.app.state, "watcher", None)
    if not store.is_loaded:
        return HealthResponse(status="loading", count=0, indexed=0, source=str(reloader.source))

    snapshot = store.current()
    return HealthResponse(
        status="ok",
        count=snapshot.count,
        indexed=len(snapshot.index),
        source=str(snapshot.source) if snapshot.source else None,
        loaded_at=snapshot.loaded_at.isoformat() if snapshot.loaded_at else None,
        watching=bool(watcher and watcher.is_running),
        reloading=reloader.in_progress,
    )


@router.post("/reload", response_model=ReloadResponse, response_model_exclude_none=True)
def reload_data(reloader: Reloader = Depends(get_reloader)):
    """Re-read the source file and swap it in.

    On failure the previous dataset keeps serving.
    """
    try:
        result = reloader.reload()
    except LoadError as e:
        print(f"Reload error: {e}", file=sys.stderr)
        return JSONResponse(status_code=500, content={"ok": False, "error": str(e)})
    return ReloadResponse(ok=True, count=result.count)
