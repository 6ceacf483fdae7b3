"""
Parts API — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import sys
import traceback
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from parts_api import __version__
from parts_api.api.router_meta import router as meta_router
from parts_api.api.router_parts import router as parts_router
from parts_api.config import SOURCE_FILE, WATCH_DEBOUNCE_SECONDS, WATCH_SOURCE
from parts_api.data.reloader import Reloader
from parts_api.data.store import PartStore
from parts_api.errors import LoadError
from parts_api.watcher import SourceWatcher


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the source before serving; a failed first load stops startup."""
    source: Path = app.state.source
    store = PartStore()
    reloader = Reloader(store, source)
    app.state.store = store
    app.state.reloader = reloader

    try:
        reloader.reload()
    except LoadError as e:
        print(f"Failed to load parts on startup: {e}", file=sys.stderr)
        raise

    watcher = None
    if app.state.watch:
        watcher = SourceWatcher(source, reloader, WATCH_DEBOUNCE_SECONDS)
        watcher.start()
    app.state.watcher = watcher

    print(f"\nParts API ready — {store.row_count():,} parts from {source}\n")
    try:
        yield
    finally:
        if watcher:
            watcher.stop()


def create_app(source: Optional[Path] = None, watch: Optional[bool] = None) -> FastAPI:
    app = FastAPI(
        title="Parts API",
        description="In-memory parts dataset — search, lookup, sort, paginate, hot reload",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.source = Path(source) if source is not None else SOURCE_FILE
    app.state.watch = WATCH_SOURCE if watch is None else watch

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        print(f"Unhandled error on {request.method} {request.url.path}", file=sys.stderr)
        traceback.print_exception(type(exc), exc, exc.__traceback__)
        return JSONResponse(status_code=500, content={"error": "Server error"})

    app.include_router(parts_router)
    app.include_router(meta_router)

    return app


app = create_app()
