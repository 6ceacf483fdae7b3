"""
Single-flight reload: load the source off to the side, then swap it in.
"""
from __future__ import annotations

import datetime as dt
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from parts_api.config import SOURCE_FILE
from parts_api.data.loader import load_parts
from parts_api.data.schemas import Snapshot
from parts_api.data.store import PartStore
from parts_api.errors import LoadError


@dataclass(frozen=True)
class ReloadResult:
    count: int
    loaded_at: Optional[dt.datetime]


class Reloader:
    """Runs at most one load at a time against the store's source.

    A reload requested while another is in flight does not start a second
    load: it waits for the running one and returns (or raises) its outcome.
    """

    def __init__(
        self,
        store: PartStore,
        source: Path = SOURCE_FILE,
        loader: Callable[[Path], Snapshot] = load_parts,
    ) -> None:
        self.store = store
        self.source = Path(source)
        self._loader = loader
        self._lock = threading.Lock()
        self._last: Union[ReloadResult, Exception, None] = None

    @property
    def in_progress(self) -> bool:
        return self._lock.locked()

    def reload(self) -> ReloadResult:
        """Load the source and activate it. Raises LoadError and keeps the old data on failure."""
        if not self._lock.acquire(blocking=False):
            print("  Reload already in progress — waiting for it to finish")
            with self._lock:
                last = self._last
                if isinstance(last, LoadError):
                    raise LoadError(last.source, last.cause) from last.cause
                if isinstance(last, Exception):
                    raise LoadError(self.source, last) from last
                if last is not None:
                    return last
                return self._run()

        try:
            return self._run()
        finally:
            self._lock.release()

    def _run(self) -> ReloadResult:
        print(f"Loading parts from {self.source}...")
        try:
            snapshot = self._loader(self.source)
        except Exception as exc:
            self._last = exc
            raise
        self.store.activate(snapshot)
        result = ReloadResult(count=snapshot.count, loaded_at=snapshot.loaded_at)
        self._last = result
        print(f"Loaded {result.count:,} parts into memory.")
        return result
