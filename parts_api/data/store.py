"""
PartStore — owner of the active dataset snapshot.

Readers take one reference per request via current(); activate() swaps the
whole snapshot in a single assignment, so a request never sees half of an
old dataset and half of a new one.
"""
from __future__ import annotations

from typing import Optional

from parts_api.data.schemas import Snapshot
from parts_api.errors import StoreNotReady


class PartStore:
    """Holds the currently served Snapshot."""

    def __init__(self) -> None:
        self._snapshot: Optional[Snapshot] = None

    def activate(self, snapshot: Snapshot) -> Optional[Snapshot]:
        """Publish a fully built snapshot; returns the one it replaced."""
        previous = self._snapshot
        self._snapshot = snapshot
        return previous

    def current(self) -> Snapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise StoreNotReady()
        return snapshot

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def row_count(self) -> int:
        snapshot = self._snapshot
        return snapshot.count if snapshot is not None else 0
