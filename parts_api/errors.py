"""
Exception types shared by the loader, store and API layers.
"""
from __future__ import annotations

from pathlib import Path


class PartsError(Exception):
    """Base class for parts service errors."""


class LoadError(PartsError):
    """The source file could not be read or parsed.

    Fatal during startup; during a reload the active snapshot is kept.
    """

    def __init__(self, source: Path | str, cause: BaseException) -> None:
        self.source = Path(source)
        self.cause = cause
        super().__init__(f"Failed to load {self.source}: {cause}")


class StoreNotReady(PartsError):
    """A query arrived before the first snapshot was activated."""

    def __init__(self) -> None:
        super().__init__("Data not loaded yet")
