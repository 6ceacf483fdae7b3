"""
Source file loading: stream the delimited export into a new Snapshot.

Everything is built on private lists/dicts; nothing here touches the store,
so a failure partway leaves the active snapshot as it was.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path
from types import MappingProxyType

import pandas as pd

from parts_api.config import LOAD_CHUNK_ROWS, SOURCE_FILE, SOURCE_SEPARATOR
from parts_api.data.normalize import normalize_row
from parts_api.data.schemas import Part, Snapshot
from parts_api.errors import LoadError


def _read_chunks(source: Path, chunk_rows: int):
    """Chunked reader over the source; every cell kept as a string."""
    return pd.read_csv(
        source,
        sep=SOURCE_SEPARATOR,
        dtype=str,
        keep_default_na=False,
        # Trailing delimiters on every row must not turn the first column into the index
        index_col=False,
        encoding="utf-8-sig",
        chunksize=chunk_rows,
    )


def load_parts(source: Path = SOURCE_FILE, chunk_rows: int = LOAD_CHUNK_ROWS) -> Snapshot:
    """Load the whole source into a Snapshot, or raise LoadError.

    Later rows with an already-seen serial replace the earlier index entry;
    both rows stay in the listing.
    """
    source = Path(source)
    parts: list[Part] = []
    index: dict[str, Part] = {}

    try:
        with _read_chunks(source, chunk_rows) as reader:
            for chunk in reader:
                for row in chunk.to_dict(orient="records"):
                    part = normalize_row(row)
                    parts.append(part)
                    if part.serial:
                        index[part.serial.lower()] = part
    except pd.errors.EmptyDataError:
        # No header at all: an empty dataset, not a parse failure
        print(f"  {source.name} is empty — loading 0 parts")
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, ValueError) as exc:
        raise LoadError(source, exc) from exc

    return Snapshot(
        parts=tuple(parts),
        index=MappingProxyType(index),
        source=source,
        loaded_at=dt.datetime.now(dt.timezone.utc),
    )
