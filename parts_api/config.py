"""
Parts API — Configuration: source file, paging limits, field probe lists.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Source file (override with PARTS_SOURCE_FILE for deployment)
# ---------------------------------------------------------------------------
SOURCE_FILE = Path(os.environ.get("PARTS_SOURCE_FILE", str(Path.cwd() / "LE.txt")))
SOURCE_SEPARATOR = ","

# Rows per pandas chunk while streaming the source in
LOAD_CHUNK_ROWS = int(os.environ.get("PARTS_LOAD_CHUNK_ROWS", "50000"))

PORT = int(os.environ.get("PORT", "3000"))

# ---------------------------------------------------------------------------
# Auto-reload on source change (off unless PARTS_WATCH is set)
# ---------------------------------------------------------------------------
WATCH_SOURCE = os.environ.get("PARTS_WATCH", "").lower() in ("1", "true", "yes", "on")
WATCH_DEBOUNCE_SECONDS = float(os.environ.get("PARTS_WATCH_DEBOUNCE", "1.0"))

# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 1000

# ---------------------------------------------------------------------------
# Canonical field probes. Order matters: first non-empty value wins.
# Header names are matched case-sensitively after trimming.
# ---------------------------------------------------------------------------
SERIAL_FIELDS = [
    "serial", "Serial", "SERIAL",
    "seerianumber", "Seerianumber",
    "seriaalinumber", "Seriaalinumber",
]
NAME_FIELDS = ["name", "Name", "Nimi", "nimi"]
PRICE_FIELDS = ["price", "Price", "hind"]
QTY_FIELDS = ["qty", "Qty", "quantity", "Quantity"]

# Canonical fields that are coerced to numbers when the whole value is numeric
NUMERIC_FIELDS = {"price", "qty"}
