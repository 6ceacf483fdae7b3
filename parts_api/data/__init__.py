"""Source loading, snapshot store, and in-memory query engine."""
from .loader import load_parts
from .store import PartStore
from .reloader import Reloader, ReloadResult
from .schemas import Page, Part, PartFilter, Snapshot, SortOrder
from .query import get_part, list_parts, paginate, search_parts, sort_parts
