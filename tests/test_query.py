"""
Tests for search, lookup, sorting and pagination
"""
from parts_api.data.loader import load_parts
from parts_api.data.query import compare_values, get_part, list_parts, paginate, search_parts, sort_parts
from parts_api.data.schemas import PartFilter, SortOrder
from tests.conftest import write_source


def _serials(parts):
    return [p.serial for p in parts]


def _load(tmp_path, text):
    return load_parts(write_source(tmp_path / "src.csv", text))


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def test_get_part_is_case_insensitive(snapshot):
    assert get_part(snapshot, "A1").name == "Widget"
    assert get_part(snapshot, "a1") is get_part(snapshot, "A1")
    assert get_part(snapshot, "A2").name == "Gadget"


def test_get_part_missing_returns_none(snapshot):
    assert get_part(snapshot, "zzz") is None


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def test_search_matches_name_or_serial(tmp_path):
    snap = _load(tmp_path, "serial,name\nAB-1,Widget\nWX-2,Gadget\nC3,\n,Wide bolt\n")
    assert _serials(search_parts(snap.parts, "WID")) == ["AB-1", None]
    assert _serials(search_parts(snap.parts, "wx")) == ["WX-2"]
    assert search_parts(snap.parts, "nothing") == []


def test_list_serial_filter_takes_precedence_over_query(snapshot):
    page = list_parts(snapshot, PartFilter(serial="a1", query="gadget"))
    assert _serials(page.data) == ["A1"]


def test_list_unmatched_serial_is_empty_page(snapshot):
    page = list_parts(snapshot, PartFilter(serial="nope"))
    assert page.total == 0
    assert page.data == []
    assert page.total_pages == 0


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

def test_compare_values_numeric_vs_text():
    assert compare_values("9", "10") < 0
    assert compare_values(9, "10") < 0
    assert compare_values("b", "A") > 0
    assert compare_values(None, "a") < 0
    assert compare_values(None, None) == 0
    assert compare_values("abc", "ABC") == 0


def test_sort_by_price_ascending_numeric(snapshot):
    page = list_parts(snapshot, PartFilter(sort_by="price"))
    assert _serials(page.data) == ["a2", "A1"]


def test_sort_numeric_strings_in_non_canonical_field(tmp_path):
    snap = _load(tmp_path, "serial,rev\nA,10\nB,9\nC,100\n")
    assert _serials(sort_parts(snap.parts, "rev")) == ["B", "A", "C"]


def test_missing_values_sort_first_ascending(tmp_path):
    snap = _load(tmp_path, "serial,price\nA,10\nB,\nC,5\n")
    assert _serials(sort_parts(snap.parts, "price")) == ["B", "C", "A"]


def test_descending_is_reverse_of_ascending_for_distinct_keys(tmp_path):
    snap = _load(tmp_path, "serial,name\nA,pear\nB,Apple\nC,fig\nD,banana\n")
    asc = sort_parts(snap.parts, "name", SortOrder.ASC)
    desc = sort_parts(snap.parts, "name", SortOrder.DESC)
    assert _serials(asc) == ["B", "D", "C", "A"]
    assert _serials(desc) == list(reversed(_serials(asc)))


def test_ties_keep_source_order_in_both_directions(tmp_path):
    snap = _load(tmp_path, "serial,price\nA,5\nB,1\nC,5\nD,1\nE,5\n")
    assert _serials(sort_parts(snap.parts, "price", SortOrder.ASC)) == ["B", "D", "A", "C", "E"]
    assert _serials(sort_parts(snap.parts, "price", SortOrder.DESC)) == ["A", "C", "E", "B", "D"]


def test_sort_by_unknown_field_keeps_order(snapshot):
    page = list_parts(snapshot, PartFilter(sort_by="does_not_exist"))
    assert _serials(page.data) == ["A1", "a2"]


def test_sort_does_not_mutate_snapshot(tmp_path):
    snap = _load(tmp_path, "serial,price\nA,3\nB,1\nC,2\n")
    sort_parts(snap.parts, "price")
    assert _serials(snap.parts) == ["A", "B", "C"]


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

def test_paginate_defaults_and_clamps():
    items = list(range(5))
    page = paginate(items)
    assert (page.per_page, page.page, page.total, page.total_pages) == (50, 1, 5, 1)
    assert paginate(items, limit=5000).per_page == 1000
    assert paginate(items, limit=-3).per_page == 1
    assert paginate(items, limit=0).per_page == 50
    assert paginate(items, page=0).page == 1
    assert paginate(items, page=-2).page == 1


def test_out_of_range_page_is_empty():
    page = paginate(list(range(5)), limit=2, page=10)
    assert page.data == []
    assert page.total == 5
    assert page.total_pages == 3


def test_pages_reconstruct_full_sequence(tmp_path):
    rows = "".join(f"S{i},{(i * 7) % 5}\n" for i in range(11))
    snap = _load(tmp_path, "serial,price\n" + rows)
    full = sort_parts(snap.parts, "price", SortOrder.DESC)

    first = list_parts(snap, PartFilter(sort_by="price", sort_order=SortOrder.DESC, limit=3))
    collected = []
    for n in range(1, first.total_pages + 1):
        page = list_parts(snap, PartFilter(sort_by="price", sort_order=SortOrder.DESC, limit=3, page=n))
        assert len(page.data) <= page.per_page
        collected.extend(page.data)

    assert first.total_pages == 4
    assert collected == full


def test_empty_snapshot_lists_nothing():
    from parts_api.data.schemas import Snapshot

    page = list_parts(Snapshot(), PartFilter(query="x", sort_by="price"))
    assert page.total == 0
    assert page.total_pages == 0
    assert page.data == []
