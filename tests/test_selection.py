# file: tests/test_selection.py
from __future__ import annotations

from generic_save_manager.selection import resolve_selection


def test_keeps_previous_name():
    listing = ["alpha", "save_00000000", "save_00000001"]
    assert resolve_selection(listing, "alpha") == 0
    assert resolve_selection(listing, "save_00000000") == 1


def test_previous_name_gone_falls_back_to_last():
    listing = ["alpha", "save_00000000", "save_00000001"]
    assert resolve_selection(listing, "deleted") == 2


def test_no_previous_selects_last():
    assert resolve_selection(["b", "c"], None) == 1
    assert resolve_selection(["b", "c"], "") == 1


def test_empty_listing_means_no_selection():
    assert resolve_selection([], "anything") is None
    assert resolve_selection([], None) is None
