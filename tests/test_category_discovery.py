"""Tests for category directory discovery and selection."""

from __future__ import annotations

from pathlib import Path

import pytest

from photocontest.categories import CategoryDiscovery, parse_only_values
from photocontest.errors import PreconditionError


def test_list_names_returns_digit_prefixed_directories(tmp_path: Path) -> None:
    for name in ["1", "12a", "900", "notes", ".hidden"]:
        (tmp_path / name).mkdir()
    (tmp_path / "3-readme.txt").write_text("not a category", encoding="utf-8")

    names = CategoryDiscovery().list_names(tmp_path)

    assert sorted(names) == ["1", "12a", "900"]


def test_list_names_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(PreconditionError):
        CategoryDiscovery().list_names(tmp_path / "missing")


def test_filter_names_keeps_only_requested_in_category_order() -> None:
    discovery = CategoryDiscovery()

    selected = discovery.filter_names(["5b", "900", "5a", "1", "3"], {"3", "5a"})

    assert selected == ["3", "5a"]


def test_filter_names_matches_raw_names_exactly() -> None:
    discovery = CategoryDiscovery()

    assert discovery.filter_names(["12a", "12"], {"12"}) == ["12"]


def test_filter_names_without_only_sorts_everything() -> None:
    discovery = CategoryDiscovery()

    assert discovery.filter_names(["10", "2", "1b", "1"]) == ["1", "1b", "2", "10"]


def test_parse_only_values_joins_repeated_options() -> None:
    assert parse_only_values(["3,5a", " 7 ", "", "9,,"]) == {"3", "5a", "7", "9"}
