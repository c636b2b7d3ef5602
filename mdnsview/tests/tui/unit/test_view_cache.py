"""Unit tests for ViewCache - two-level invalidation, filtering and sorting.

This module tests:
- CacheState transitions and the work counters
- Category and free-text filtering
- Total-order sorting for every field and both directions
"""

from __future__ import annotations

import pytest

from mdnsview.constants.enums import CacheState, SortDirection, SortField
from mdnsview.models.cache import ViewCache, compare_addresses
from mdnsview.models.core import ServiceEntry
from mdnsview.models.state import CategoryIndex, EntityStore

X = "_x._tcp.local."
Y = "_y._tcp.local."


def _entry(name: str, category: str = X, **fields) -> ServiceEntry:
    fields.setdefault("host", f"{name}.local.")
    fields.setdefault("timestamp_micros", 1)
    return ServiceEntry(fullname=f"{name}.{category}", category=category, **fields)


def _build(*entries: ServiceEntry) -> tuple[EntityStore, CategoryIndex, ViewCache]:
    store = EntityStore()
    categories = CategoryIndex(store.references)
    for entry in entries:
        store.upsert(entry)
        categories.add(entry.category)
    return store, categories, ViewCache(store, categories)


def _names(projection: tuple[str, ...]) -> list[str]:
    return [key.split(".", 1)[0] for key in projection]


# =============================================================================
# Invalidation
# =============================================================================


class TestViewCacheInvalidation:
    """Tests for the CacheState machine."""

    def test_starts_filter_stale(self) -> None:
        _, _, view = _build()
        assert view.state is CacheState.FILTER_STALE

    def test_projection_is_idempotent_without_rescans(self) -> None:
        _, _, view = _build(_entry("a"), _entry("b"))
        first = view.get_projection()
        second = view.get_projection()
        assert first == second
        assert view.filter_passes == 1
        assert view.sort_passes == 1
        assert view.state is CacheState.CLEAN

    def test_sort_change_does_not_refilter(self) -> None:
        _, _, view = _build(_entry("a", port=2), _entry("b", port=1))
        view.get_projection()
        view.set_sort_field(SortField.PORT)
        assert view.state is CacheState.SORT_STALE
        view.get_projection()
        assert view.filter_passes == 1
        assert view.sort_passes == 2

    def test_invalidate_sort_does_not_downgrade_filter_stale(self) -> None:
        _, _, view = _build(_entry("a"))
        view.invalidate_sort()
        assert view.state is CacheState.FILTER_STALE

    def test_unchanged_settings_keep_cache_clean(self) -> None:
        _, _, view = _build(_entry("a"))
        view.get_projection()
        view.set_sort_field(SortField.HOST)
        view.set_sort_direction(SortDirection.ASC)
        view.set_query("")
        assert view.state is CacheState.CLEAN

    def test_query_change_forces_refilter(self) -> None:
        _, _, view = _build(_entry("a"))
        view.get_projection()
        view.set_query("a")
        assert view.state is CacheState.FILTER_STALE
        view.get_projection()
        assert view.filter_passes == 2
        assert view.sort_passes == 2


# =============================================================================
# Filtering
# =============================================================================


class TestViewCacheFiltering:
    """Tests for category and free-text filters."""

    def test_query_matches_port_8080_not_80(self) -> None:
        _, _, view = _build(_entry("web", port=8080), _entry("old", port=80))
        view.set_query("8080")
        assert _names(view.get_projection()) == ["web"]

    def test_query_is_case_insensitive(self) -> None:
        _, _, view = _build(
            _entry("kitchen", txt_records=["model=LaserJet"]), _entry("other")
        )
        view.set_query("LASERJET")
        assert _names(view.get_projection()) == ["kitchen"]

    def test_query_matches_address(self) -> None:
        _, _, view = _build(
            _entry("a", addresses=["10.1.2.3"]), _entry("b", addresses=["192.168.0.9"])
        )
        view.set_query("10.1.")
        assert _names(view.get_projection()) == ["a"]

    def test_category_anchor_filters(self) -> None:
        _, categories, view = _build(_entry("a", X), _entry("b", Y))
        categories.select(categories.categories.index(Y))
        view.invalidate_filter()
        assert _names(view.get_projection()) == ["b"]

    def test_all_categories_when_anchor_is_none(self) -> None:
        _, _, view = _build(_entry("a", X), _entry("b", Y))
        assert sorted(_names(view.get_projection())) == ["a", "b"]

    def test_offline_entries_stay_visible(self) -> None:
        store, _, view = _build(_entry("a"))
        store.mark_offline(f"a.{X}", 5)
        view.invalidate_filter()
        assert _names(view.get_projection()) == ["a"]


# =============================================================================
# Sorting
# =============================================================================


class TestViewCacheSorting:
    """Tests for comparators and sort direction."""

    def test_host_ascending_then_descending(self) -> None:
        _, _, view = _build(
            _entry("e1", host="zz"), _entry("e2", host="aa"), _entry("e3", host="mm")
        )
        view.set_sort_field(SortField.HOST)
        assert _names(view.get_projection()) == ["e2", "e3", "e1"]
        view.set_sort_direction(SortDirection.DESC)
        assert _names(view.get_projection()) == ["e1", "e3", "e2"]

    @pytest.mark.parametrize("field", list(SortField))
    def test_sort_field_only_reorders(self, field: SortField) -> None:
        _, _, view = _build(
            _entry("a", port=3, host="h2", addresses=["10.0.0.9"], timestamp_micros=7),
            _entry("b", Y, port=1, host="h1", addresses=["10.0.0.10"], timestamp_micros=3),
            _entry("c", port=2, host="h3", timestamp_micros=5),
        )
        before = set(view.get_projection())
        view.set_sort_field(field)
        assert set(view.get_projection()) == before

    def test_port_sorts_numerically(self) -> None:
        _, _, view = _build(_entry("a", port=8080), _entry("b", port=80), _entry("c", port=443))
        view.set_sort_field(SortField.PORT)
        assert _names(view.get_projection()) == ["b", "c", "a"]

    def test_address_sorts_numerically(self) -> None:
        _, _, view = _build(
            _entry("a", addresses=["10.0.0.10"]), _entry("b", addresses=["10.0.0.9"])
        )
        view.set_sort_field(SortField.ADDRESS)
        assert _names(view.get_projection()) == ["b", "a"]

    def test_ties_break_on_fullname(self) -> None:
        _, _, view = _build(_entry("b", host="same"), _entry("a", host="same"))
        assert _names(view.get_projection()) == ["a", "b"]


class TestCompareAddresses:
    """Tests for compare_addresses()."""

    def test_ipv4_numeric(self) -> None:
        assert compare_addresses("10.0.0.9", "10.0.0.10") < 0

    def test_ipv6_numeric(self) -> None:
        assert compare_addresses("fe80::2", "fe80::10") < 0

    def test_mixed_family_falls_back_to_strings(self) -> None:
        assert compare_addresses("fe80::1", "10.0.0.1") > 0

    def test_unparseable_falls_back_to_strings(self) -> None:
        assert compare_addresses("", "10.0.0.1") < 0
        assert compare_addresses("b", "a") > 0
