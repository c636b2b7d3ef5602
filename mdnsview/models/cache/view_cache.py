"""Filtered, sorted projection of the entity store."""

from __future__ import annotations

import ipaddress
import logging
from collections.abc import Callable
from functools import cmp_to_key
from typing import Any

from mdnsview.constants.defaults import SORT_DIRECTION_DEFAULT, SORT_FIELD_DEFAULT
from mdnsview.constants.enums import CacheState, SortDirection, SortField
from mdnsview.models.core.service_entry import ServiceEntry
from mdnsview.models.state.category_index import CategoryIndex
from mdnsview.models.state.entity_store import EntityStore

logger = logging.getLogger(__name__)


def _cmp(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def compare_addresses(left: str, right: str) -> int:
    """Compare two addresses numerically when both parse as the same family.

    Anything else, including an IPv4/IPv6 pair, compares as plain strings.
    """
    try:
        left_ip = ipaddress.ip_address(left)
        right_ip = ipaddress.ip_address(right)
    except ValueError:
        return _cmp(left, right)
    if left_ip.version != right_ip.version:
        return _cmp(left, right)
    return _cmp(int(left_ip), int(right_ip))


_FIELD_COMPARATORS: dict[SortField, Callable[[ServiceEntry, ServiceEntry], int]] = {
    SortField.NAME: lambda a, b: _cmp(a.fullname, b.fullname),
    SortField.HOST: lambda a, b: _cmp(a.host, b.host),
    SortField.CATEGORY: lambda a, b: _cmp(a.category, b.category),
    SortField.PORT: lambda a, b: _cmp(a.port, b.port),
    SortField.ADDRESS: lambda a, b: compare_addresses(a.primary_address, b.primary_address),
    SortField.TIMESTAMP: lambda a, b: _cmp(a.timestamp_micros, b.timestamp_micros),
}


def compare_entries(left: ServiceEntry, right: ServiceEntry, field: SortField) -> int:
    """Total order on entries: the field first, then the fully-qualified name."""
    return _FIELD_COMPARATORS[field](left, right) or _cmp(left.fullname, right.fullname)


class ViewCache:
    """Filtered and sorted list of entry keys with two-level invalidation.

    Filtering is a scan of the whole store; sorting only reorders the
    filtered keys. A FILTER_STALE cache re-filters and then re-sorts, a
    SORT_STALE cache only re-sorts, and a CLEAN cache returns the stored
    projection untouched. ``filter_passes`` and ``sort_passes`` count the
    work actually done.

    Args:
        store: Entries to project.
        categories: Category index whose anchor is the category filter.
        sort_field: Initial sort field.
        sort_direction: Initial sort direction.
    """

    def __init__(
        self,
        store: EntityStore,
        categories: CategoryIndex,
        sort_field: SortField = SORT_FIELD_DEFAULT,
        sort_direction: SortDirection = SORT_DIRECTION_DEFAULT,
    ) -> None:
        self._store = store
        self._categories = categories
        self._sort_field = sort_field
        self._sort_direction = sort_direction
        self._query = ""
        self._state = CacheState.FILTER_STALE
        self._keys: list[str] = []
        self._projection: tuple[str, ...] = ()
        self.filter_passes = 0
        self.sort_passes = 0

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def query(self) -> str:
        return self._query

    @property
    def sort_field(self) -> SortField:
        return self._sort_field

    @property
    def sort_direction(self) -> SortDirection:
        return self._sort_direction

    def invalidate_filter(self) -> None:
        self._state = CacheState.FILTER_STALE

    def invalidate_sort(self) -> None:
        if self._state is CacheState.CLEAN:
            self._state = CacheState.SORT_STALE

    def set_query(self, query: str) -> None:
        if query != self._query:
            self._query = query
            self.invalidate_filter()

    def set_sort_field(self, field: SortField) -> None:
        if field is not self._sort_field:
            self._sort_field = field
            self.invalidate_sort()

    def set_sort_direction(self, direction: SortDirection) -> None:
        if direction is not self._sort_direction:
            self._sort_direction = direction
            self.invalidate_sort()

    def matches(self, entry: ServiceEntry) -> bool:
        """Return whether entry passes the category and free-text filters."""
        category = self._categories.selected_value
        if category is not None and entry.category != category:
            return False
        if self._query and self._query.lower() not in entry.search_text():
            return False
        return True

    def get_projection(self) -> tuple[str, ...]:
        """Return the filtered, sorted entry keys, recomputing only stale steps."""
        if self._state is CacheState.FILTER_STALE:
            self._filter()
            self._state = CacheState.SORT_STALE
        if self._state is CacheState.SORT_STALE:
            self._sort()
            self._state = CacheState.CLEAN
        return self._projection

    def _filter(self) -> None:
        self.filter_passes += 1
        self._keys = [entry.fullname for entry in self._store if self.matches(entry)]

    def _sort(self) -> None:
        self.sort_passes += 1
        field = self._sort_field
        entries = [entry for entry in map(self._store.get, self._keys) if entry is not None]
        entries.sort(
            key=cmp_to_key(lambda a, b: compare_entries(a, b, field)),
            reverse=self._sort_direction is SortDirection.DESC,
        )
        self._projection = tuple(entry.fullname for entry in entries)
