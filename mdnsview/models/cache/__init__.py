"""Derived view caches."""

from mdnsview.models.cache.view_cache import (
    ViewCache,
    compare_addresses,
    compare_entries,
)

__all__ = [
    "ViewCache",
    "compare_addresses",
    "compare_entries",
]
