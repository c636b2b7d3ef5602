"""Canonical set of discovered service entries."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from mdnsview.models.core.service_entry import ServiceEntry

logger = logging.getLogger(__name__)


class EntityStore:
    """Owns exactly one ServiceEntry per fully-qualified name.

    Entries keep their insertion order, which the view cache uses as the
    input order for its stable sort. Offline entries stay in the store until
    compact_offline() is called.

    The store knows nothing about the view: callers invalidate the view
    cache and repair the selection after every mutation that returns True.
    """

    def __init__(self) -> None:
        self._entries: dict[str, ServiceEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[ServiceEntry]:
        return iter(self._entries.values())

    def get(self, key: str) -> ServiceEntry | None:
        return self._entries.get(key)

    def upsert(self, entry: ServiceEntry) -> bool:
        """Insert or replace an entry.

        A replacement that leaves every display and filter field untouched
        is dropped so repeated announcements do not cause redraws.

        Returns:
            True if the store changed.
        """
        existing = self._entries.get(entry.fullname)
        if existing is not None and existing.display_fields() == entry.display_fields():
            return False
        self._entries[entry.fullname] = entry
        logger.debug(
            "%s %s", "Updated" if existing is not None else "Inserted", entry.fullname
        )
        return True

    def mark_offline(self, key: str, timestamp_micros: int) -> bool:
        """Mark an entry offline and stamp the removal time.

        A repeated removal re-stamps the entry.

        Returns:
            False for unknown keys.
        """
        entry = self._entries.get(key)
        if entry is None:
            return False
        entry.mark_offline(timestamp_micros)
        return True

    def compact_offline(self) -> set[str]:
        """Delete every offline entry.

        Returns:
            Categories that no longer have any referencing entry.
        """
        touched: set[str] = set()
        for key in [k for k, entry in self._entries.items() if not entry.alive]:
            touched.add(self._entries.pop(key).category)
        orphaned = {category for category in touched if not self.references(category)}
        if touched:
            logger.debug(
                "Compacted offline entries; %d categories orphaned", len(orphaned)
            )
        return orphaned

    def references(self, category: str) -> bool:
        """Return whether any entry, live or offline, belongs to category."""
        return any(entry.category == category for entry in self._entries.values())
