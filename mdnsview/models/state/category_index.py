"""Sorted category list with a value-anchored selection."""

from __future__ import annotations

import bisect
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class CategoryIndex:
    """Sorted, deduplicated categories plus the selected category anchor.

    The anchor is either None ("all categories") or an index into the list.
    The index is only a cache of the selected value's position: every
    mutation captures the selected value first and resolves it again
    afterwards.

    Args:
        is_referenced: Predicate telling whether any entry still belongs to
            a category. Referenced categories cannot be removed.
    """

    def __init__(self, is_referenced: Callable[[str], bool]) -> None:
        self._categories: list[str] = []
        self._selected: int | None = None
        self._is_referenced = is_referenced

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category: object) -> bool:
        return category in self._categories

    @property
    def categories(self) -> list[str]:
        return list(self._categories)

    @property
    def selected(self) -> int | None:
        return self._selected

    @property
    def selected_value(self) -> str | None:
        if self._selected is None:
            return None
        return self._categories[self._selected]

    def add(self, category: str) -> bool:
        """Insert a category in sort order.

        Returns:
            False if the category was already present.
        """
        if category in self._categories:
            return False
        anchor = self.selected_value
        bisect.insort(self._categories, category)
        self._reanchor(anchor)
        logger.debug("Added category %s", category)
        return True

    def remove(self, category: str) -> bool:
        """Remove an unreferenced category.

        If the removed category was the selected one, the anchor stays at
        the same index clamped to the new list, or falls back to "all" when
        the list becomes empty.

        Returns:
            False if the category is absent or still referenced.
        """
        if category not in self._categories or self._is_referenced(category):
            return False
        anchor = self.selected_value
        position = self._selected
        self._categories.remove(category)
        if anchor == category and position is not None:
            self._selected = min(position, len(self._categories) - 1) if self._categories else None
        else:
            self._reanchor(anchor)
        logger.debug("Removed category %s", category)
        return True

    def select(self, index: int | None) -> bool:
        """Point the anchor at index, or at "all" for None.

        Out-of-range indexes are clamped to the list.

        Returns:
            True if the anchor moved.
        """
        if index is not None:
            index = min(max(index, 0), len(self._categories) - 1) if self._categories else None
        if index == self._selected:
            return False
        self._selected = index
        return True

    def previous_index(self) -> int | None:
        """Anchor one step left; "all" is the leftmost position."""
        if self._selected is None or self._selected == 0:
            return None
        return self._selected - 1

    def next_index(self) -> int | None:
        """Anchor one step right, stopping at the last category."""
        if self._selected is None:
            return 0 if self._categories else None
        return min(self._selected + 1, len(self._categories) - 1)

    def validate(self) -> None:
        """Clamp a dangling anchor to the list."""
        if self._selected is not None and self._selected >= len(self._categories):
            self._selected = len(self._categories) - 1 if self._categories else None

    def _reanchor(self, value: str | None) -> None:
        if value is None:
            self._selected = None
            return
        try:
            self._selected = self._categories.index(value)
        except ValueError:
            self._selected = None
