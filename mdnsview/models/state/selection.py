"""Selected row and per-pane scroll offsets."""

from __future__ import annotations

from mdnsview.constants.defaults import NEAR_END_ROWS_DEFAULT
from mdnsview.constants.enums import Pane


class SelectionController:
    """Keeps the selected service row valid and on screen.

    After every repair, for a projection of length ``n``:

    - ``0 <= selected <= n - 1`` (``selected == 0`` when ``n == 0``)
    - ``scroll <= selected``
    - ``selected < scroll + visible_rows`` whenever ``visible_rows > 0``

    The categories pane has no selection of its own here; its highlighted
    row comes from the category anchor and is kept visible with reveal().

    Args:
        near_end_rows: How many trailing rows count as "at the end" when
            a bulk removal shrinks the projection.
    """

    def __init__(self, near_end_rows: int = NEAR_END_ROWS_DEFAULT) -> None:
        self.near_end_rows = near_end_rows
        self._selected = 0
        self._scroll: dict[Pane, int] = dict.fromkeys(Pane, 0)
        self._visible: dict[Pane, int] = dict.fromkeys(Pane, 0)

    @property
    def selected(self) -> int:
        return self._selected

    def scroll(self, pane: Pane = Pane.SERVICES) -> int:
        return self._scroll[pane]

    def visible_rows(self, pane: Pane = Pane.SERVICES) -> int:
        return self._visible[pane]

    def set_visible_rows(self, pane: Pane, rows: int) -> bool:
        """Record the row count the last layout pass gave a pane.

        Returns:
            True if the count changed.
        """
        rows = max(rows, 0)
        if self._visible[pane] == rows:
            return False
        self._visible[pane] = rows
        return True

    # =========================================================================
    # Movement
    # =========================================================================

    def move(self, delta: int, length: int) -> None:
        self._set(self._selected + delta, length)

    def move_to_first(self) -> None:
        self._selected = 0
        self._scroll[Pane.SERVICES] = 0

    def move_to_last(self, length: int) -> None:
        self._set(length - 1, length)

    def page(self, direction: int, length: int) -> None:
        """Move by one page less one row, at least one row."""
        step = max(self._visible[Pane.SERVICES] - 1, 1)
        self._set(self._selected + step * direction, length)

    def reset(self) -> None:
        """Forget the position: row 0, scrolled to the top."""
        self.move_to_first()

    # =========================================================================
    # Repair
    # =========================================================================

    def repair(self, length: int) -> None:
        """Clamp the selection into a projection that may have shrunk."""
        self._set(self._selected, length)
        visible = self._visible[Pane.SERVICES]
        if visible > 0 and length > 0:
            self._scroll[Pane.SERVICES] = min(
                self._scroll[Pane.SERVICES], max(length - visible, 0)
            )

    def after_bulk_removal(self, old_length: int, new_length: int) -> None:
        """Re-place the selection after many rows vanished at once.

        A selection within the last ``near_end_rows`` rows of the old
        projection, or past the end of the new one, is pinned to the new
        last row and scrolled to the bottom of the window. Any other
        selection keeps its numeric index.
        """
        if new_length <= 0:
            self._selected = 0
            self._scroll[Pane.SERVICES] = 0
            return
        was_near_end = old_length > 0 and (
            self._selected >= old_length - self.near_end_rows
            or self._selected >= new_length
        )
        if was_near_end:
            self._selected = new_length - 1
        else:
            self._selected = min(self._selected, new_length - 1)
        visible = self._visible[Pane.SERVICES]
        if self._selected >= new_length - self.near_end_rows and visible > 0:
            self._scroll[Pane.SERVICES] = max(self._selected - visible + 1, 0)
        else:
            self.reveal(Pane.SERVICES, self._selected)

    def reveal(self, pane: Pane, index: int) -> None:
        """Scroll the least amount needed to bring index into the window."""
        visible = self._visible[pane]
        if index < self._scroll[pane]:
            self._scroll[pane] = index
        elif visible > 0 and index >= self._scroll[pane] + visible:
            self._scroll[pane] = index - visible + 1

    def _set(self, index: int, length: int) -> None:
        if length <= 0:
            self._selected = 0
            self._scroll[Pane.SERVICES] = 0
            return
        self._selected = min(max(index, 0), length - 1)
        self.reveal(Pane.SERVICES, self._selected)
