"""ListPane widget - a bordered list that reports how many rows fit.

The selection controller needs the number of visible rows to scroll and
page. The pane measures its content height after each resize and posts
a RowsChanged message; it never scrolls itself, the rows it receives are
already windowed.

CSS Classes: widget-list-pane
"""

from __future__ import annotations

from textual import events
from textual.message import Message

from mdnsview.constants.enums import Pane
from mdnsview.widgets.display.custom_static import CustomStatic


class ListPane(CustomStatic):
    """Bordered, pre-windowed list for one dashboard pane."""

    _default_classes = "widget-list-pane"

    class RowsChanged(Message):
        """Posted when the number of visible content rows changes."""

        def __init__(self, pane: Pane, rows: int) -> None:
            super().__init__()
            self.pane = pane
            self.rows = rows

    def __init__(self, pane: Pane, *, id: str | None = None, classes: str = "") -> None:
        super().__init__(id=id, classes=classes)
        self.pane = pane
        self._reported_rows: int | None = None

    def on_resize(self, event: events.Resize) -> None:
        rows = max(event.size.height - self.styles.gutter.height, 0)
        if rows != self._reported_rows:
            self._reported_rows = rows
            self.post_message(self.RowsChanged(self.pane, rows))
