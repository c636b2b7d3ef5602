"""Dashboard screen - the three panes, the popup overlay and the status line.

The screen holds no dashboard state. It forwards keys to the app's key
router, reports pane heights to the coordinator, and paints whatever
frame it is given.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen

from mdnsview.constants.enums import Pane
from mdnsview.models.state.dashboard_frame import DashboardFrame
from mdnsview.screens.dashboard.config import (
    CATEGORIES_PANE_ID,
    DETAILS_PANE_ID,
    DETAILS_TITLE,
    POPUP_ID,
    SERVICES_PANE_ID,
    STATUS_LINE_ID,
)
from mdnsview.screens.dashboard.presenter import DashboardPresenter, RenderedFrame
from mdnsview.widgets import CustomStatic, ListPane

if TYPE_CHECKING:
    from mdnsview.controllers.coordinator import Coordinator

logger = logging.getLogger(__name__)

# Keys the app claims through priority bindings.
_APP_ROUTED_KEYS = frozenset({"ctrl+c", "ctrl+z"})


class DashboardScreen(Screen[None]):
    """Categories and services side by side, details below."""

    def __init__(
        self,
        coordinator: Coordinator,
        presenter: DashboardPresenter | None = None,
    ) -> None:
        super().__init__()
        self.coordinator = coordinator
        self.presenter = presenter or DashboardPresenter()
        self.last_rendered: RenderedFrame | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="lists-row"):
            yield ListPane(Pane.CATEGORIES, id=CATEGORIES_PANE_ID)
            yield ListPane(Pane.SERVICES, id=SERVICES_PANE_ID)
        yield CustomStatic(id=DETAILS_PANE_ID)
        yield CustomStatic(id=STATUS_LINE_ID)
        yield CustomStatic(id=POPUP_ID)

    def on_mount(self) -> None:
        self.query_one(f"#{DETAILS_PANE_ID}", CustomStatic).border_title = DETAILS_TITLE
        self.query_one(f"#{POPUP_ID}", CustomStatic).display = False

    # =========================================================================
    # Events
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        if event.key in _APP_ROUTED_KEYS:
            return
        event.stop()
        event.prevent_default()
        self.app.route_key(event.key, event.character)

    def on_list_pane_rows_changed(self, message: ListPane.RowsChanged) -> None:
        logger.debug("%s pane shows %d rows", message.pane.value, message.rows)
        self.coordinator.set_visible_rows(message.pane, message.rows)

    # =========================================================================
    # Painting
    # =========================================================================

    def paint(self, frame: DashboardFrame) -> RenderedFrame:
        """Push one frame into the widgets."""
        rendered = self.presenter.render(frame)
        categories = rendered.categories
        services = rendered.services
        details = rendered.details
        self.query_one(f"#{CATEGORIES_PANE_ID}", ListPane).set_content(
            categories.title, categories.body
        )
        self.query_one(f"#{SERVICES_PANE_ID}", ListPane).set_content(
            services.title, services.body
        )
        details_widget = self.query_one(f"#{DETAILS_PANE_ID}", CustomStatic)
        details_widget.set_content(details.title, details.body)
        details_widget.set_class(details.is_error, "error")
        self.query_one(f"#{STATUS_LINE_ID}", CustomStatic).update(rendered.status)

        popup_widget = self.query_one(f"#{POPUP_ID}", CustomStatic)
        if rendered.popup is None:
            popup_widget.display = False
        else:
            popup_widget.set_content(rendered.popup.title, rendered.popup.body)
            popup_widget.display = True
        self.last_rendered = rendered
        return rendered
