"""Dashboard presenter - turns a DashboardFrame into Rich renderables.

Rendering is a pure function of the frame: the same frame always yields
the same renderables, and nothing here touches the coordinator or the
terminal.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from mdnsview.constants.enums import InputMode
from mdnsview.constants.values import (
    ALL_CATEGORIES_LABEL,
    COLOR_ALIVE,
    COLOR_ERROR,
    COLOR_OFFLINE,
    COLOR_SELECTED_BG,
    NO_SELECTION_LABEL,
)
from mdnsview.keyboard.keymap import help_lines
from mdnsview.models.state.dashboard_frame import DashboardFrame, ServiceRow
from mdnsview.screens.dashboard.config import (
    CATEGORIES_TITLE,
    DETAILS_TITLE,
    ERROR_TITLE,
    FILTER_ACTIVE_LABEL,
    FILTER_PROMPT,
    HELP_TITLE,
    METRICS_TITLE,
    NO_METRICS_LABEL,
    POPUP_DISMISS_HINT,
    SERVICES_TITLE,
    SORT_ARROWS,
    STATUS_HINT,
)
from mdnsview.utils.formatting import (
    format_category,
    format_service_details,
    format_service_row,
)

_SELECTED_STYLE = f"on {COLOR_SELECTED_BG}"


@dataclass(frozen=True)
class PaneContent:
    """Title and body for one bordered pane."""

    title: str
    body: Text
    is_error: bool = False


@dataclass(frozen=True)
class RenderedFrame:
    """All renderables for one paint; popup is None when no popup is open."""

    categories: PaneContent
    services: PaneContent
    details: PaneContent
    status: Text
    popup: PaneContent | None = None


class DashboardPresenter:
    """Builds renderables for the dashboard screen."""

    def render(self, frame: DashboardFrame) -> RenderedFrame:
        return RenderedFrame(
            categories=self.render_categories(frame),
            services=self.render_services(frame),
            details=self.render_details(frame),
            status=self.render_status(frame),
            popup=self.render_popup(frame),
        )

    # =========================================================================
    # Panes
    # =========================================================================

    def render_categories(self, frame: DashboardFrame) -> PaneContent:
        labels = [ALL_CATEGORIES_LABEL, *(format_category(c) for c in frame.categories)]
        highlighted = 0 if frame.selected_category is None else frame.selected_category + 1
        start = frame.category_scroll
        stop = start + frame.category_rows if frame.category_rows > 0 else len(labels)
        body = Text(no_wrap=True, overflow="ellipsis")
        for index in range(start, min(stop, len(labels))):
            if index > start:
                body.append("\n")
            style = f"bold {_SELECTED_STYLE}" if index == highlighted else ""
            body.append(labels[index], style=style)
        return PaneContent(CATEGORIES_TITLE.format(count=len(frame.categories)), body)

    def render_services(self, frame: DashboardFrame) -> PaneContent:
        body = Text(no_wrap=True, overflow="ellipsis")
        for position, row in enumerate(frame.rows):
            if position:
                body.append("\n")
            body.append(format_service_row(row.entry), style=self._row_style(row))
        title = SERVICES_TITLE.format(
            visible=frame.total_filtered,
            total=frame.total_services,
            field=frame.sort_field.value,
            arrow=SORT_ARROWS[frame.sort_direction.value],
        )
        if frame.query:
            title = f"{title} {FILTER_ACTIVE_LABEL.format(query=frame.query)}"
        return PaneContent(title, body)

    def render_details(self, frame: DashboardFrame) -> PaneContent:
        if frame.last_error:
            return PaneContent(
                ERROR_TITLE,
                Text(f"Error: {frame.last_error}", style=COLOR_ERROR),
                is_error=True,
            )
        if frame.selected_entry is None:
            return PaneContent(DETAILS_TITLE, Text(NO_SELECTION_LABEL))
        return PaneContent(DETAILS_TITLE, Text(format_service_details(frame.selected_entry)))

    def render_status(self, frame: DashboardFrame) -> Text:
        if frame.mode is InputMode.FILTER_EDIT:
            status = Text(FILTER_PROMPT, style="bold")
            status.append(frame.filter_buffer)
            status.append("█", style="blink")
            return status
        return Text(STATUS_HINT, style="dim")

    # =========================================================================
    # Popups
    # =========================================================================

    def render_popup(self, frame: DashboardFrame) -> PaneContent | None:
        if frame.mode is InputMode.HELP_POPUP:
            return PaneContent(HELP_TITLE, self._help_body())
        if frame.mode is InputMode.METRICS_POPUP:
            return PaneContent(METRICS_TITLE, self._metrics_body(frame))
        return None

    def _help_body(self) -> Text:
        lines = help_lines()
        width = max(len(keys) for keys, _ in lines)
        body = Text()
        for keys, description in lines:
            body.append(f" {keys.ljust(width)}", style="bold")
            body.append(f"  {description}\n")
        body.append(f"\n {POPUP_DISMISS_HINT}", style="dim")
        return body

    def _metrics_body(self, frame: DashboardFrame) -> Text:
        body = Text()
        if not frame.metrics:
            body.append(f" {NO_METRICS_LABEL}\n")
        else:
            width = max(len(name) for name, _ in frame.metrics)
            for name, value in frame.metrics:
                body.append(f" {name.ljust(width)}", style="bold")
                body.append(f"  {value}\n")
        body.append(f"\n {POPUP_DISMISS_HINT}", style="dim")
        return body

    @staticmethod
    def _row_style(row: ServiceRow) -> str:
        style = COLOR_ALIVE if row.entry.alive else f"italic {COLOR_OFFLINE}"
        if row.selected:
            style = f"{style} {_SELECTED_STYLE}"
        return style
