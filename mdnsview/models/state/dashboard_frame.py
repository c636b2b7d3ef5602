"""Read-only snapshot handed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from mdnsview.constants.defaults import SORT_DIRECTION_DEFAULT, SORT_FIELD_DEFAULT
from mdnsview.constants.enums import InputMode, SortDirection, SortField
from mdnsview.models.core.service_entry import ServiceEntry


@dataclass(frozen=True)
class ServiceRow:
    """One visible row of the services pane."""

    index: int
    entry: ServiceEntry
    selected: bool


@dataclass(frozen=True)
class DashboardFrame:
    """Everything the renderer needs for one paint.

    Entries are copies, so a frame stays valid after the lock that produced
    it is released.
    """

    categories: tuple[str, ...] = ()
    selected_category: int | None = None
    category_scroll: int = 0
    category_rows: int = 0
    rows: tuple[ServiceRow, ...] = ()
    total_filtered: int = 0
    total_services: int = 0
    selected_index: int = 0
    service_scroll: int = 0
    selected_entry: ServiceEntry | None = None
    mode: InputMode = InputMode.NORMAL
    filter_buffer: str = ""
    query: str = ""
    sort_field: SortField = SORT_FIELD_DEFAULT
    sort_direction: SortDirection = SORT_DIRECTION_DEFAULT
    metrics: tuple[tuple[str, int], ...] = field(default_factory=tuple)
    last_error: str | None = None
