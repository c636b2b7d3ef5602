"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum, auto

# =============================================================================
# Input Mode Enums
# =============================================================================

class InputMode(Enum):
    """Modes of the keystroke router."""

    NORMAL = "normal"
    HELP_POPUP = "help_popup"
    METRICS_POPUP = "metrics_popup"
    FILTER_EDIT = "filter_edit"


class Pane(Enum):
    """Scrollable panes that receive a visible row count from layout."""

    CATEGORIES = "categories"
    SERVICES = "services"


# =============================================================================
# Redraw Notification Enums
# =============================================================================

class Notification(Enum):
    """Redraw intent sent from producers and the input consumer."""

    USER_INPUT = auto()
    STATE_CHANGED = auto()
    FORCE_REDRAW = auto()


# =============================================================================
# View Cache Enums
# =============================================================================

class CacheState(Enum):
    """Staleness of the filtered/sorted projection.

    FILTER_STALE implies a re-sort, so a sorted-but-unfiltered state
    cannot be expressed.
    """

    CLEAN = auto()
    SORT_STALE = auto()
    FILTER_STALE = auto()


# =============================================================================
# Sort Enums
# =============================================================================

class SortDirection(Enum):
    """Sort direction for the services list."""

    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SortField(Enum):
    """Sort fields for the services list, in cycling order."""

    NAME = "name"
    HOST = "host"
    CATEGORY = "category"
    PORT = "port"
    ADDRESS = "address"
    TIMESTAMP = "timestamp"


__all__ = [
    "CacheState",
    "InputMode",
    "Notification",
    "Pane",
    "SortDirection",
    "SortField",
]
