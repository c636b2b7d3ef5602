"""Constants module for the mdnsview TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, labels, colors with Final)
- timeouts.py: Timeout and interval values
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Key maps are defined in the mdnsview.keyboard module.
"""

from mdnsview.constants.defaults import (
    NEAR_END_ROWS_DEFAULT,
    SORT_DIRECTION_DEFAULT,
    SORT_FIELD_DEFAULT,
)
from mdnsview.constants.enums import (
    CacheState,
    InputMode,
    Notification,
    Pane,
    SortDirection,
    SortField,
)
from mdnsview.constants.limits import NEAR_END_ROWS_MIN
from mdnsview.constants.timeouts import (
    METRICS_INTERVAL_DEFAULT,
    REDRAW_INTERVAL_DEFAULT,
)
from mdnsview.constants.values import (
    ALL_CATEGORIES_LABEL,
    APP_DESCRIPTION,
    APP_TITLE,
    META_QUERY_TYPE,
)

__all__ = [
    "ALL_CATEGORIES_LABEL",
    "APP_DESCRIPTION",
    # Application
    "APP_TITLE",
    # Enums
    "CacheState",
    "InputMode",
    "META_QUERY_TYPE",
    # Timeouts
    "METRICS_INTERVAL_DEFAULT",
    # Defaults
    "NEAR_END_ROWS_DEFAULT",
    "Notification",
    # Limits
    "NEAR_END_ROWS_MIN",
    "Pane",
    "REDRAW_INTERVAL_DEFAULT",
    "SORT_DIRECTION_DEFAULT",
    "SORT_FIELD_DEFAULT",
    "SortDirection",
    "SortField",
]
