"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

from mdnsview.constants.enums import SortDirection, SortField

# ============================================================================
# View defaults
# ============================================================================

SORT_FIELD_DEFAULT: Final = SortField.HOST
SORT_DIRECTION_DEFAULT: Final = SortDirection.ASC
SHOW_SUBTYPES_DEFAULT: Final = False

# ============================================================================
# Selection defaults
# ============================================================================

# Rows from the end of the list that count as "at the end" when pruning.
NEAR_END_ROWS_DEFAULT: Final = 2

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
LOG_FILE_DEFAULT: Final = ""

__all__ = [
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "NEAR_END_ROWS_DEFAULT",
    "SHOW_SUBTYPES_DEFAULT",
    "SORT_DIRECTION_DEFAULT",
    "SORT_FIELD_DEFAULT",
]
