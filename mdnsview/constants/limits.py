"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

METRICS_INTERVAL_MIN: Final = 0.5
REDRAW_INTERVAL_MIN: Final = 0.01
NEAR_END_ROWS_MIN: Final = 1

__all__ = [
    "METRICS_INTERVAL_MIN",
    "NEAR_END_ROWS_MIN",
    "REDRAW_INTERVAL_MIN",
]
