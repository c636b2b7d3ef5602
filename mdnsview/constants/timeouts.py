"""Timeout constants for the TUI.

All timeout and interval values for discovery, polling, and redraw cycles.
"""

from typing import Final

# ============================================================================
# Discovery timeouts (milliseconds, as zeroconf expects)
# ============================================================================

RESOLVE_TIMEOUT_MS: Final = 3000

# ============================================================================
# Async intervals (float, in seconds)
# ============================================================================

METRICS_INTERVAL_DEFAULT: Final = 5.0
REDRAW_INTERVAL_DEFAULT: Final = 0.05

__all__ = [
    "METRICS_INTERVAL_DEFAULT",
    "REDRAW_INTERVAL_DEFAULT",
    "RESOLVE_TIMEOUT_MS",
]
