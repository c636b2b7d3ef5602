"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "mdnsview"
APP_DESCRIPTION: Final = "A terminal-based mDNS service browser"

# ============================================================================
# Discovery
# ============================================================================

# DNS-SD meta query that enumerates every advertised service type.
META_QUERY_TYPE: Final = "_services._dns-sd._udp.local."
SUBTYPE_MARKER: Final = "_sub."

# ============================================================================
# Display labels
# ============================================================================

ALL_CATEGORIES_LABEL: Final = "All Types"
NO_ADDRESS_LABEL: Final = "<no-addr>"
NO_SELECTION_LABEL: Final = "No service selected"
NONE_LABEL: Final = "None"
TIMESTAMP_FORMAT: Final = "%Y-%m-%d %H:%M:%S.%f"

# ============================================================================
# Colors (rich style strings)
# ============================================================================

COLOR_SELECTED_BG: Final = "grey30"
COLOR_ALIVE: Final = "white"
COLOR_OFFLINE: Final = "bright_magenta"
COLOR_ERROR: Final = "red"

__all__ = [
    "ALL_CATEGORIES_LABEL",
    "APP_DESCRIPTION",
    "APP_TITLE",
    "COLOR_ALIVE",
    "COLOR_ERROR",
    "COLOR_OFFLINE",
    "COLOR_SELECTED_BG",
    "META_QUERY_TYPE",
    "NONE_LABEL",
    "NO_ADDRESS_LABEL",
    "NO_SELECTION_LABEL",
    "SUBTYPE_MARKER",
    "TIMESTAMP_FORMAT",
]
