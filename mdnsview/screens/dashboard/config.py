"""Dashboard screen configuration - widget IDs, titles, and layout constants."""

from __future__ import annotations

# =============================================================================
# Widget IDs
# =============================================================================

CATEGORIES_PANE_ID = "categories-pane"
SERVICES_PANE_ID = "services-pane"
DETAILS_PANE_ID = "details-pane"
POPUP_ID = "popup"
STATUS_LINE_ID = "status-line"

# =============================================================================
# Titles
# =============================================================================

CATEGORIES_TITLE = "Service Types [{count}] (←/→)"
SERVICES_TITLE = "Services [{visible}/{total}] (↑/↓) sort: {field} {arrow}"
DETAILS_TITLE = "Service Details"
ERROR_TITLE = "Error"
HELP_TITLE = "Key Bindings"
METRICS_TITLE = "Metrics"

SORT_ARROWS: dict[str, str] = {
    "asc": "▲",
    "desc": "▼",
}

# =============================================================================
# Prompts
# =============================================================================

FILTER_PROMPT = "/"
FILTER_ACTIVE_LABEL = "filter: {query}"
STATUS_HINT = "? help  / filter  s sort  d prune  q quit"
POPUP_DISMISS_HINT = "Press any key to close"
NO_METRICS_LABEL = "No metrics reported yet"
