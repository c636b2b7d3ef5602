"""App-level keyboard bindings.

Textual claims ctrl+c and ctrl+z before screens see them. These priority
bindings hand both keys back to the key router so every keystroke goes
through the same mode tables.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+c", "route_key('ctrl+c')", "Quit", show=False, priority=True),
    Binding("ctrl+z", "route_key('ctrl+z')", "Suspend", show=False, priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
