"""Dashboard screen package."""

from mdnsview.screens.dashboard.dashboard_screen import DashboardScreen
from mdnsview.screens.dashboard.presenter import (
    DashboardPresenter,
    PaneContent,
    RenderedFrame,
)

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
    "PaneContent",
    "RenderedFrame",
]
