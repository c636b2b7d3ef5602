"""Screens for the TUI application."""

from mdnsview.screens.dashboard import DashboardScreen

__all__ = ["DashboardScreen"]
