"""Dashboard state models."""

from mdnsview.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from mdnsview.models.state.category_index import CategoryIndex
from mdnsview.models.state.config_manager import ConfigManager
from mdnsview.models.state.dashboard_frame import DashboardFrame, ServiceRow
from mdnsview.models.state.dashboard_state import DashboardState
from mdnsview.models.state.entity_store import EntityStore
from mdnsview.models.state.selection import SelectionController

__all__ = [
    "AppSettings",
    "CategoryIndex",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "DashboardFrame",
    "DashboardState",
    "EntityStore",
    "SelectionController",
    "ServiceRow",
]
