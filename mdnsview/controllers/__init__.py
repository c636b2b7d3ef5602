"""Controllers module for the mdnsview TUI.

This module provides the discovery backends and the coordinator that
serializes their events with keyboard input.
"""

from __future__ import annotations

# Base classes
from mdnsview.controllers.base import (
    BaseDiscovery,
    DiscoveryError,
    DiscoverySubscription,
)

# Coordination
from mdnsview.controllers.coordinator import Coordinator, is_browsable_category

__all__ = [
    # Base
    "BaseDiscovery",
    # Coordination
    "Coordinator",
    "DiscoveryError",
    "DiscoverySubscription",
    "is_browsable_category",
]
