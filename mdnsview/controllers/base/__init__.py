"""Base classes for discovery backends."""

from mdnsview.controllers.base.base_controller import (
    BaseDiscovery,
    DiscoveryError,
    DiscoverySubscription,
)

__all__ = [
    "BaseDiscovery",
    "DiscoveryError",
    "DiscoverySubscription",
]
