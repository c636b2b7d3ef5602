"""Discovery backends."""

from mdnsview.controllers.discovery.zeroconf_discovery import (
    ZeroconfDiscovery,
    entry_from_info,
)

__all__ = [
    "ZeroconfDiscovery",
    "entry_from_info",
]
