"""Discovery event models."""

from mdnsview.models.events.discovery_events import (
    CategoryFound,
    CategoryRemoved,
    DiscoveryEvent,
    EntityRemoved,
    EntityResolved,
)

__all__ = [
    "CategoryFound",
    "CategoryRemoved",
    "DiscoveryEvent",
    "EntityRemoved",
    "EntityResolved",
]
