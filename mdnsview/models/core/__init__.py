"""Core domain models."""

from mdnsview.models.core.service_entry import (
    ServiceEntry,
    current_timestamp_micros,
)

__all__ = [
    "ServiceEntry",
    "current_timestamp_micros",
]
