"""Utility functions for the mdnsview TUI."""

from mdnsview.utils.formatting import (
    format_category,
    format_service_details,
    format_service_row,
    format_timestamp_micros,
)
from mdnsview.utils.logging_setup import configure_logging

__all__ = [
    # Logging
    "configure_logging",
    # Formatting
    "format_category",
    "format_service_details",
    "format_service_row",
    "format_timestamp_micros",
]
