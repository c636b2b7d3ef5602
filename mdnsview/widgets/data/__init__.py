"""Data display widgets."""

from mdnsview.widgets.data.list_pane import ListPane

__all__ = ["ListPane"]
