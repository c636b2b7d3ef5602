"""Widgets for the TUI application.

Widget categories:
- display: CustomStatic text blocks with a border title
- data: ListPane, pre-windowed lists that report their visible rows
"""

from mdnsview.widgets.data import ListPane
from mdnsview.widgets.display import CustomStatic

__all__ = [
    "CustomStatic",
    "ListPane",
]
