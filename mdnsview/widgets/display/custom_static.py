"""CustomStatic widget for the TUI application.

Standard Wrapper Pattern:
- Wraps Textual's Static with standardized styling
- Adds a border title that can be updated together with the content

CSS Classes: widget-custom-static
"""

from __future__ import annotations

from typing import Any

from rich.console import RenderableType
from textual.widgets import Static as TextualStatic


class CustomStatic(TextualStatic):
    """Static text widget with standardized styling.

    Example:
        >>> details = CustomStatic("No service selected", id="details-pane")
        >>> details.set_content("Service Details", Text("..."))
    """

    _default_classes = "widget-custom-static"

    def __init__(
        self,
        renderable: RenderableType = "",
        *,
        id: str | None = None,
        classes: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            renderable,
            id=id,
            classes=self.compose_classes(self._default_classes, classes),
            **kwargs,
        )

    @staticmethod
    def compose_classes(*class_names: str) -> str:
        """Compose a space-separated CSS class string."""
        return " ".join(c for c in class_names if c)

    def set_content(self, title: str, renderable: RenderableType) -> None:
        """Replace the border title and the content in one step."""
        self.border_title = title
        self.update(renderable)
