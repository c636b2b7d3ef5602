"""Display widgets."""

from mdnsview.widgets.display.custom_static import CustomStatic

__all__ = ["CustomStatic"]
