"""Logging configuration for the TUI process.

While Textual owns the terminal nothing may be printed to stdout or
stderr, so records go to the Textual devtools console and, optionally,
to a log file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from mdnsview.models.state.app_settings import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings) -> logging.Logger:
    """Attach handlers to the ``mdnsview`` logger according to settings.

    Calling it again replaces the handlers installed by a previous call.
    """
    root = logging.getLogger("mdnsview")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    level = logging.getLevelName(settings.log_level.upper())
    root.setLevel(level if isinstance(level, int) else logging.WARNING)
    root.propagate = False

    root.addHandler(TextualHandler())
    if settings.log_file:
        log_path = Path(settings.log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)
    return root
