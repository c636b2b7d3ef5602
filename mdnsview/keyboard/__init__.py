"""Keyboard handling module.

- keymap: per-mode (key -> action) tables and key normalization
- input_machine: the Normal / HelpPopup / MetricsPopup / FilterEdit automaton
- app: Textual bindings for keys the terminal would otherwise intercept
"""

from mdnsview.keyboard.app import APP_BINDINGS
from mdnsview.keyboard.input_machine import InputMachine
from mdnsview.keyboard.keymap import (
    EXTERNAL_ACTIONS,
    FILTER_EDIT_KEYMAP,
    NORMAL_MODE_KEYMAP,
    Action,
    help_lines,
    normalize_key,
    resolve_action,
)

__all__ = [
    "APP_BINDINGS",
    "EXTERNAL_ACTIONS",
    "FILTER_EDIT_KEYMAP",
    "NORMAL_MODE_KEYMAP",
    "Action",
    "InputMachine",
    "help_lines",
    "normalize_key",
    "resolve_action",
]
