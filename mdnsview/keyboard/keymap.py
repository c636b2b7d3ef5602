"""Per-mode key tables.

Each table maps a key name to a named action. The tables carry no
behaviour: actions are implemented by DashboardState ``action_*`` methods,
plus the two actions in EXTERNAL_ACTIONS that only the app can perform.

Key names follow Textual (``up``, ``pagedown``, ``ctrl+c``, ...) except
that printable characters are named by the character itself (``?``,
``/``, ``G``), see normalize_key().
"""

from __future__ import annotations

from typing import Annotated, NamedTuple

from mdnsview.constants.enums import InputMode

# ============================================================================
# Normal Mode
# ============================================================================

NORMAL_MODE_KEYMAP: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("q", "quit", "Quit the application"),
    ("ctrl+c", "quit", "Quit the application"),
    ("ctrl+z", "suspend", "Suspend the application (Unix only)"),
    ("?", "show_help", "Show this help popup"),
    ("m", "show_metrics", "Show discovery metrics"),
    ("k", "move_up", "Previous service"),
    ("up", "move_up", "Previous service"),
    ("j", "move_down", "Next service"),
    ("down", "move_down", "Next service"),
    ("h", "previous_category", "Previous service type"),
    ("left", "previous_category", "Previous service type"),
    ("l", "next_category", "Next service type"),
    ("right", "next_category", "Next service type"),
    ("pageup", "page_up", "Scroll services up by a page"),
    ("b", "page_up", "Scroll services up by a page"),
    ("pagedown", "page_down", "Scroll services down by a page"),
    ("f", "page_down", "Scroll services down by a page"),
    ("space", "page_down", "Scroll services down by a page"),
    ("home", "first", "Jump to first service"),
    ("g", "first", "Jump to first service"),
    ("end", "last", "Jump to last service"),
    ("G", "last", "Jump to last service"),
    ("s", "next_sort_field", "Sort by next field"),
    ("S", "previous_sort_field", "Sort by previous field"),
    ("o", "toggle_sort_direction", "Reverse sort order"),
    ("d", "prune_offline", "Remove offline services"),
    ("c", "clear_error", "Clear error message"),
    ("/", "begin_filter", "Filter services"),
]

# ============================================================================
# Filter Edit Mode
# ============================================================================

FILTER_EDIT_KEYMAP: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("enter", "commit_filter", "Apply filter"),
    ("escape", "cancel_filter", "Clear filter"),
    ("backspace", "filter_backspace", "Delete last character"),
    ("ctrl+c", "quit", "Quit the application"),
]

# Printable characters without an entry above are typed into the filter.
FILTER_APPEND_ACTION = "filter_append"

# Any key closes a popup without acting on it.
POPUP_CLOSE_ACTION = "close_popup"

# Actions that leave the state alone and are carried out by the app.
EXTERNAL_ACTIONS: frozenset[str] = frozenset({"quit", "suspend"})


class Action(NamedTuple):
    """A resolved keystroke: the action name and its argument, if any."""

    name: str
    argument: str | None = None


def _index(table: list[tuple[str, str, str]]) -> dict[str, str]:
    return {key: action for key, action, _ in table}


KEYMAPS: dict[InputMode, dict[str, str]] = {
    InputMode.NORMAL: _index(NORMAL_MODE_KEYMAP),
    InputMode.FILTER_EDIT: _index(FILTER_EDIT_KEYMAP),
    InputMode.HELP_POPUP: {},
    InputMode.METRICS_POPUP: {},
}


def normalize_key(key: str, character: str | None = None) -> str:
    """Name a keystroke the way the key tables do.

    Printable characters other than space are named by themselves, so
    ``question_mark`` becomes ``?`` and an upper-case ``g`` becomes ``G``.
    """
    if character is not None and len(character) == 1 and character.isprintable():
        return "space" if character == " " else character
    return key


def resolve_action(mode: InputMode, key: str, character: str | None = None) -> Action | None:
    """Look up what a keystroke means in a mode.

    Returns:
        The action to perform, or None when the key is unbound.
    """
    if mode in (InputMode.HELP_POPUP, InputMode.METRICS_POPUP):
        return Action(POPUP_CLOSE_ACTION)
    name = normalize_key(key, character)
    action = KEYMAPS[mode].get(name)
    if action is not None:
        return Action(action)
    if mode is InputMode.FILTER_EDIT and character is not None and character.isprintable():
        if len(character) == 1:
            return Action(FILTER_APPEND_ACTION, character)
    return None


def help_lines() -> list[tuple[str, str]]:
    """Key binding reference for the help popup: (keys, description)."""
    grouped: dict[str, list[str]] = {}
    for key, _, description in NORMAL_MODE_KEYMAP:
        grouped.setdefault(description, []).append(key)
    lines = [(" / ".join(keys), description) for description, keys in grouped.items()]
    lines.extend(
        (f"{key} (filter)", description) for key, _, description in FILTER_EDIT_KEYMAP
    )
    return lines


__all__ = [
    "EXTERNAL_ACTIONS",
    "FILTER_APPEND_ACTION",
    "FILTER_EDIT_KEYMAP",
    "KEYMAPS",
    "NORMAL_MODE_KEYMAP",
    "POPUP_CLOSE_ACTION",
    "Action",
    "help_lines",
    "normalize_key",
    "resolve_action",
]
