"""Input mode automaton."""

from __future__ import annotations

from mdnsview.constants.enums import InputMode
from mdnsview.keyboard.keymap import Action, resolve_action


class InputMachine:
    """Tracks the input mode and the in-progress filter buffer.

    The machine decides what a keystroke means (resolve) and performs the
    mode transitions. What an action does to the view is up to the caller.
    """

    def __init__(self) -> None:
        self.mode = InputMode.NORMAL
        self.buffer = ""

    @property
    def popup_open(self) -> bool:
        return self.mode in (InputMode.HELP_POPUP, InputMode.METRICS_POPUP)

    def resolve(self, key: str, character: str | None = None) -> Action | None:
        return resolve_action(self.mode, key, character)

    def open_popup(self, mode: InputMode) -> None:
        if mode not in (InputMode.HELP_POPUP, InputMode.METRICS_POPUP):
            raise ValueError(f"{mode} is not a popup mode")
        self.mode = mode

    def close_popup(self) -> None:
        self.mode = InputMode.NORMAL

    def begin_filter(self) -> None:
        self.mode = InputMode.FILTER_EDIT
        self.buffer = ""

    def append(self, character: str) -> str:
        self.buffer += character
        return self.buffer

    def backspace(self) -> str:
        self.buffer = self.buffer[:-1]
        return self.buffer

    def commit(self) -> str:
        """Leave filter edit keeping the buffer as the query."""
        query = self.buffer
        self.mode = InputMode.NORMAL
        return query

    def cancel(self) -> None:
        """Leave filter edit discarding the buffer."""
        self.buffer = ""
        self.mode = InputMode.NORMAL
