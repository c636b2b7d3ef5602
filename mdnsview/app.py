"""Main application class for the mdnsview TUI."""

from __future__ import annotations

import asyncio
import logging
import os
import signal
from collections.abc import Callable

from textual import work
from textual.app import App, SuspendNotSupported
from textual.binding import Binding

from mdnsview.constants import APP_TITLE
from mdnsview.constants.enums import Notification
from mdnsview.controllers.base import BaseDiscovery
from mdnsview.controllers.coordinator import Coordinator
from mdnsview.controllers.discovery import ZeroconfDiscovery
from mdnsview.keyboard.app import APP_BINDINGS
from mdnsview.models.state import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)
from mdnsview.screens import DashboardScreen
from mdnsview.utils import configure_logging

logger = logging.getLogger(__name__)

DiscoveryFactory = Callable[[AppSettings], BaseDiscovery]


def _zeroconf_discovery(settings: AppSettings) -> BaseDiscovery:
    return ZeroconfDiscovery()


class MdnsViewApp(App[None]):
    """Main TUI application for mdnsview."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS
    ENABLE_COMMAND_PALETTE = False

    settings: AppSettings

    def __init__(
        self,
        settings: AppSettings | None = None,
        discovery_factory: DiscoveryFactory | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        if settings is None:
            self._load_settings()
        else:
            self.settings = settings
        configure_logging(self.settings)
        self._discovery_factory = discovery_factory or _zeroconf_discovery
        self.coordinator = Coordinator(settings=self.settings)
        self.dashboard = DashboardScreen(self.coordinator)

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load()
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("%s; using default settings", exc)
            self.settings = AppSettings()

    async def on_mount(self) -> None:
        """Show the dashboard, start redrawing, then start discovery."""
        await self.push_screen(self.dashboard)
        self._redraw_loop()
        await self.coordinator.start(self._discovery_factory(self.settings))

    async def on_unmount(self) -> None:
        await self.coordinator.shutdown()

    @work(exclusive=True, group="redraw")
    async def _redraw_loop(self) -> None:
        """Paint once per burst of notifications, at most every redraw_interval."""
        self.dashboard.paint(self.coordinator.snapshot())
        while True:
            notification = await self.coordinator.next_redraw()
            self.dashboard.paint(self.coordinator.snapshot())
            if notification is Notification.FORCE_REDRAW:
                self.refresh(layout=True)
            await asyncio.sleep(self.settings.redraw_interval)

    # =========================================================================
    # Key routing
    # =========================================================================

    def route_key(self, key: str, character: str | None = None) -> None:
        """Hand a keystroke to the coordinator and carry out app-level actions."""
        action = self.coordinator.handle_key(key, character)
        if action is None:
            return
        if action.name == "quit":
            self.exit()
        elif action.name == "suspend":
            self._suspend_process()

    def action_route_key(self, key: str) -> None:
        self.route_key(key)

    def _suspend_process(self) -> None:
        """Stop the process with SIGTSTP; the terminal is restored on resume."""
        sigtstp = getattr(signal, "SIGTSTP", None)
        if sigtstp is None:
            self.coordinator.record_error("Suspend is not supported on this platform")
            return
        try:
            with self.suspend():
                os.kill(os.getpid(), sigtstp)
        except SuspendNotSupported as exc:
            logger.warning("Suspend failed: %s", exc)
            self.coordinator.record_error(f"Suspend failed: {str(exc) or 'not supported'}")
            return
        self.coordinator.clear_error()
