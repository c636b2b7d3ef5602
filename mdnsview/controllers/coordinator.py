"""Coordinator - the single serialization point for dashboard state.

Discovery producers, the metrics poller and the key handler all mutate
the same DashboardState. Every mutation happens inside ``with
coordinator.locked()``, a short synchronous critical section that never
awaits. After a mutation that changed something, a Notification is queued;
the redraw consumer waits on next_redraw() and paints once per burst.

Usage:
    coordinator = Coordinator(settings=settings)
    await coordinator.start(ZeroconfDiscovery())
    while True:
        await coordinator.next_redraw()
        frame = coordinator.snapshot()
        ...
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from typing import Any

from mdnsview.constants.enums import Notification, Pane
from mdnsview.constants.values import SUBTYPE_MARKER
from mdnsview.controllers.base.base_controller import (
    BaseDiscovery,
    DiscoveryError,
    DiscoverySubscription,
)
from mdnsview.keyboard.keymap import Action
from mdnsview.models.events.discovery_events import CategoryFound, DiscoveryEvent
from mdnsview.models.state.app_settings import AppSettings
from mdnsview.models.state.dashboard_frame import DashboardFrame
from mdnsview.models.state.dashboard_state import DashboardState

logger = logging.getLogger(__name__)


def is_browsable_category(name: str, show_subtypes: bool = False) -> bool:
    """Subtype enumerations are skipped unless explicitly wanted.

    Other malformed names are caught when browsing them fails.
    """
    return show_subtypes or SUBTYPE_MARKER not in name


class Coordinator:
    """Owns the DashboardState, its lock and the redraw notification queue.

    Args:
        settings: Application settings; defaults when omitted.
        state: Pre-built state, mainly for tests.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        state: DashboardState | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self._state = state or DashboardState(self.settings)
        self._lock = threading.Lock()
        self._notifications: asyncio.Queue[Notification] = asyncio.Queue()
        self._category_tasks: dict[str, asyncio.Task[None]] = {}
        self._tasks: set[asyncio.Task[Any]] = set()
        self._discovery: BaseDiscovery | None = None

    @contextmanager
    def locked(self) -> Iterator[DashboardState]:
        """Exclusive access to the state. Do not await inside."""
        with self._lock:
            yield self._state

    # =========================================================================
    # Notifications
    # =========================================================================

    def notify(self, notification: Notification) -> None:
        self._notifications.put_nowait(notification)

    async def next_redraw(self) -> Notification:
        """Wait for redraw intent and coalesce everything already queued.

        Returns:
            FORCE_REDRAW if any queued notification asked for it, otherwise
            the first notification of the burst.
        """
        first = await self._notifications.get()
        force = first is Notification.FORCE_REDRAW
        while True:
            try:
                queued = self._notifications.get_nowait()
            except asyncio.QueueEmpty:
                break
            force = force or queued is Notification.FORCE_REDRAW
        return Notification.FORCE_REDRAW if force else first

    # =========================================================================
    # Mutations
    # =========================================================================

    def apply(self, event: DiscoveryEvent) -> bool:
        """Apply a discovery event and queue a redraw if it changed anything."""
        with self.locked() as state:
            changed = state.apply_event(event)
        if changed:
            logger.debug("Applied %s", event)
            self.notify(Notification.STATE_CHANGED)
        return changed

    def handle_key(self, key: str, character: str | None = None) -> Action | None:
        """Route a keystroke; quit and suspend are returned for the app."""
        with self.locked() as state:
            action = state.handle_key(key, character)
        if action is None or action.name != "quit":
            self.notify(Notification.USER_INPUT)
        return action

    def set_visible_rows(self, pane: Pane, rows: int) -> None:
        with self.locked() as state:
            changed = state.set_visible_rows(pane, rows)
        if changed:
            self.notify(Notification.USER_INPUT)

    def record_error(self, message: str) -> None:
        with self.locked() as state:
            state.record_error(message)
        self.notify(Notification.STATE_CHANGED)

    def clear_error(self) -> None:
        with self.locked() as state:
            state.last_error = None
        self.notify(Notification.FORCE_REDRAW)

    def snapshot(self) -> DashboardFrame:
        """Frame for the renderer; takes the lock because the view may recompute."""
        with self.locked() as state:
            return state.frame()

    # =========================================================================
    # Producers
    # =========================================================================

    async def start(self, discovery: BaseDiscovery) -> bool:
        """Start the backend, the category producer and the metrics poller.

        A backend that fails to start is reported as an operator-visible
        error; the dashboard keeps running empty.

        Returns:
            True if discovery is running.
        """
        try:
            await discovery.start()
            categories = discovery.browse_categories()
        except DiscoveryError as exc:
            logger.warning("Discovery unavailable: %s", exc)
            self.record_error(str(exc))
            return False
        self._discovery = discovery
        self._spawn(self._run_categories(discovery, categories))
        self._spawn(self._poll_metrics(discovery, self.settings.metrics_interval))
        self.notify(Notification.STATE_CHANGED)
        return True

    async def shutdown(self) -> None:
        tasks = [*self._tasks, *self._category_tasks.values()]
        for task in tasks:
            task.cancel()
        for task in tasks:
            with suppress(asyncio.CancelledError):
                await task
        self._category_tasks.clear()
        if self._discovery is not None:
            try:
                await self._discovery.close()
            except Exception:
                logger.exception("Error closing discovery backend")
            self._discovery = None

    @property
    def browsed_categories(self) -> list[str]:
        return sorted(self._category_tasks)

    async def _run_categories(
        self, discovery: BaseDiscovery, subscription: DiscoverySubscription
    ) -> None:
        try:
            async for event in subscription:
                if isinstance(event, CategoryFound):
                    if not is_browsable_category(event.name, self.settings.show_subtypes):
                        continue
                    self.apply(event)
                    self._start_category(discovery, event.name)
                else:
                    self.apply(event)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Category browse stopped unexpectedly")
        finally:
            subscription.close()

    def _start_category(self, discovery: BaseDiscovery, category: str) -> None:
        if category in self._category_tasks:
            return
        try:
            subscription = discovery.browse(category)
        except DiscoveryError as exc:
            # A type that cannot be browsed is treated as bogus, not fatal.
            logger.warning("Dropping category %s: %s", category, exc)
            with self.locked() as state:
                changed = state.remove_category(category)
            if changed:
                self.notify(Notification.STATE_CHANGED)
            return
        task = asyncio.create_task(self._run_category(category, subscription))
        self._category_tasks[category] = task

    async def _run_category(self, category: str, subscription: DiscoverySubscription) -> None:
        try:
            async for event in subscription:
                self.apply(event)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Browse of %s stopped unexpectedly", category)
        finally:
            subscription.close()
            self._category_tasks.pop(category, None)

    async def _poll_metrics(self, discovery: BaseDiscovery, interval: float) -> None:
        while True:
            try:
                metrics = await discovery.metrics()
            except Exception:
                logger.exception("Metrics poll failed")
            else:
                with self.locked() as state:
                    changed = state.set_metrics(metrics)
                if changed:
                    self.notify(Notification.STATE_CHANGED)
            await asyncio.sleep(interval)

    def _spawn(self, coroutine: Any) -> None:
        task = asyncio.create_task(coroutine)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
