"""Base discovery source contract for the mdnsview TUI.

This module defines what the coordinator needs from a discovery backend:
a category subscription, one subscription per category, and an optional
metrics snapshot. Subscriptions are async iterators fed from an
``asyncio.Queue`` so backends can push events from their own callbacks.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable

from mdnsview.models.events.discovery_events import DiscoveryEvent

logger = logging.getLogger(__name__)


class DiscoveryError(Exception):
    """A discovery backend could not start or continue browsing."""


class DiscoverySubscription:
    """Stream of events for one browse request.

    Backends call push() for each event and finish() when the browse ends.
    Consumers iterate with ``async for``; iteration stops after finish() or
    close().

    Args:
        name: What is being browsed, for logging.
        on_close: Called once when the consumer closes the subscription.
    """

    _END = object()

    def __init__(self, name: str, on_close: Callable[[], None] | None = None) -> None:
        self.name = name
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self._on_close = on_close
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def push(self, event: DiscoveryEvent) -> None:
        if not self._closed:
            self._queue.put_nowait(event)

    def finish(self) -> None:
        self._queue.put_nowait(self._END)

    def close(self) -> None:
        """Stop the browse; pending events are dropped."""
        if self._closed:
            return
        self._closed = True
        self.finish()
        if self._on_close is not None:
            try:
                self._on_close()
            except Exception:
                logger.exception("Error closing subscription %s", self.name)

    def __aiter__(self) -> AsyncIterator[DiscoveryEvent]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[DiscoveryEvent]:
        while True:
            item = await self._queue.get()
            if item is self._END:
                return
            yield item  # type: ignore[misc]


class BaseDiscovery(ABC):
    """Base class for discovery backends.

    Subclasses implement the browse calls; metrics() defaults to an empty
    snapshot.
    """

    @abstractmethod
    async def start(self) -> None:
        """Bring the backend up.

        Raises:
            DiscoveryError: The backend cannot start.
        """
        ...

    @abstractmethod
    def browse_categories(self) -> DiscoverySubscription:
        """Subscribe to CategoryFound / CategoryRemoved events."""
        ...

    @abstractmethod
    def browse(self, category: str) -> DiscoverySubscription:
        """Subscribe to EntityResolved / EntityRemoved events for a category.

        Raises:
            DiscoveryError: The category cannot be browsed.
        """
        ...

    async def metrics(self) -> dict[str, int]:
        """Return backend counters; empty when the backend has none."""
        return {}

    @abstractmethod
    async def close(self) -> None:
        """Stop every browse and release network resources."""
        ...
