"""Shared fixtures for mdnsview TUI tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from mdnsview.controllers.base import (
    BaseDiscovery,
    DiscoveryError,
    DiscoverySubscription,
)
from mdnsview.models.core import ServiceEntry
from mdnsview.models.events import DiscoveryEvent
from mdnsview.models.state import AppSettings

EntryFactory = Callable[..., ServiceEntry]

HTTP = "_http._tcp.local."
SSH = "_ssh._tcp.local."


def build_entry(
    name: str,
    category: str = HTTP,
    *,
    host: str | None = None,
    port: int = 80,
    addresses: list[str] | None = None,
    timestamp_micros: int = 1_700_000_000_000_000,
    **fields: Any,
) -> ServiceEntry:
    """ServiceEntry named ``<name>.<category>`` with predictable defaults."""
    return ServiceEntry(
        fullname=f"{name}.{category}",
        host=host if host is not None else f"{name}.local.",
        category=category,
        port=port,
        addresses=addresses if addresses is not None else ["192.168.1.10"],
        timestamp_micros=timestamp_micros,
        **fields,
    )


class ScriptedDiscovery(BaseDiscovery):
    """In-memory discovery backend driven by the test.

    Categories listed in ``failing`` raise DiscoveryError from browse().
    """

    def __init__(
        self,
        *,
        failing: set[str] | None = None,
        fail_start: bool = False,
        metrics: dict[str, int] | None = None,
    ) -> None:
        self.failing = failing or set()
        self.fail_start = fail_start
        self.started = False
        self.closed = False
        self.categories_subscription: DiscoverySubscription | None = None
        self.subscriptions: dict[str, DiscoverySubscription] = {}
        self.browse_calls: list[str] = []
        self._metrics = metrics or {}

    async def start(self) -> None:
        if self.fail_start:
            raise DiscoveryError("mDNS daemon unavailable")
        self.started = True

    def browse_categories(self) -> DiscoverySubscription:
        self.categories_subscription = DiscoverySubscription("categories")
        return self.categories_subscription

    def browse(self, category: str) -> DiscoverySubscription:
        self.browse_calls.append(category)
        if category in self.failing:
            raise DiscoveryError(f"cannot browse {category}")
        subscription = DiscoverySubscription(category)
        self.subscriptions[category] = subscription
        return subscription

    async def metrics(self) -> dict[str, int]:
        return dict(self._metrics)

    async def close(self) -> None:
        self.closed = True

    def emit_category(self, event: DiscoveryEvent) -> None:
        assert self.categories_subscription is not None
        self.categories_subscription.push(event)

    def emit(self, category: str, event: DiscoveryEvent) -> None:
        self.subscriptions[category].push(event)


@pytest.fixture
def make_entry() -> EntryFactory:
    """Factory for ServiceEntry objects."""
    return build_entry


@pytest.fixture
def settings() -> AppSettings:
    """Default settings with a fast metrics poll."""
    return AppSettings(metrics_interval=0.5, redraw_interval=0.01)


@pytest.fixture
def scripted_discovery() -> ScriptedDiscovery:
    return ScriptedDiscovery(metrics={"services_resolved": 3, "browsers_active": 2})


@pytest.fixture
def discovery_factory() -> Callable[..., ScriptedDiscovery]:
    """Factory for discovery backends with custom failure behaviour."""
    return ScriptedDiscovery
