"""Unit tests for the zeroconf discovery backend.

No sockets are opened: handlers are invoked directly with the keyword
arguments zeroconf passes, and resolved records are stand-in objects.
"""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

import pytest
from zeroconf import ServiceStateChange

from mdnsview.controllers.base import DiscoveryError, DiscoverySubscription
from mdnsview.controllers.discovery import ZeroconfDiscovery, entry_from_info
from mdnsview.models.events import CategoryFound, CategoryRemoved, EntityRemoved

HTTP = "_http._tcp.local."


def _info(**fields) -> SimpleNamespace:
    addresses = fields.pop("addresses", ["192.168.1.7", "fe80::1"])
    base = {
        "name": f"Kitchen.{HTTP}",
        "server": "kitchen.local.",
        "port": 80,
        "properties": {b"path": b"/", b"flag": None, "ver": "2"},
    }
    base.update(fields)
    return SimpleNamespace(parsed_scoped_addresses=lambda: list(addresses), **base)


async def _next(subscription: DiscoverySubscription) -> object:
    await asyncio.sleep(0)
    return subscription._queue.get_nowait()


# =============================================================================
# Record translation
# =============================================================================


class TestEntryFromInfo:
    """Tests for entry_from_info()."""

    def test_fields_are_copied(self) -> None:
        entry = entry_from_info(_info(), HTTP)
        assert entry.fullname == f"Kitchen.{HTTP}"
        assert entry.host == "kitchen.local."
        assert entry.category == HTTP
        assert entry.port == 80
        assert entry.addresses == ["192.168.1.7", "fe80::1"]
        assert entry.subtype is None
        assert entry.alive is True

    def test_txt_records_decoded_and_valueless_keys_skipped(self) -> None:
        entry = entry_from_info(_info(), HTTP)
        assert entry.txt_records == ["path=/", "ver=2"]

    def test_missing_optional_fields(self) -> None:
        entry = entry_from_info(_info(server=None, port=None, properties=None, addresses=[]), HTTP)
        assert entry.host == ""
        assert entry.port == 0
        assert entry.txt_records == []
        assert entry.addresses == []


# =============================================================================
# Handlers
# =============================================================================


class TestHandlers:
    """Tests for the browse handlers' event translation."""

    @pytest.mark.asyncio
    async def test_category_added_and_removed(self) -> None:
        discovery = ZeroconfDiscovery()
        discovery._loop = asyncio.get_running_loop()
        subscription = DiscoverySubscription("categories")
        handler = discovery._category_handler(subscription)
        kwargs = {"zeroconf": None, "service_type": "_services._dns-sd._udp.local."}
        handler(name=HTTP, state_change=ServiceStateChange.Added, **kwargs)
        assert await _next(subscription) == CategoryFound(HTTP)
        handler(name=HTTP, state_change=ServiceStateChange.Removed, **kwargs)
        assert await _next(subscription) == CategoryRemoved(HTTP)
        assert (await discovery.metrics())["categories_found"] == 1

    @pytest.mark.asyncio
    async def test_service_removed(self) -> None:
        discovery = ZeroconfDiscovery()
        discovery._loop = asyncio.get_running_loop()
        subscription = DiscoverySubscription(HTTP)
        handler = discovery._service_handler(subscription)
        handler(
            zeroconf=None,
            service_type=HTTP,
            name=f"Kitchen.{HTTP}",
            state_change=ServiceStateChange.Removed,
        )
        assert await _next(subscription) == EntityRemoved(HTTP, f"Kitchen.{HTTP}")

    @pytest.mark.asyncio
    async def test_metrics_before_browsing(self) -> None:
        metrics = await ZeroconfDiscovery().metrics()
        assert metrics == {"browsers_active": 0, "resolves_pending": 0}

    def test_browse_before_start_fails(self) -> None:
        with pytest.raises(DiscoveryError):
            ZeroconfDiscovery().browse(HTTP)

    @pytest.mark.asyncio
    async def test_close_without_start(self) -> None:
        await ZeroconfDiscovery().close()


# =============================================================================
# Subscription
# =============================================================================


class TestDiscoverySubscription:
    """Tests for DiscoverySubscription iteration and close()."""

    @pytest.mark.asyncio
    async def test_iteration_stops_after_finish(self) -> None:
        subscription = DiscoverySubscription(HTTP)
        subscription.push(CategoryFound("a"))
        subscription.push(CategoryFound("b"))
        subscription.finish()
        received = [event async for event in subscription]
        assert received == [CategoryFound("a"), CategoryFound("b")]

    @pytest.mark.asyncio
    async def test_close_is_idempotent_and_calls_back_once(self) -> None:
        calls = []
        subscription = DiscoverySubscription(HTTP, on_close=lambda: calls.append(1))
        subscription.close()
        subscription.close()
        assert calls == [1]
        assert subscription.closed is True
        subscription.push(CategoryFound("late"))
        assert [event async for event in subscription] == []

    @pytest.mark.asyncio
    async def test_failing_close_callback_is_contained(self) -> None:
        def explode() -> None:
            raise RuntimeError("boom")

        subscription = DiscoverySubscription(HTTP, on_close=explode)
        subscription.close()
        assert subscription.closed is True
