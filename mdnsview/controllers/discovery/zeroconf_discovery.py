"""mDNS / DNS-SD discovery backend built on python-zeroconf."""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from collections.abc import Callable, Coroutine
from typing import Any

from zeroconf import (
    BadTypeInNameException,
    IPVersion,
    ServiceStateChange,
    Zeroconf,
)
from zeroconf.asyncio import AsyncServiceBrowser, AsyncServiceInfo, AsyncZeroconf

from mdnsview.constants.timeouts import RESOLVE_TIMEOUT_MS
from mdnsview.constants.values import META_QUERY_TYPE
from mdnsview.controllers.base.base_controller import (
    BaseDiscovery,
    DiscoveryError,
    DiscoverySubscription,
)
from mdnsview.models.core.service_entry import ServiceEntry
from mdnsview.models.events.discovery_events import (
    CategoryFound,
    CategoryRemoved,
    EntityRemoved,
    EntityResolved,
)

logger = logging.getLogger(__name__)


def _decode(value: bytes | str) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def entry_from_info(info: AsyncServiceInfo, category: str) -> ServiceEntry:
    """Translate a resolved zeroconf record into a ServiceEntry.

    TXT keys without a value are skipped.
    """
    txt_records = [
        f"{_decode(key)}={_decode(value)}"
        for key, value in (info.properties or {}).items()
        if value is not None
    ]
    return ServiceEntry(
        fullname=info.name,
        host=info.server or "",
        category=category,
        addresses=info.parsed_scoped_addresses(),
        port=info.port or 0,
        txt_records=txt_records,
    )


class ZeroconfDiscovery(BaseDiscovery):
    """Browse the local network with an AsyncZeroconf instance.

    Each browse() owns an AsyncServiceBrowser. Added and updated services
    are resolved in their own task before an EntityResolved event is
    pushed, so a slow responder never stalls other events.

    Args:
        resolve_timeout_ms: How long a single resolve may take.
        ip_version: Address families to listen on.
    """

    def __init__(
        self,
        resolve_timeout_ms: int = RESOLVE_TIMEOUT_MS,
        ip_version: IPVersion = IPVersion.All,
    ) -> None:
        self._resolve_timeout_ms = resolve_timeout_ms
        self._ip_version = ip_version
        self._aiozc: AsyncZeroconf | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._browsers: dict[str, AsyncServiceBrowser] = {}
        self._tasks: set[asyncio.Task[Any]] = set()
        self._counters: Counter[str] = Counter()

    async def start(self) -> None:
        self._loop = asyncio.get_running_loop()
        try:
            self._aiozc = AsyncZeroconf(ip_version=self._ip_version)
        except OSError as exc:
            raise DiscoveryError(f"Cannot start mDNS daemon: {exc}") from exc
        logger.info("mDNS daemon started")

    def browse_categories(self) -> DiscoverySubscription:
        return self._browse(META_QUERY_TYPE, self._category_handler)

    def browse(self, category: str) -> DiscoverySubscription:
        return self._browse(category, self._service_handler)

    async def metrics(self) -> dict[str, int]:
        counters = dict(self._counters)
        counters["browsers_active"] = len(self._browsers)
        counters["resolves_pending"] = len(self._tasks)
        return counters

    async def close(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        browsers = list(self._browsers.values())
        self._browsers.clear()
        for browser in browsers:
            await browser.async_cancel()
        if self._aiozc is not None:
            await self._aiozc.async_close()
            self._aiozc = None
        logger.info("mDNS daemon stopped")

    # =========================================================================
    # Browsing
    # =========================================================================

    def _browse(
        self,
        service_type: str,
        handler_factory: Callable[[DiscoverySubscription], Callable[..., None]],
    ) -> DiscoverySubscription:
        if self._aiozc is None:
            raise DiscoveryError("Discovery backend is not started")
        subscription = DiscoverySubscription(
            service_type, on_close=lambda: self._cancel_browser(service_type)
        )
        try:
            browser = AsyncServiceBrowser(
                self._aiozc.zeroconf,
                [service_type],
                handlers=[handler_factory(subscription)],
            )
        except (BadTypeInNameException, ValueError) as exc:
            self._counters["browse_failures"] += 1
            raise DiscoveryError(f"Cannot browse {service_type}: {exc}") from exc
        self._browsers[service_type] = browser
        logger.debug("Browsing %s", service_type)
        return subscription

    def _cancel_browser(self, service_type: str) -> None:
        browser = self._browsers.pop(service_type, None)
        if browser is not None:
            self._spawn(browser.async_cancel())

    def _category_handler(self, subscription: DiscoverySubscription) -> Callable[..., None]:
        def on_change(
            zeroconf: Zeroconf,
            service_type: str,
            name: str,
            state_change: ServiceStateChange,
        ) -> None:
            if state_change is ServiceStateChange.Added:
                self._counters["categories_found"] += 1
                self._deliver(subscription.push, CategoryFound(name))
            elif state_change is ServiceStateChange.Removed:
                self._deliver(subscription.push, CategoryRemoved(name))

        return on_change

    def _service_handler(self, subscription: DiscoverySubscription) -> Callable[..., None]:
        def on_change(
            zeroconf: Zeroconf,
            service_type: str,
            name: str,
            state_change: ServiceStateChange,
        ) -> None:
            if state_change is ServiceStateChange.Removed:
                self._counters["services_removed"] += 1
                self._deliver(subscription.push, EntityRemoved(service_type, name))
                return
            self._deliver(
                lambda _: self._spawn(self._resolve(subscription, service_type, name)),
                None,
            )

        return on_change

    async def _resolve(
        self, subscription: DiscoverySubscription, service_type: str, name: str
    ) -> None:
        if self._aiozc is None:
            return
        info = AsyncServiceInfo(service_type, name)
        if not await info.async_request(self._aiozc.zeroconf, self._resolve_timeout_ms):
            self._counters["resolve_failures"] += 1
            logger.warning("Could not resolve %s", name)
            return
        self._counters["services_resolved"] += 1
        subscription.push(EntityResolved(entry_from_info(info, service_type)))

    # =========================================================================
    # Loop plumbing
    # =========================================================================

    def _deliver(self, callback: Callable[[Any], None], argument: Any) -> None:
        """Run callback on the event loop; zeroconf may call from its own thread."""
        if self._loop is None:
            return
        self._loop.call_soon_threadsafe(callback, argument)

    def _spawn(self, coroutine: Coroutine[Any, Any, None]) -> None:
        task = asyncio.ensure_future(coroutine)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
