"""Normalized events consumed from a discovery source."""

from __future__ import annotations

from dataclasses import dataclass

from mdnsview.models.core.service_entry import ServiceEntry


@dataclass(frozen=True)
class CategoryFound:
    """A service type was announced."""

    name: str


@dataclass(frozen=True)
class CategoryRemoved:
    """A service type stopped being announced."""

    name: str


@dataclass(frozen=True)
class EntityResolved:
    """A service instance resolved, or re-resolved with fresh attributes."""

    entry: ServiceEntry


@dataclass(frozen=True)
class EntityRemoved:
    """A service instance said goodbye or expired."""

    category: str
    key: str


DiscoveryEvent = CategoryFound | CategoryRemoved | EntityResolved | EntityRemoved
