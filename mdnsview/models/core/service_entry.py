"""Discovered service instance model."""

from __future__ import annotations

import time

from pydantic import BaseModel, Field, field_validator


def current_timestamp_micros() -> int:
    """Return wall-clock time in microseconds since the epoch."""
    return time.time_ns() // 1000


def _txt_key(record: str) -> str:
    return record.split("=", 1)[0]


class ServiceEntry(BaseModel):
    """One discovered service instance, keyed by its fully-qualified name.

    Addresses are deduplicated and sorted, TXT records are sorted by key,
    so two snapshots of the same advertisement compare equal regardless of
    the order in which the network delivered them.
    """

    fullname: str
    host: str = ""
    category: str
    subtype: str | None = None
    addresses: list[str] = Field(default_factory=list)
    port: int = 0
    txt_records: list[str] = Field(default_factory=list)
    alive: bool = True
    timestamp_micros: int = Field(default_factory=current_timestamp_micros)

    @field_validator("addresses")
    @classmethod
    def _normalize_addresses(cls, value: list[str]) -> list[str]:
        return sorted(set(value))

    @field_validator("txt_records")
    @classmethod
    def _sort_txt_records(cls, value: list[str]) -> list[str]:
        return sorted(value, key=_txt_key)

    @property
    def primary_address(self) -> str:
        """First address in display order, or an empty string."""
        return self.addresses[0] if self.addresses else ""

    def display_fields(self) -> tuple:
        """Fields that affect display or filtering, for change detection."""
        return (
            self.host,
            self.category,
            self.subtype,
            tuple(self.addresses),
            self.port,
            tuple(self.txt_records),
            self.alive,
        )

    def search_text(self) -> str:
        """Lower-cased concatenation of every textual display field."""
        parts = [
            self.fullname,
            self.host,
            self.category,
            self.subtype or "",
            *self.addresses,
            str(self.port),
            *self.txt_records,
        ]
        return "\n".join(parts).lower()

    def mark_offline(self, timestamp_micros: int) -> None:
        """Flip liveness off and stamp the transition time."""
        self.alive = False
        self.timestamp_micros = timestamp_micros
