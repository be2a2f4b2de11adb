"""Core data types: timed events and the buckets that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Event:
    """A span of time starting at ``timestamp`` carrying arbitrary JSON data.

    Equality compares timestamp, duration and data; the storage id is ignored.
    """

    timestamp: datetime = field(default_factory=_utcnow)
    duration: timedelta = field(default_factory=timedelta)
    data: dict[str, Any] = field(default_factory=dict)
    id: int | None = field(default=None, compare=False)

    def calculate_endtime(self) -> datetime:
        """Return the moment the event ends."""
        return self.timestamp + self.duration


@dataclass
class Bucket:
    """A named collection of events produced by one client on one host."""

    id: str
    type: str
    hostname: str
    client: str
    created: datetime | None = None
    data: dict[str, Any] = field(default_factory=dict)
    metadata_start: datetime | None = None
    metadata_end: datetime | None = None
    events: list[Event] | None = None
    last_updated: datetime | None = None
    bid: int | None = field(default=None, compare=False)