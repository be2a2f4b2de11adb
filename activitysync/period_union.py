"""Union of the time periods covered by two event lists."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from activitysync.models import Event
from activitysync.sort import sort_by_timestamp


def _has_gap(a: Event, b: Event) -> bool:
    return a.calculate_endtime() < b.timestamp or b.calculate_endtime() < a.timestamp


def period_union(events1: Iterable[Event], events2: Iterable[Event]) -> list[Event]:
    """Return events covering the union of the periods in both lists, without overlap.

    Events that overlap or touch are joined into one. The data of every
    returned event is emptied, since it cannot be kept consistent.
    """
    union: list[Event] = []
    for event in sort_by_timestamp([*events1, *events2]):
        if union and not _has_gap(event, union[-1]):
            last = union[-1]
            start = min(last.timestamp, event.timestamp)
            end = max(last.calculate_endtime(), event.calculate_endtime())
            union[-1] = dataclasses.replace(last, duration=end - start)
        else:
            union.append(dataclasses.replace(event, data={}))
    return union