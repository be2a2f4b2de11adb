"""Trimming of events to the periods covered by other events."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from datetime import timedelta

from activitysync.models import Event
from activitysync.sort import sort_by_timestamp


def filter_period_intersect(
    events: Iterable[Event], filter_events: Iterable[Event]
) -> list[Event]:
    """Return the parts of ``events`` that intersect with ``filter_events``.

    Each event is cut into pieces, one for every filter event it overlaps,
    covering only the overlapping time. Events of zero duration are dropped.
    """
    events_sorted = [dataclasses.replace(e) for e in sort_by_timestamp(events)]
    filters_sorted = sort_by_timestamp(filter_events)
    if not events_sorted or not filters_sorted:
        return []

    events_iter = iter(events_sorted)
    filters_iter = iter(filters_sorted)
    cur_event = next(events_iter)
    cur_filter = next(filters_iter)
    filtered: list[Event] = []

    while True:
        event_end = cur_event.calculate_endtime()
        filter_end = cur_filter.calculate_endtime()

        if cur_event.duration == timedelta(0) or event_end <= cur_filter.timestamp:
            nxt = next(events_iter, None)
            if nxt is None:
                return filtered
            cur_event = nxt
            continue

        if cur_event.timestamp >= filter_end:
            nxt_filter = next(filters_iter, None)
            if nxt_filter is None:
                return filtered
            cur_filter = nxt_filter
            continue

        start = max(cur_event.timestamp, cur_filter.timestamp)
        end = min(event_end, filter_end)
        filtered.append(
            Event(timestamp=start, duration=end - start, data=dict(cur_event.data), id=cur_event.id)
        )

        # Keep only the part of the current event after this intersection.
        cur_event.timestamp = end
        cur_event.duration = event_end - end