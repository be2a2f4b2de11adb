"""Merging of two event lists with overlaps removed."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from datetime import datetime

from activitysync.models import Event


def _intersects(a: Event, b: Event) -> bool:
    return a.timestamp < b.calculate_endtime() and b.timestamp < a.calculate_endtime()


def split_event(event: Event, timestamp: datetime) -> tuple[Event, Event | None]:
    """Split ``event`` at ``timestamp`` if it falls strictly inside it.

    Returns the two halves, or the unchanged event and None when there is
    nothing to split.
    """
    end = event.calculate_endtime()
    if event.timestamp < timestamp < end:
        head = Event(
            timestamp=event.timestamp,
            duration=timestamp - event.timestamp,
            data=dict(event.data),
        )
        tail = Event(timestamp=timestamp, duration=end - timestamp, data=dict(event.data))
        return head, tail
    return event, None


def union_no_overlap(events1: Iterable[Event], events2: Iterable[Event]) -> list[Event]:
    """Merge two event lists, cutting away the parts of ``events2`` that overlap ``events1``.

    The first list takes precedence: its events are kept whole, while events
    from the second list are trimmed or split around them.
    """
    first = deque(events1)
    second = deque(events2)
    union: list[Event] = []

    while first and second:
        e1 = first[0]
        e2 = second[0]
        if _intersects(e1, e2):
            if e1.timestamp <= e2.timestamp:
                union.append(first.popleft())
                second.popleft()
                # Keep only the part of e2 that continues after e1.
                _, rest = split_event(e2, e1.calculate_endtime())
                if rest is not None:
                    second.appendleft(rest)
            else:
                second.popleft()
                head, rest = split_event(e2, e1.timestamp)
                union.append(head)
                if rest is not None:
                    second.appendleft(rest)
        elif e1.timestamp <= e2.timestamp:
            union.append(first.popleft())
        else:
            union.append(second.popleft())

    union.extend(first)
    union.extend(second)
    return union