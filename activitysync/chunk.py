"""Chunking of consecutive events that share a value."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from activitysync.models import Event


def chunk_events_by_key(events: Iterable[Event], key: str) -> list[Event]:
    """Join consecutive events with the same value at ``key``.

    Events without ``key`` are dropped. The durations of joined events are
    summed into the first event of each run.
    """
    chunked: list[Event] = []
    for event in events:
        if key not in event.data:
            continue
        if chunked and chunked[-1].data[key] == event.data[key]:
            last = chunked[-1]
            last.duration = last.duration + event.duration
        else:
            chunked.append(dataclasses.replace(event))
    return chunked