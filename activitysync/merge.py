"""Merging of events that share values at given keys."""

from __future__ import annotations

import copy
import json
from collections.abc import Iterable, Sequence

from activitysync.models import Event


def _key_text(value: object) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True)


def merge_events_by_keys(events: Iterable[Event], keys: Sequence[str]) -> list[Event]:
    """Merge all events with equal values at ``keys``, summing durations.

    Events missing any of the keys are dropped. Each merged event keeps the
    timestamp and data of the first event seen for its values.
    """
    if not keys:
        return []
    merged: dict[str, Event] = {}
    for event in events:
        if any(key not in event.data for key in keys):
            continue
        summed_key = ".".join(_key_text(event.data[key]) for key in keys)
        existing = merged.get(summed_key)
        if existing is not None:
            existing.duration = existing.duration + event.duration
        else:
            merged[summed_key] = Event(
                timestamp=event.timestamp,
                duration=event.duration,
                data=copy.deepcopy(event.data),
            )
    return list(merged.values())