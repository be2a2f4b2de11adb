"""Filtering of events by the values stored at a key."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Any

from activitysync.models import Event


def _json_equal(a: Any, b: Any) -> bool:
    """Compare JSON values, keeping booleans distinct from numbers."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(_json_equal(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_json_equal(x, y) for x, y in zip(a, b))
    return a == b


def _has_value(event: Event, key: str, vals: Sequence[Any]) -> bool:
    if key not in event.data:
        return False
    value = event.data[key]
    return any(_json_equal(val, value) for val in vals)


def filter_keyvals(events: Iterable[Event], key: str, vals: Sequence[Any]) -> list[Event]:
    """Keep only events whose value at ``key`` is one of ``vals``."""
    return [event for event in events if _has_value(event, key, vals)]


def filter_keyvals_regex(
    events: Iterable[Event], key: str, regex: str | re.Pattern[str]
) -> list[Event]:
    """Keep only events whose string value at ``key`` matches ``regex``."""
    pattern = re.compile(regex) if isinstance(regex, str) else regex
    return [
        event
        for event in events
        if isinstance(event.data.get(key), str) and pattern.search(event.data[key]) is not None
    ]


def exclude_keyvals(events: Iterable[Event], key: str, vals: Sequence[Any]) -> list[Event]:
    """Drop events whose value at ``key`` is one of ``vals``."""
    return [event for event in events if not _has_value(event, key, vals)]