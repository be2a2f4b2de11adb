"""Filling of small gaps between events and merging of equal neighbours."""

from __future__ import annotations

import dataclasses
import logging
from collections import deque
from collections.abc import Iterable
from datetime import timedelta

from activitysync.models import Event
from activitysync.sort import sort_by_timestamp

logger = logging.getLogger(__name__)

# Overlaps shorter than this between events with different data are not reported.
_NEGATIVE_GAP_TRIM_THRESHOLD = timedelta(milliseconds=100)


def flood(events: Iterable[Event], pulsetime: timedelta) -> list[Event]:
    """Flood events into gaps shorter than ``pulsetime``.

    Neighbouring events with equal data that overlap or lie within
    ``pulsetime`` of each other are merged into one. Neighbouring events with
    different data separated by a gap shorter than ``pulsetime`` are both
    extended so that they meet in the middle of the gap. The input events are
    left unchanged.
    """
    pending = deque(dataclasses.replace(e) for e in sort_by_timestamp(events))
    flooded: list[Event] = []

    gap_prev: timedelta | None = None
    warned_safe = False
    warned_unsafe = False

    while pending:
        e1 = pending.popleft()
        if gap_prev is not None:
            half = gap_prev // 2
            e1.timestamp -= half
            e1.duration += half
            gap_prev = None

        if not pending:
            flooded.append(e1)
            break
        e2 = pending[0]

        gap = e2.timestamp - e1.calculate_endtime()

        if gap < timedelta(0):
            if e1.data == e2.data:
                if not warned_safe:
                    logger.warning(
                        "Gap was of negative duration (%ss), but could be safely merged. "
                        "This error will only show once per batch.",
                        gap.total_seconds(),
                    )
                    warned_safe = True
                _merge_into(e1, e2)
                pending.popleft()
                # Give the merged event a chance to merge with the one after.
                pending.appendleft(e1)
                continue
            if gap < -_NEGATIVE_GAP_TRIM_THRESHOLD and not warned_unsafe:
                logger.warning(
                    "Gap was of negative duration and could NOT be safely merged (%ss). "
                    "This warning will only show once per batch.",
                    gap.total_seconds(),
                )
                warned_unsafe = True
        elif gap < pulsetime:
            if e1.data == e2.data:
                _merge_into(e1, e2)
                pending.popleft()
                pending.appendleft(e1)
                continue
            e1.duration += gap // 2
            gap_prev = gap

        flooded.append(e1)
    return flooded


def _merge_into(target: Event, other: Event) -> None:
    start = min(target.timestamp, other.timestamp)
    end = max(target.calculate_endtime(), other.calculate_endtime())
    target.timestamp = start
    target.duration = end - start