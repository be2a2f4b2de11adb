"""Merging of a heartbeat into the previous event."""

from __future__ import annotations

import copy
import logging
from datetime import timedelta

from activitysync.models import Event

logger = logging.getLogger(__name__)


def heartbeat(last_event: Event, heartbeat_event: Event, pulsetime: float) -> Event | None:
    """Merge ``heartbeat_event`` into ``last_event`` if possible.

    The events merge when their data is equal and the heartbeat starts no later
    than ``pulsetime`` seconds after the last event ends. Returns the merged
    event, or None when they cannot be merged.
    """
    if heartbeat_event.data != last_event.data:
        logger.debug("Can't merge, data is different")
        return None

    last_endtime = last_event.calculate_endtime()
    heartbeat_endtime = heartbeat_event.calculate_endtime()

    last_endtime_allowed = last_endtime + timedelta(seconds=pulsetime)
    if last_event.timestamp > heartbeat_event.timestamp:
        logger.debug("Can't merge, last event timestamp is after heartbeat timestamp")
        return None
    if heartbeat_event.timestamp > last_endtime_allowed:
        logger.debug("Can't merge, heartbeat timestamp is after last event endtime")
        return None

    starttime = min(heartbeat_event.timestamp, last_event.timestamp)
    endtime = max(last_endtime, heartbeat_endtime)
    duration = endtime - starttime
    if duration < timedelta(0):
        logger.debug("Merging heartbeats would result in a negative duration, refusing to merge!")
        return None

    return Event(
        timestamp=starttime,
        duration=duration,
        data=copy.deepcopy(last_event.data),
    )