"""Lookup of buckets by id prefix and hostname."""

from __future__ import annotations

from collections.abc import Iterable

from activitysync.models import Bucket


def find_bucket(
    bucket_filter: str,
    hostname_filter: str | None,
    buckets: Iterable[Bucket],
) -> str | None:
    """Return the id of the first bucket whose id starts with ``bucket_filter``.

    When ``hostname_filter`` is given, the bucket's hostname must also match.
    """
    for bucket in buckets:
        if not bucket.id.startswith(bucket_filter):
            continue
        if hostname_filter is None or hostname_filter == bucket.hostname:
            return bucket.id
    return None