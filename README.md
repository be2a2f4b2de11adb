# activitysync

Tools for working with time-tracking events. There are transforms that sort,
merge, filter, classify and combine event lists, and helpers that find the
per-host databases in a shared sync folder.

The package has no third-party dependencies.

## Installation

```
pip install activitysync
```

To run the test suite:

```
pip install "activitysync[test]"
pytest
```

## Events and buckets

`activitysync.models` defines two dataclasses.

- `Event` has a `timestamp` (a `datetime`), a `duration` (a `timedelta`), a
  `data` dictionary and an optional storage `id`. Two events are equal when
  timestamp, duration and data are equal; the id is not compared.
  `Event.calculate_endtime()` returns `timestamp + duration`.
- `Bucket` has an `id`, `type`, `hostname` and `client`, plus optional
  `created`, `data`, `metadata_start`, `metadata_end`, `events`,
  `last_updated` and `bid`.

```python
from datetime import datetime, timedelta, timezone
from activitysync.models import Event

e = Event(
    timestamp=datetime(2000, 1, 1, tzinfo=timezone.utc),
    duration=timedelta(seconds=5),
    data={"app": "editor"},
)
e.calculate_endtime()  # 2000-01-01 00:00:05+00:00
```

## Transforms

Each transform lives in its own module. Unless said otherwise it takes
iterables of events and returns a new list.

- `activitysync.sort`: `sort_by_timestamp(events)` (oldest first) and
  `sort_by_duration(events)` (longest first).
- `activitysync.heartbeat`: `heartbeat(last_event, heartbeat_event, pulsetime)`
  merges the two events when their data is equal and the heartbeat starts no
  earlier than the last event and no later than `pulsetime` seconds (a float)
  after it ends. It returns the merged event, or `None`.
- `activitysync.flood`: `flood(events, pulsetime)` with `pulsetime` a
  `timedelta`. Neighbours with equal data that overlap or lie closer than
  `pulsetime` are merged; neighbours with different data closer than
  `pulsetime` are both stretched to meet in the middle of the gap. The input
  events are not modified.
- `activitysync.merge`: `merge_events_by_keys(events, keys)` adds up the
  durations of all events sharing the same values at `keys`, wherever they
  occur. Events missing a key are dropped; an empty `keys` gives an empty
  list. Each result keeps the timestamp and data of the first event seen.
- `activitysync.chunk`: `chunk_events_by_key(events, key)` joins consecutive
  events with the same value at `key`, summing their durations. Events
  without the key are dropped.
- `activitysync.filter_keyvals`: `filter_keyvals(events, key, vals)` keeps
  events whose value at `key` is one of `vals`; `exclude_keyvals(events, key,
  vals)` drops them; `filter_keyvals_regex(events, key, regex)` keeps events
  whose string value at `key` matches `regex` (a string or compiled pattern,
  searched anywhere in the value). Booleans are not treated as equal to
  numbers.
- `activitysync.filter_period`: `filter_period_intersect(events,
  filter_events)` cuts events down to the periods covered by `filter_events`,
  for example to keep window activity only while the user was not away.
  Zero-length events are dropped.
- `activitysync.period_union`: `period_union(events1, events2)` returns the
  union of the periods in both lists; overlapping or touching events are
  joined and the data of every result is emptied.
- `activitysync.union_no_overlap`: `union_no_overlap(events1, events2)` merges
  two timestamp-ordered lists so that nothing overlaps; events from the first
  list are kept whole and events from the second are trimmed or split around
  them. `split_event(event, timestamp)` returns the two halves of an event cut
  at a timestamp strictly inside it, or the event and `None`.
- `activitysync.split_url`: `split_url_event(event)` changes the event in
  place, adding `$protocol`, `$domain` (with a leading `www.` removed),
  `$path` and `$params` from a string `url` in its data. Nothing is added
  when there is no such value or it is not an absolute URL.
- `activitysync.find_bucket`: `find_bucket(bucket_filter, hostname_filter,
  buckets)` returns the id of the first bucket whose id starts with
  `bucket_filter` and, when `hostname_filter` is not `None`, whose hostname
  equals it; otherwise `None`.

### Classification

`activitysync.classify` offers `categorize(events, rules)` and
`tag(events, rules)`. Rules are instances of `Rule`: `RegexRule(regex,
ignore_case=False)` matches when any string value in the event data matches
the pattern; `NoRule()` never matches.

`categorize` takes `(category, rule)` pairs, where a category is a list such
as `["Work", "Programming"]`, and sets `$category` on each event to the
deepest matching category (a later rule wins among equally deep ones), or to
`["Uncategorized"]`. `tag` takes `(name, rule)` pairs and sets `$tags` to the
sorted, distinct names of the matching rules. Both return new events.

```python
from activitysync.classify import RegexRule, categorize

rules = [
    (["Work"], RegexRule("editor")),
    (["Work", "Programming"], RegexRule("python", ignore_case=True)),
]
events = categorize(events, rules)
```

## Sync folder

A sync folder holds one directory per host, each holding one directory per
device with its `*.db` files: `{host}/{device_id}/*.db`.

- `activitysync.dirs.get_sync_dir()` returns the folder: the `AW_SYNC_DIR`
  environment variable if set, otherwise `~/ActivityWatchSync`.
- `activitysync.util.get_remotes()` creates the folder if needed and returns
  the names of host directories that contain a device directory with a `.db`
  file.
- `activitysync.util.find_remotes(sync_directory)` returns every `.db` entry
  one directory level below `sync_directory`.
- `activitysync.util.find_remotes_nonlocal(sync_directory, device_id,
  sync_db=None)` returns those whose path does not contain `device_id`,
  limited to paths at or below `sync_db` when it is given.

## What the package does not do

There is no datastore here: no database access, no storage of buckets or
events, and no copying of events between datastores or into the sync folder.
The sync folder helpers only find database files; opening and syncing them is
left to the caller. There is also no command-line program.