from datetime import datetime, timedelta, timezone

from activitysync.models import Event
from activitysync.union_no_overlap import split_event, union_no_overlap

NOW = datetime(2023, 5, 1, 12, 0, tzinfo=timezone.utc)
TD1H = timedelta(hours=1)


def test_split_event():
    e = Event(timestamp=NOW, duration=timedelta(hours=2), data={})
    e1, e2 = split_event(e, NOW + TD1H)
    assert e1.timestamp == NOW
    assert e1.duration == TD1H
    assert e2 is not None
    assert e2.timestamp == NOW + TD1H
    assert e2.duration == TD1H

    e1, e2 = split_event(e, NOW)
    assert e1.timestamp == NOW
    assert e1.duration == timedelta(hours=2)
    assert e2 is None


def test_split_event_at_end_does_not_split():
    e = Event(timestamp=NOW, duration=TD1H, data={"a": 1})
    head, tail = split_event(e, NOW + TD1H)
    assert tail is None
    assert head == e


def test_split_event_keeps_data():
    e = Event(timestamp=NOW, duration=timedelta(hours=2), data={"a": 1})
    head, tail = split_event(e, NOW + TD1H)
    assert head.data == {"a": 1}
    assert tail.data == {"a": 1}


def test_union_no_overlap():
    e1 = Event(timestamp=NOW, duration=TD1H, data={})
    e2 = Event(timestamp=NOW + TD1H, duration=TD1H, data={})
    result = union_no_overlap([e1], [e2])
    assert len(result) == 2
    assert result[0].timestamp == NOW
    assert result[0].duration == TD1H
    assert result[1].timestamp == NOW + TD1H
    assert result[1].duration == TD1H

    result = union_no_overlap([e2], [e1])
    assert len(result) == 2
    assert result[0].timestamp == NOW
    assert result[0].duration == TD1H
    assert result[1].timestamp == NOW + TD1H
    assert result[1].duration == TD1H


def test_union_no_overlap_with_overlap():
    e1 = Event(timestamp=NOW, duration=TD1H, data={})
    e2 = Event(timestamp=NOW, duration=timedelta(hours=2), data={})
    result = union_no_overlap([e1], [e2])
    assert len(result) == 2
    assert result[0].timestamp == NOW
    assert result[0].duration == TD1H
    assert result[1].timestamp == NOW + TD1H
    assert result[1].duration == TD1H

    e1 = Event(timestamp=NOW + TD1H, duration=TD1H, data={})
    e2 = Event(timestamp=NOW, duration=timedelta(hours=2), data={})
    result = union_no_overlap([e1], [e2])
    assert len(result) == 2
    assert result[0].timestamp == NOW
    assert result[0].duration == TD1H
    assert result[1].timestamp == NOW + TD1H
    assert result[1].duration == TD1H


def test_union_no_overlap_first_list_has_precedence():
    e1 = Event(timestamp=NOW + TD1H, duration=TD1H, data={"src": 1})
    e2 = Event(timestamp=NOW, duration=timedelta(hours=3), data={"src": 2})
    result = union_no_overlap([e1], [e2])
    assert [(e.timestamp, e.duration, e.data["src"]) for e in result] == [
        (NOW, TD1H, 2),
        (NOW + TD1H, TD1H, 1),
        (NOW + 2 * TD1H, TD1H, 2),
    ]


def test_union_no_overlap_drops_covered_event():
    e1 = Event(timestamp=NOW, duration=timedelta(hours=3), data={"src": 1})
    e2 = Event(timestamp=NOW + TD1H, duration=TD1H, data={"src": 2})
    result = union_no_overlap([e1], [e2])
    assert len(result) == 1
    assert result[0].data == {"src": 1}


def test_union_no_overlap_empty_lists():
    e = Event(timestamp=NOW, duration=TD1H, data={})
    assert union_no_overlap([], []) == []
    assert union_no_overlap([e], []) == [e]
    assert union_no_overlap([], [e]) == [e]