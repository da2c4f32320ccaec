from __future__ import annotations

from datastore.event_log import MemoryEventSink
from services.duplicates import DuplicateDetector, matching_pairs


def test_matching_pairs() -> None:
    assert matching_pairs([1, 2, 3]) == []
    assert matching_pairs([5, 5, 9]) == [(1, 2)]
    assert matching_pairs([9, 5, 5]) == [(2, 3)]
    assert matching_pairs([5, 5, 5]) == [(1, 2), (1, 3), (2, 3)]


def test_one_pair_reports_one_event() -> None:
    sink = MemoryEventSink()

    assert DuplicateDetector(sink).inspect([5, 5, 9], line_number=4) == 1
    assert [event.message for event in sink.events] == ["Sensor 1 and 2 are matching"]
    assert sink.levels() == ["INFO"]


def test_all_equal_reports_every_pair() -> None:
    sink = MemoryEventSink()

    assert DuplicateDetector(sink).inspect([5, 5, 5]) == 3
    assert [event.message for event in sink.events] == [
        "Sensor 1 and 2 are matching",
        "Sensor 1 and 3 are matching",
        "Sensor 2 and 3 are matching",
    ]
