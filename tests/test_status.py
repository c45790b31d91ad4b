"""
Event status derivation and dashboard aggregation.
"""

from datetime import datetime, timedelta, timezone

import pytest

from core.domain.models import EventStatus
from core.domain.status import average_group_size, event_stats, event_status, summarize


def _at(day: int, hour: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, tzinfo=timezone.utc)


@pytest.mark.parametrize("now", [_at(1), _at(5), _at(10), datetime(2023, 1, 1, tzinfo=timezone.utc)])
def test_manually_closed_is_always_closed(event_factory, now):
    event = event_factory(closed=True)
    assert event_status(event, now) == EventStatus.CLOSED


def test_open_inside_window(event_factory):
    assert event_status(event_factory(), _at(5)) == EventStatus.OPEN


def test_window_boundaries_count_as_open(event_factory):
    event = event_factory()
    assert event_status(event, event.application_start_date) == EventStatus.OPEN
    assert event_status(event, event.application_end_date) == EventStatus.OPEN


def test_upcoming_before_start(event_factory):
    event = event_factory()
    assert event_status(event, event.application_start_date - timedelta(seconds=1)) == EventStatus.UPCOMING


def test_closed_after_end(event_factory):
    event = event_factory()
    assert event_status(event, event.application_end_date + timedelta(seconds=1)) == EventStatus.CLOSED


def test_naive_now_is_treated_as_utc(event_factory):
    assert event_status(event_factory(), datetime(2024, 1, 5)) == EventStatus.OPEN


def test_average_group_size(application_factory):
    apps = [application_factory(f"a{i}", group_size=size) for i, size in enumerate([2, 4, 6])]
    assert average_group_size(apps) == 4.0


def test_average_group_size_of_nothing_is_zero():
    assert average_group_size([]) == 0.0


def test_summarize_counts_statuses_and_applications(event_factory, application_factory):
    events = [
        event_factory("open-1"),
        event_factory("open-2", start="2024-01-03", end="2024-01-20"),
        event_factory("soon", start="2024-02-01", end="2024-02-10"),
        event_factory("closed", closed=True),
    ]
    apps = [
        application_factory("a1", event_id="open-1", group_size=3),
        application_factory("a2", event_id="open-2", group_size=5),
    ]

    summary = summarize(events, apps, _at(5))

    assert summary.total_applications == 2
    assert summary.open_events == 2
    assert summary.upcoming_events == 1
    assert summary.average_group_size == 4.0


def test_summarize_narrowed_to_one_event(event_factory, application_factory):
    events = [event_factory("e1"), event_factory("e2")]
    apps = [
        application_factory("a1", event_id="e1", group_size=2),
        application_factory("a2", event_id="e2", group_size=6),
        application_factory("a3", event_id="e2", group_size=4),
    ]

    summary = summarize(events, apps, _at(5), event_id="e2")

    assert summary.total_applications == 2
    assert summary.average_group_size == 5.0


def test_summarize_with_no_data():
    summary = summarize([], [], _at(5))
    assert summary.total_applications == 0
    assert summary.average_group_size == 0.0


def test_event_stats_labels(event_factory, application_factory):
    event = event_factory("e1")
    stats = event_stats(event, [application_factory("a1", event_id="e1", group_size=3)], _at(5))
    assert stats.status == EventStatus.OPEN
    assert stats.application_count == 1
    assert stats.average_label == "3.0"

    empty = event_stats(event_factory("e2"), [], _at(5))
    assert empty.average_label == "0"
