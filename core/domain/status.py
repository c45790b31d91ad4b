"""
Event status and dashboard aggregation.

Status is never stored: it is derived from the application window and the
manual-close flag each time it is read.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from core.domain.models import Application, Event, EventStatus


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _aware(now: datetime) -> datetime:
    return now if now.tzinfo else now.replace(tzinfo=timezone.utc)


def event_status(event: Event, now: Optional[datetime] = None) -> EventStatus:
    """
    closed   - manually closed, or the window has ended
    upcoming - the window has not started yet
    open     - otherwise; both window boundaries count as open
    """
    now = _aware(now or utc_now())
    if event.is_manually_closed or now > event.application_end_date:
        return EventStatus.CLOSED
    if now < event.application_start_date:
        return EventStatus.UPCOMING
    return EventStatus.OPEN


def average_group_size(applications: Iterable[Application]) -> float:
    """Mean group size, 0.0 for no applications"""
    sizes = [a.group_size for a in applications]
    if not sizes:
        return 0.0
    return sum(sizes) / len(sizes)


@dataclass
class DashboardSummary:
    total_applications: int
    open_events: int
    upcoming_events: int
    average_group_size: float


@dataclass
class EventStats:
    event: Event
    status: EventStatus
    application_count: int
    average_group_size: float

    @property
    def average_label(self) -> str:
        return f"{self.average_group_size:.1f}" if self.application_count else "0"


def filter_applications(
    applications: Iterable[Application],
    event_id: Optional[str] = None,
) -> List[Application]:
    if event_id is None:
        return list(applications)
    return [a for a in applications if a.event_id == event_id]


def summarize(
    events: Iterable[Event],
    applications: Iterable[Application],
    now: Optional[datetime] = None,
    event_id: Optional[str] = None,
) -> DashboardSummary:
    """Summary cards. Application figures can be narrowed to one event."""
    now = _aware(now or utc_now())
    statuses = [event_status(e, now) for e in events]
    apps = filter_applications(applications, event_id)
    return DashboardSummary(
        total_applications=len(apps),
        open_events=statuses.count(EventStatus.OPEN),
        upcoming_events=statuses.count(EventStatus.UPCOMING),
        average_group_size=average_group_size(apps),
    )


def event_stats(
    event: Event,
    applications: Iterable[Application],
    now: Optional[datetime] = None,
) -> EventStats:
    apps = filter_applications(applications, event.id)
    return EventStats(
        event=event,
        status=event_status(event, now),
        application_count=len(apps),
        average_group_size=average_group_size(apps),
    )
