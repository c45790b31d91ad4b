"""
Admin service - dashboard data and application review.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Union
from core.domain.models import Application, ApplicationStatus, Event
from core.domain.constants import ALL_EVENTS
from core.domain.status import (
    DashboardSummary, EventStats, event_stats, filter_applications, summarize,
)
from core.domain.errors import BackendError, TechLinkError, TransitionRefused, ValidationFailed
from core.interfaces.repositories import IEventRepository, IApplicationRepository
from locales import t

logger = logging.getLogger(__name__)

REVIEW_STATUSES = (ApplicationStatus.APPROVED, ApplicationStatus.REJECTED)


@dataclass
class AdminDashboard:
    """Everything the dashboard renders, derived from one fetch of each collection"""
    summary: DashboardSummary
    events: List[EventStats]
    applications: List[Application]
    event_filter: str = ALL_EVENTS
    filtered_summary: Optional[DashboardSummary] = None
    event_names: dict = field(default_factory=dict)


class AdminService:
    """Service for the admin dashboard"""

    def __init__(self, event_repo: IEventRepository, application_repo: IApplicationRepository):
        self.event_repo = event_repo
        self.application_repo = application_repo

    async def fetch_events(self) -> List[Event]:
        try:
            return await self.event_repo.list_all()
        except BackendError as e:
            raise BackendError(e.message, title=t("events_fetch_failed")) from e

    async def fetch_applications(self) -> List[Application]:
        try:
            return await self.application_repo.list_all()
        except BackendError as e:
            raise BackendError(e.message, title=t("applications_fetch_failed")) from e

    def build_dashboard(
        self,
        events: List[Event],
        applications: List[Application],
        event_filter: str = ALL_EVENTS,
        now: Optional[datetime] = None,
    ) -> AdminDashboard:
        """Pure derivation: summary cards, per-event stats and the filtered list"""
        known_ids = {e.id for e in events}
        # A filter pointing at a deleted event falls back to every event
        if event_filter != ALL_EVENTS and event_filter not in known_ids:
            event_filter = ALL_EVENTS
        selected = None if event_filter == ALL_EVENTS else event_filter

        return AdminDashboard(
            summary=summarize(events, applications, now),
            events=[event_stats(e, applications, now) for e in events],
            applications=filter_applications(applications, selected),
            event_filter=event_filter,
            filtered_summary=summarize(events, applications, now, event_id=selected) if selected else None,
            event_names={e.id: e.name for e in events},
        )

    async def get_application(self, application_id: str) -> Application:
        try:
            application = await self.application_repo.get_by_id(application_id)
        except BackendError as e:
            raise BackendError(e.message, title=t("applications_fetch_failed")) from e
        if not application:
            raise TechLinkError(t("application_not_found"), title=t("applications_fetch_failed"))
        return application

    async def review_application(
        self,
        application_id: str,
        status: Union[str, ApplicationStatus],
    ) -> ApplicationStatus:
        """
        Move a pending application to approved or rejected.

        The update only matches a row that is still pending, so an application
        that was already reviewed is left as it is and TransitionRefused is raised.
        """
        try:
            new_status = ApplicationStatus(status)
        except ValueError:
            new_status = None
        if new_status not in REVIEW_STATUSES:
            raise ValidationFailed(
                t("application_status_invalid", status=status),
                title=t("application_status_failed"),
            )

        try:
            changed = await self.application_repo.update_status(
                application_id, new_status, expected=ApplicationStatus.PENDING,
            )
        except BackendError as e:
            raise BackendError(e.message, title=t("application_status_failed")) from e

        if not changed:
            current = await self.get_application(application_id)
            logger.warning(
                f"[ADMIN] Refused {current.status.value} -> {new_status.value} for application {application_id}"
            )
            raise TransitionRefused(
                t("application_status_refused", status=current.status.value),
                title=t("application_status_failed"),
            )

        logger.info(f"[ADMIN] Application {application_id} {new_status.value}")
        return new_status
