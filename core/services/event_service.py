"""
Event service - business logic for event operations.
"""

import logging
from typing import Optional, List
from core.domain.models import Event, EventCreate, EventUpdate
from core.domain.errors import BackendError, TechLinkError, ValidationFailed
from core.interfaces.repositories import IEventRepository
from locales import t

logger = logging.getLogger(__name__)


class EventService:
    """Service for event-related operations (the event editor)"""

    def __init__(self, event_repo: IEventRepository):
        self.event_repo = event_repo

    async def list_events(self) -> List[Event]:
        """All events ordered by application start date"""
        try:
            return await self.event_repo.list_all()
        except BackendError as e:
            raise BackendError(e.message, title=t("events_fetch_failed")) from e

    async def get_event(self, event_id: str) -> Event:
        """Get event by ID, raising if it no longer exists"""
        try:
            event = await self.event_repo.get_by_id(event_id)
        except BackendError as e:
            raise BackendError(e.message, title=t("events_fetch_failed")) from e
        if not event:
            raise TechLinkError(t("event_not_found"), title=t("events_fetch_failed"))
        return event

    def parse_form(
        self,
        name: str,
        start_date: str,
        end_date: str,
        is_manually_closed: bool = False,
    ) -> EventCreate:
        """
        Validate editor input locally.
        Name, start and end are required; dates come from <input type="date">.
        """
        name = (name or "").strip()
        start_date = (start_date or "").strip()
        end_date = (end_date or "").strip()
        if not name or not start_date or not end_date:
            raise ValidationFailed(t("event_required"))
        try:
            return EventCreate(
                name=name,
                application_start_date=start_date,
                application_end_date=end_date,
                is_manually_closed=is_manually_closed,
            )
        except ValueError as e:
            logger.info(f"[EVENT_SERVICE] Rejected editor dates {start_date!r}/{end_date!r}: {e}")
            raise ValidationFailed(t("event_bad_date")) from e

    async def save_event(self, event_data: EventCreate, event_id: Optional[str] = None) -> None:
        """Create when event_id is None, otherwise update. Callers re-fetch afterwards."""
        if event_id is None:
            try:
                await self.event_repo.create(event_data)
            except BackendError as e:
                raise BackendError(e.message, title=t("event_create_failed")) from e
            logger.info(f"[EVENT_SERVICE] Created event '{event_data.name}'")
            return

        try:
            await self.event_repo.update(event_id, EventUpdate(**event_data.model_dump()))
        except BackendError as e:
            raise BackendError(e.message, title=t("event_update_failed")) from e
        logger.info(f"[EVENT_SERVICE] Updated event {event_id}")

    async def delete_event(self, event_id: str) -> None:
        try:
            await self.event_repo.delete(event_id)
        except BackendError as e:
            raise BackendError(e.message, title=t("event_delete_failed")) from e
        logger.info(f"[EVENT_SERVICE] Deleted event {event_id}")
