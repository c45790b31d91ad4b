"""
Registration service - team applications to open events.
"""

import logging
from datetime import datetime
from typing import Optional, List
from pydantic import ValidationError

from core.domain.constants import MAX_GROUP_SIZE
from core.domain.models import Event, EventStatus, RegistrationDraft
from core.domain.status import event_status
from core.domain.errors import (
    BackendError, RegistrationClosed, ValidationFailed,
)
from core.interfaces.repositories import IEventRepository, IApplicationRepository
from locales import t

logger = logging.getLogger(__name__)


class RegistrationService:
    """Validates a registration draft and submits it as one create call"""

    def __init__(self, event_repo: IEventRepository, application_repo: IApplicationRepository):
        self.event_repo = event_repo
        self.application_repo = application_repo

    async def list_events(self) -> List[Event]:
        """Events offered in the form, with their status computed by the caller"""
        try:
            return await self.event_repo.list_all()
        except BackendError as e:
            raise BackendError(e.message, title=t("events_fetch_failed")) from e

    async def _selected_event(self, draft: RegistrationDraft) -> Optional[Event]:
        if not draft.selected_event:
            return None
        try:
            return await self.event_repo.get_by_id(draft.selected_event)
        except BackendError as e:
            raise BackendError(e.message, title=t("events_fetch_failed")) from e

    async def submit(self, draft: RegistrationDraft, now: Optional[datetime] = None) -> Event:
        """
        Submit the draft for its selected event.

        Nothing is sent unless the event exists, is open right now, and every
        required field is filled in. Returns the event registered for.
        """
        event = await self._selected_event(draft)
        if event is None or event_status(event, now) != EventStatus.OPEN:
            logger.info(f"[REGISTRATION] Refused draft for event '{draft.selected_event}': not open")
            raise RegistrationClosed(
                t("registration_not_available"),
                title=t("registration_not_available_title"),
            )

        missing = draft.missing_fields()
        if missing:
            logger.info(f"[REGISTRATION] Missing required fields: {missing}")
            raise ValidationFailed(t("registration_missing"), title=t("registration_missing_title"))

        if draft.group_size > MAX_GROUP_SIZE:
            logger.info(f"[REGISTRATION] Refused draft with {draft.group_size} members")
            raise ValidationFailed(t("registration_too_many_members", max=MAX_GROUP_SIZE))

        try:
            application = draft.to_application()
        except ValidationError as e:
            logger.warning(f"[REGISTRATION] Draft did not build an application: {e}")
            raise ValidationFailed(t("registration_invalid")) from e

        try:
            await self.application_repo.create(application)
        except BackendError as e:
            raise BackendError(e.message, title=t("registration_error_title")) from e

        logger.info(
            f"[REGISTRATION] '{application.project_name}' registered for event {event.id} "
            f"with {application.group_size} member(s)"
        )
        return event
