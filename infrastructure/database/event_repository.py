"""
Supabase implementation of Event repository.
"""

import logging
from typing import Optional, List

from pydantic import ValidationError

from core.domain.errors import BackendError
from core.domain.models import Event, EventCreate, EventUpdate
from core.domain.constants import EVENTS_TABLE, EVENTS_ORDER_COLUMN
from core.interfaces.repositories import IEventRepository
from infrastructure.database.supabase_client import get_supabase, run_sync
from locales import t

logger = logging.getLogger(__name__)


def _to_row(event_data: EventCreate) -> dict:
    return {
        "name": event_data.name,
        "application_start_date": event_data.application_start_date.isoformat(),
        "application_end_date": event_data.application_end_date.isoformat(),
        "is_manually_closed": event_data.is_manually_closed,
    }


class SupabaseEventRepository(IEventRepository):
    """Supabase implementation of event repository"""

    def _to_model(self, data: dict) -> Event:
        """Convert database row to Event model"""
        return Event(
            id=data["id"],
            name=data["name"],
            application_start_date=data["application_start_date"],
            application_end_date=data["application_end_date"],
            is_manually_closed=bool(data.get("is_manually_closed")),
        )

    def _parse(self, data: dict) -> Event:
        try:
            return self._to_model(data)
        except (KeyError, ValidationError) as e:
            logger.error(f"[EVENT_REPO] Unreadable event row {data.get('id')}: {e}")
            raise BackendError(t("backend_bad_record", kind="event", record_id=data.get("id"))) from e

    @run_sync
    def _list_all_sync(self) -> List[dict]:
        response = get_supabase().table(EVENTS_TABLE).select("*")\
            .order(EVENTS_ORDER_COLUMN, desc=False)\
            .execute()
        return response.data or []

    async def list_all(self) -> List[Event]:
        rows = await self._list_all_sync()
        return [self._parse(r) for r in rows]

    @run_sync
    def _get_by_id_sync(self, event_id: str) -> Optional[dict]:
        response = get_supabase().table(EVENTS_TABLE).select("*").eq("id", event_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, event_id: str) -> Optional[Event]:
        data = await self._get_by_id_sync(event_id)
        return self._parse(data) if data else None

    @run_sync
    def _create_sync(self, data: dict) -> None:
        get_supabase().table(EVENTS_TABLE).insert(data).execute()

    async def create(self, event_data: EventCreate) -> None:
        logger.info(f"[EVENT_REPO] Inserting event '{event_data.name}'")
        await self._create_sync(_to_row(event_data))

    @run_sync
    def _update_sync(self, event_id: str, data: dict) -> None:
        get_supabase().table(EVENTS_TABLE).update(data).eq("id", event_id).execute()

    async def update(self, event_id: str, event_data: EventUpdate) -> None:
        logger.info(f"[EVENT_REPO] Updating event {event_id}")
        await self._update_sync(event_id, _to_row(event_data))

    @run_sync
    def _delete_sync(self, event_id: str) -> None:
        get_supabase().table(EVENTS_TABLE).delete().eq("id", event_id).execute()

    async def delete(self, event_id: str) -> None:
        logger.info(f"[EVENT_REPO] Deleting event {event_id}")
        await self._delete_sync(event_id)
