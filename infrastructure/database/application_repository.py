"""
Supabase implementation of Application repository.
"""

import json
import logging
from typing import Optional, List

from core.domain.errors import BackendError
from core.domain.models import Application, ApplicationCreate, ApplicationStatus
from core.domain.constants import APPLICATIONS_TABLE, APPLICATIONS_ORDER_COLUMN
from core.interfaces.repositories import IApplicationRepository
from infrastructure.database.supabase_client import get_supabase, run_sync
from locales import t

logger = logging.getLogger(__name__)


class SupabaseApplicationRepository(IApplicationRepository):
    """Supabase implementation of application repository"""

    def _to_model(self, data: dict) -> Application:
        """Convert database row to Application model"""
        return Application(
            id=data["id"],
            event_id=data["event_id"],
            project_name=data.get("project_name") or "",
            university=data.get("university"),
            group_size=data.get("group_size") or 0,
            full_names=data.get("full_names"),
            group_leader_email=data.get("group_leader_email"),
            group_leader_phone=data.get("group_leader_phone"),
            problem_statement=data.get("problem_statement"),
            solution=data.get("solution"),
            status=ApplicationStatus(data.get("status") or ApplicationStatus.PENDING.value),
            created_at=data.get("created_at"),
        )

    def _parse(self, data: dict) -> Application:
        try:
            return self._to_model(data)
        except (KeyError, ValueError) as e:
            logger.error(f"[APPLICATION_REPO] Unreadable application row {data.get('id')}: {e}")
            raise BackendError(t("backend_bad_record", kind="application", record_id=data.get("id"))) from e

    @run_sync
    def _list_all_sync(self, event_id: Optional[str]) -> List[dict]:
        query = get_supabase().table(APPLICATIONS_TABLE).select("*")
        if event_id is not None:
            query = query.eq("event_id", event_id)
        response = query.order(APPLICATIONS_ORDER_COLUMN, desc=True).execute()
        return response.data or []

    async def list_all(self, event_id: Optional[str] = None) -> List[Application]:
        rows = await self._list_all_sync(event_id)
        return [self._parse(r) for r in rows]

    @run_sync
    def _get_by_id_sync(self, application_id: str) -> Optional[dict]:
        response = get_supabase().table(APPLICATIONS_TABLE).select("*")\
            .eq("id", application_id)\
            .execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, application_id: str) -> Optional[Application]:
        data = await self._get_by_id_sync(application_id)
        return self._parse(data) if data else None

    @run_sync
    def _create_sync(self, data: dict) -> None:
        get_supabase().table(APPLICATIONS_TABLE).insert([data]).execute()

    async def create(self, application_data: ApplicationCreate) -> None:
        data = application_data.model_dump()
        # Stored as a JSON-encoded array, in submission order
        data["full_names"] = json.dumps(application_data.full_names)
        logger.info(
            f"[APPLICATION_REPO] Inserting '{application_data.project_name}' "
            f"for event {application_data.event_id}"
        )
        await self._create_sync(data)

    @run_sync
    def _update_status_sync(self, application_id: str, status: str, expected: str) -> List[dict]:
        response = get_supabase().table(APPLICATIONS_TABLE)\
            .update({"status": status})\
            .eq("id", application_id)\
            .eq("status", expected)\
            .execute()
        return response.data or []

    async def update_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        expected: ApplicationStatus = ApplicationStatus.PENDING,
    ) -> bool:
        rows = await self._update_status_sync(application_id, status.value, expected.value)
        logger.info(
            f"[APPLICATION_REPO] {expected.value} -> {status.value} for {application_id}: "
            f"{len(rows)} row(s)"
        )
        return len(rows) > 0
