"""
Supabase Auth + users-table role lookup.
"""

import logging
from typing import Optional

from core.domain.models import AuthIdentity
from core.domain.constants import USERS_TABLE
from core.interfaces.auth import IAuthGateway
from infrastructure.database.supabase_client import get_supabase, new_auth_client, run_sync

logger = logging.getLogger(__name__)


class SupabaseAuthGateway(IAuthGateway):
    """Delegates password checks to Supabase Auth and reads roles from the users table"""

    @run_sync
    def _sign_in_sync(self, email: str, password: str) -> Optional[dict]:
        client = new_auth_client()
        response = client.auth.sign_in_with_password({"email": email, "password": password})
        user = response.user if response else None
        if user is None:
            return None
        # Only the identity is kept; the session lives and dies with this client
        client.auth.sign_out()
        return {"user_id": str(user.id), "email": user.email}

    async def sign_in(self, email: str, password: str) -> Optional[AuthIdentity]:
        data = await self._sign_in_sync(email, password)
        return AuthIdentity(**data) if data else None

    @run_sync
    def _get_role_sync(self, user_id: str) -> Optional[str]:
        response = get_supabase().table(USERS_TABLE).select("role")\
            .eq("id", user_id)\
            .limit(1)\
            .execute()
        return response.data[0].get("role") if response.data else None

    async def get_role(self, user_id: str) -> Optional[str]:
        role = await self._get_role_sync(user_id)
        logger.info(f"[AUTH_GATEWAY] Role for {user_id}: {role!r}")
        return role
