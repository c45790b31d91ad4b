"""
Auth service - admin login gate.
Credentials and roles are checked by the external auth service; this only
interprets its answers.
"""

import logging
from core.domain.models import AuthIdentity
from core.domain.constants import ADMIN_ROLE
from core.domain.errors import AccessDenied, BackendError, LoginFailed
from core.interfaces.auth import IAuthGateway
from locales import t

logger = logging.getLogger(__name__)


class AuthService:
    """Service for admin authentication"""

    def __init__(self, auth_gateway: IAuthGateway):
        self.auth_gateway = auth_gateway

    async def login(self, email: str, password: str) -> AuthIdentity:
        """Sign in and require the admin role. Raises LoginFailed/AccessDenied."""
        email = (email or "").strip()
        if not email or not password:
            raise LoginFailed(t("login_missing"), title=t("login_failed_title"))

        try:
            identity = await self.auth_gateway.sign_in(email, password)
        except BackendError as e:
            logger.info(f"[AUTH] Sign-in rejected for {email}: {e.message}")
            raise LoginFailed(e.message, title=t("login_failed_title")) from e

        if identity is None:
            raise LoginFailed(t("login_no_user"), title=t("login_failed_title"))

        try:
            role = await self.auth_gateway.get_role(identity.user_id)
        except BackendError as e:
            logger.warning(f"[AUTH] Role lookup failed for {identity.user_id}: {e.message}")
            raise AccessDenied(t("login_denied"), title=t("login_denied_title")) from e

        if role != ADMIN_ROLE:
            logger.warning(f"[AUTH] {email} signed in without admin role (role={role!r})")
            raise AccessDenied(t("login_denied"), title=t("login_denied_title"))

        logger.info(f"[AUTH] Admin {email} logged in")
        return identity
