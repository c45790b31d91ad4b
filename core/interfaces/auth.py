"""
Auth interface - credential verification and role lookup are both external.
"""

from abc import ABC, abstractmethod
from typing import Optional
from core.domain.models import AuthIdentity


class IAuthGateway(ABC):
    """Interface for the external auth service"""

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> Optional[AuthIdentity]:
        """
        Password sign-in.
        Returns the identity, None if the service returned no user,
        raises BackendError with the service message on rejection.
        """
        pass

    @abstractmethod
    async def get_role(self, user_id: str) -> Optional[str]:
        """Role string stored for this user, None if there is no row"""
        pass
