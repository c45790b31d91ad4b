from core.interfaces.repositories import (
    IEventRepository,
    IApplicationRepository,
)
from core.interfaces.auth import IAuthGateway

__all__ = [
    # Repositories
    "IEventRepository",
    "IApplicationRepository",
    # Auth
    "IAuthGateway",
]
