from infrastructure.database.event_repository import SupabaseEventRepository
from infrastructure.database.application_repository import SupabaseApplicationRepository
from infrastructure.database.auth_gateway import SupabaseAuthGateway

__all__ = [
    "SupabaseEventRepository",
    "SupabaseApplicationRepository",
    "SupabaseAuthGateway",
]
