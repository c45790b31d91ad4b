from core.services.event_service import EventService
from core.services.registration_service import RegistrationService
from core.services.admin_service import AdminService, AdminDashboard
from core.services.auth_service import AuthService

__all__ = [
    "EventService",
    "RegistrationService",
    "AdminService",
    "AdminDashboard",
    "AuthService",
]
