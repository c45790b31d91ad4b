"""
Domain errors. Every failure a user can see carries a title and a message
that the web layer turns into a transient notification.
"""

from typing import Optional


class TechLinkError(Exception):
    """Base error with a user-facing title and message"""

    default_title = "Something went wrong"

    def __init__(self, message: str, title: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.title = title or self.default_title


class BackendError(TechLinkError):
    """The external data/auth service rejected or failed a call"""
    default_title = "Backend error"


class BackendNotConfigured(TechLinkError):
    """Supabase credentials are missing"""
    default_title = "Configuration error"


class ValidationFailed(TechLinkError):
    """Local validation failed; nothing was sent to the backend"""
    default_title = "Validation Error"


class RegistrationClosed(TechLinkError):
    """The selected event is not open for registration"""
    default_title = "Registration Not Available"


class TransitionRefused(TechLinkError):
    """Application status change not allowed from its current status"""
    default_title = "Status unchanged"


class LoginFailed(TechLinkError):
    default_title = "Login Failed"


class AccessDenied(LoginFailed):
    default_title = "Access Denied"
