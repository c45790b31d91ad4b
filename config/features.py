"""
Runtime switches for TechLink Events, read once from the environment.
"""

import os


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


class Features:
    """On/off toggles; everything defaults to off"""

    # === REGISTRATION ===
    # Drop closed events from the registration dropdown (the dashboard still lists them)
    HIDE_CLOSED_EVENTS: bool = _flag("HIDE_CLOSED_EVENTS")

    # === DIAGNOSTICS ===
    DEBUG_MODE: bool = _flag("DEBUG")
    # Log every Supabase response body at DEBUG level
    LOG_BACKEND_RESPONSES: bool = _flag("LOG_BACKEND_RESPONSES")

    @classmethod
    def to_dict(cls) -> dict:
        """Flag snapshot for the startup log"""
        return {
            "hide_closed_events": cls.HIDE_CLOSED_EVENTS,
            "debug_mode": cls.DEBUG_MODE,
            "log_backend_responses": cls.LOG_BACKEND_RESPONSES,
        }


features = Features()
