"""
Per-session application state and the view state machine.

    registration <-> login <-> admin

Each browser session owns one AppState. The cached events/applications are
only a display cache: they are replaced by every successful fetch and kept
as they were when a fetch fails.
"""

import logging
import secrets
from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from core.domain.constants import ALL_EVENTS
from core.domain.errors import TechLinkError
from core.domain.models import Application, AuthIdentity, Event, RegistrationDraft

logger = logging.getLogger(__name__)

APP_STATE = "app_state"
MAX_SESSIONS = 10_000


class AppView(str, Enum):
    REGISTRATION = "registration"
    LOGIN = "login"
    ADMIN = "admin"


@dataclass
class Notification:
    """Transient toast, shown once on the next render"""
    title: str
    message: str = ""
    variant: str = "default"  # 'default' or 'destructive'


@dataclass
class AppState:
    current_view: AppView = AppView.REGISTRATION
    is_logged_in: bool = False
    admin: Optional[AuthIdentity] = None
    draft: RegistrationDraft = field(default_factory=RegistrationDraft)
    application_filter: str = ALL_EVENTS
    events: List[Event] = field(default_factory=list)
    applications: List[Application] = field(default_factory=list)
    notifications: List[Notification] = field(default_factory=list)

    # === TRANSITIONS ===

    def change_view(self, view: AppView) -> AppView:
        """Navigation buttons. The admin view is behind the login gate."""
        view = AppView(view)
        if view == AppView.ADMIN and not self.is_logged_in:
            self.current_view = AppView.LOGIN
        elif view == AppView.LOGIN:
            self.request_login()
        else:
            self.current_view = view
        return self.current_view

    def request_login(self) -> None:
        self.current_view = AppView.LOGIN

    def login_succeeded(self, identity: AuthIdentity) -> None:
        self.is_logged_in = True
        self.admin = identity
        self.current_view = AppView.ADMIN

    def login_cancelled(self) -> None:
        self.current_view = AppView.REGISTRATION

    def logout(self) -> None:
        self.is_logged_in = False
        self.admin = None
        self.applications = []
        self.application_filter = ALL_EVENTS
        self.current_view = AppView.REGISTRATION

    # === NOTIFICATIONS ===

    def notify(self, title: str, message: str = "", variant: str = "default") -> None:
        self.notifications.append(Notification(title=title, message=message, variant=variant))

    def notify_error(self, error: TechLinkError) -> None:
        self.notify(error.title, error.message, variant="destructive")

    def pop_notifications(self) -> List[Notification]:
        pending, self.notifications = self.notifications, []
        return pending


class SessionStore:
    """
    In-memory sessions keyed by an opaque cookie token.
    Least recently used sessions are dropped past max_sessions.
    """

    def __init__(self, max_sessions: int = MAX_SESSIONS):
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, AppState]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, token: Optional[str]) -> Optional[AppState]:
        if not token:
            return None
        state = self._sessions.get(token)
        if state is not None:
            self._sessions.move_to_end(token)
        return state

    def create(self) -> Tuple[str, AppState]:
        token = secrets.token_urlsafe(32)
        state = AppState()
        self._sessions[token] = state
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.debug(f"[SESSIONS] Evicted session {evicted[:6]}...")
        return token, state
