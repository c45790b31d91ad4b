"""
Pytest configuration and shared fixtures.

Repositories and the auth gateway are replaced by in-memory fakes that
implement the same interfaces as the Supabase versions.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

import pytest

from config.settings import Settings
from core.domain.errors import BackendError
from core.domain.models import (
    Application, ApplicationCreate, ApplicationStatus, AuthIdentity,
    Event, EventCreate, EventUpdate,
)
from core.interfaces.auth import IAuthGateway
from core.interfaces.repositories import IApplicationRepository, IEventRepository
from adapters.web.app import create_app
from adapters.web.loader import build_services


NOW = datetime(2024, 1, 5, 12, 0, tzinfo=timezone.utc)


class FakeEventRepository(IEventRepository):
    def __init__(self, events: Optional[List[Event]] = None):
        self.events = {e.id: e for e in events or []}
        self.fail_with: Optional[str] = None
        self._next_id = len(self.events) + 1

    def _check(self):
        if self.fail_with:
            raise BackendError(self.fail_with)

    async def list_all(self) -> List[Event]:
        self._check()
        return sorted(self.events.values(), key=lambda e: e.application_start_date)

    async def get_by_id(self, event_id: str) -> Optional[Event]:
        self._check()
        return self.events.get(event_id)

    async def create(self, event_data: EventCreate) -> None:
        self._check()
        event_id = f"evt-{self._next_id}"
        self._next_id += 1
        self.events[event_id] = Event(id=event_id, **event_data.model_dump())

    async def update(self, event_id: str, event_data: EventUpdate) -> None:
        self._check()
        if event_id in self.events:
            self.events[event_id] = Event(id=event_id, **event_data.model_dump())

    async def delete(self, event_id: str) -> None:
        self._check()
        self.events.pop(event_id, None)


class FakeApplicationRepository(IApplicationRepository):
    def __init__(self, applications: Optional[List[Application]] = None):
        self.applications = {a.id: a for a in applications or []}
        self.created: List[ApplicationCreate] = []
        self.fail_with: Optional[str] = None
        self._next_id = len(self.applications) + 1

    def _check(self):
        if self.fail_with:
            raise BackendError(self.fail_with)

    async def list_all(self, event_id: Optional[str] = None) -> List[Application]:
        self._check()
        apps = [a for a in self.applications.values() if event_id is None or a.event_id == event_id]
        return sorted(apps, key=lambda a: a.created_at, reverse=True)

    async def get_by_id(self, application_id: str) -> Optional[Application]:
        self._check()
        return self.applications.get(application_id)

    async def create(self, application_data: ApplicationCreate) -> None:
        self._check()
        self.created.append(application_data)
        app_id = f"app-{self._next_id}"
        self.applications[app_id] = Application(
            id=app_id,
            created_at=NOW + timedelta(minutes=self._next_id),
            **application_data.model_dump(),
        )
        self._next_id += 1

    async def update_status(self, application_id, status, expected=ApplicationStatus.PENDING) -> bool:
        self._check()
        app = self.applications.get(application_id)
        if app is None or app.status != expected:
            return False
        self.applications[application_id] = app.model_copy(update={"status": status})
        return True


class FakeAuthGateway(IAuthGateway):
    def __init__(self):
        # email -> (password, user_id)
        self.accounts = {}
        # user_id -> role
        self.roles = {}
        self.role_error: Optional[str] = None
        self.return_no_user = False

    def add_account(self, email: str, password: str, user_id: str, role: Optional[str] = None):
        self.accounts[email] = (password, user_id)
        if role is not None:
            self.roles[user_id] = role

    async def sign_in(self, email: str, password: str) -> Optional[AuthIdentity]:
        if self.return_no_user:
            return None
        account = self.accounts.get(email)
        if account is None or account[0] != password:
            raise BackendError("Invalid login credentials")
        return AuthIdentity(user_id=account[1], email=email)

    async def get_role(self, user_id: str) -> Optional[str]:
        if self.role_error:
            raise BackendError(self.role_error)
        return self.roles.get(user_id)


def make_event(event_id="evt-1", name="Hackathon", start="2024-01-01", end="2024-01-10", closed=False) -> Event:
    return Event(
        id=event_id,
        name=name,
        application_start_date=start,
        application_end_date=end,
        is_manually_closed=closed,
    )


def make_application(app_id="app-1", event_id="evt-1", group_size=2, status="pending", minutes=0) -> Application:
    return Application(
        id=app_id,
        event_id=event_id,
        project_name=f"Project {app_id}",
        university="MIT",
        group_size=group_size,
        full_names=[f"Member {i + 1}" for i in range(group_size)],
        group_leader_email="lead@uni.edu",
        group_leader_phone="+1 555 0100",
        problem_statement="Problem",
        solution="Solution",
        status=status,
        created_at=NOW + timedelta(minutes=minutes),
    )


@pytest.fixture
def now():
    """Fixed clock inside the default 2024-01-01..2024-01-10 window."""
    return NOW


@pytest.fixture
def event_factory():
    """Build Event models with sensible defaults."""
    return make_event


@pytest.fixture
def application_factory():
    """Build Application models with sensible defaults."""
    return make_application


@pytest.fixture
def event_repo():
    return FakeEventRepository()


@pytest.fixture
def application_repo():
    return FakeApplicationRepository()


@pytest.fixture
def auth_gateway():
    gateway = FakeAuthGateway()
    gateway.add_account("admin@techlink.dev", "secret", "user-admin", role="admin")
    gateway.add_account("student@techlink.dev", "secret", "user-student", role="participant")
    return gateway


@pytest.fixture
def services(event_repo, application_repo, auth_gateway):
    return build_services(event_repo, application_repo, auth_gateway)


@pytest.fixture
def live_window_event():
    """An event whose application window contains the real current time."""
    now = datetime.now(timezone.utc)
    return make_event(
        event_id="evt-live",
        name="Live Hackathon",
        start=(now - timedelta(days=1)).isoformat(),
        end=(now + timedelta(days=1)).isoformat(),
    )


@pytest.fixture
async def client(aiohttp_client, services):
    app = create_app(services, Settings(session_cookie_name="techlink_test"))
    return await aiohttp_client(app)
