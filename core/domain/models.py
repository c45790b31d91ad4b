"""
Domain models - the core of business logic.
These models are transport-agnostic (work with the web UI, scripts, tests, etc.)
"""

import json
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List, Any
from datetime import datetime, date, time, timezone
from enum import Enum
from core.domain.constants import MIN_GROUP_SIZE, MAX_GROUP_SIZE


# === ENUMS ===

class EventStatus(str, Enum):
    """Derived at read time, never persisted"""
    UPCOMING = "upcoming"
    OPEN = "open"
    CLOSED = "closed"


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# === TIMESTAMPS ===

def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Normalize a backend/form timestamp to an aware UTC datetime.

    Accepts datetime, date, or ISO strings ("2024-01-10", "2024-01-10T09:00:00Z").
    Date-only values mean midnight UTC; naive values are treated as UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    elif isinstance(value, str):
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    else:
        raise ValueError(f"Unsupported timestamp: {value!r}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_member_names(value: Any) -> List[str]:
    """Member names arrive as a JSON-encoded string array or a native list"""
    if value is None or value == "":
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            # Legacy rows stored a single plain name
            return [value]
    if value is None:
        return []
    if isinstance(value, list):
        return [str(v) for v in value if v is not None]
    if isinstance(value, (str, int, float)):
        return [str(value)]
    raise ValueError(f"Unsupported member list: {value!r}")


# === EVENT ===

class EventBase(BaseModel):
    name: str
    application_start_date: datetime
    application_end_date: datetime
    is_manually_closed: bool = False

    @field_validator("application_start_date", "application_end_date", mode="before")
    @classmethod
    def _normalize_dates(cls, v):
        return parse_timestamp(v)


class EventCreate(EventBase):
    """Data for creating an event"""
    pass


class EventUpdate(EventBase):
    """Data for updating an event (full replacement of editable fields)"""
    pass


class Event(EventBase):
    """Full event model"""
    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, v):
        return str(v)

    class Config:
        from_attributes = True


# === APPLICATION ===

class ApplicationCreate(BaseModel):
    """Data for creating an application. group_size always matches the member list."""
    event_id: str
    project_name: str
    university: str
    group_size: int = Field(ge=MIN_GROUP_SIZE, le=MAX_GROUP_SIZE)
    full_names: List[str]
    group_leader_email: str
    group_leader_phone: str
    problem_statement: str = ""
    solution: str = ""

    @model_validator(mode="after")
    def _check_group_size(self):
        if self.group_size != len(self.full_names):
            raise ValueError(
                f"group_size={self.group_size} does not match {len(self.full_names)} member names"
            )
        return self


class Application(BaseModel):
    """Full application model"""
    id: str
    event_id: str
    project_name: str
    university: Optional[str] = None
    group_size: int = 0
    full_names: List[str] = Field(default_factory=list)
    group_leader_email: Optional[str] = None
    group_leader_phone: Optional[str] = None
    problem_statement: Optional[str] = None
    solution: Optional[str] = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    created_at: Optional[datetime] = None

    @field_validator("id", "event_id", mode="before")
    @classmethod
    def _id_to_str(cls, v):
        return str(v)

    @field_validator("full_names", mode="before")
    @classmethod
    def _parse_names(cls, v):
        return parse_member_names(v)

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created(cls, v):
        return parse_timestamp(v)

    @property
    def team_leader(self) -> Optional[str]:
        return self.full_names[0] if self.full_names else None

    class Config:
        from_attributes = True


# === AUTH ===

class AuthIdentity(BaseModel):
    """Opaque identity returned by the auth service"""
    user_id: str
    email: Optional[str] = None


# === REGISTRATION DRAFT ===

class RegistrationDraft(BaseModel):
    """Form data kept between requests while the team fills in the registration form"""
    selected_event: str = ""
    project_name: str = ""
    university: str = ""
    group_members: List[str] = Field(default_factory=lambda: [""])
    leader_email: str = ""
    leader_phone: str = ""
    problem_statement: str = ""
    solution: str = ""

    @property
    def group_size(self) -> int:
        return len(self.group_members)

    @property
    def is_full(self) -> bool:
        return self.group_size >= MAX_GROUP_SIZE

    def add_member(self) -> bool:
        """Append an empty member slot. False when the group is already full."""
        if self.is_full:
            return False
        self.group_members.append("")
        return True

    def remove_member(self, index: int) -> None:
        # The team leader slot (index 0) is never removed
        if self.group_size > 1 and 0 < index < self.group_size:
            del self.group_members[index]

    def missing_fields(self) -> List[str]:
        """Names of required fields that are still empty"""
        required = {
            "selected_event": self.selected_event,
            "project_name": self.project_name,
            "university": self.university,
            "leader_email": self.leader_email,
            "leader_phone": self.leader_phone,
            "problem_statement": self.problem_statement,
            "solution": self.solution,
        }
        return [name for name, value in required.items() if not value.strip()]

    def to_application(self) -> ApplicationCreate:
        members = [m.strip() for m in self.group_members]
        return ApplicationCreate(
            event_id=self.selected_event,
            project_name=self.project_name.strip(),
            university=self.university.strip(),
            group_size=len(members),
            full_names=members,
            group_leader_email=self.leader_email.strip(),
            group_leader_phone=self.leader_phone.strip(),
            problem_statement=self.problem_statement.strip(),
            solution=self.solution.strip(),
        )
