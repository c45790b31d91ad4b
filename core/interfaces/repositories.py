"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL -> in-memory fakes, etc.)

Mutations report success or raise BackendError. They never return the
changed record: callers re-fetch before displaying anything.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from core.domain.models import (
    Event, EventCreate, EventUpdate,
    Application, ApplicationCreate, ApplicationStatus,
)


class IEventRepository(ABC):
    """Interface for event data access"""

    @abstractmethod
    async def list_all(self) -> List[Event]:
        """All events, ordered by application start date ascending"""
        pass

    @abstractmethod
    async def get_by_id(self, event_id: str) -> Optional[Event]:
        """Get event by ID"""
        pass

    @abstractmethod
    async def create(self, event_data: EventCreate) -> None:
        """Create a new event"""
        pass

    @abstractmethod
    async def update(self, event_id: str, event_data: EventUpdate) -> None:
        """Update an existing event"""
        pass

    @abstractmethod
    async def delete(self, event_id: str) -> None:
        """Delete an event"""
        pass


class IApplicationRepository(ABC):
    """Interface for application data access"""

    @abstractmethod
    async def list_all(self, event_id: Optional[str] = None) -> List[Application]:
        """Applications newest first, optionally for one event only"""
        pass

    @abstractmethod
    async def get_by_id(self, application_id: str) -> Optional[Application]:
        """Get application by ID"""
        pass

    @abstractmethod
    async def create(self, application_data: ApplicationCreate) -> None:
        """Submit a new application (status starts as pending)"""
        pass

    @abstractmethod
    async def update_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        expected: ApplicationStatus = ApplicationStatus.PENDING,
    ) -> bool:
        """
        Set status only if the row still has the expected status.
        Returns False when no row matched.
        """
        pass
