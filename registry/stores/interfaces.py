"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
The registry only mutates an event while holding `locked(event_id)`.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from registry.domain import Address, AttendanceRecord, Event, EventDraft, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def create_event(self, draft: EventDraft) -> Event:
        """Persist a new event under the next sequential id and return it."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by id ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return a consistent snapshot of an event, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def locked(self, event_id: EventId) -> AbstractContextManager[Event | None]:
        """Serialize mutations on one event.

        Yields the event snapshot taken under the lock, or None if not found.
        Everything written inside the block is applied together or not at all.
        """
        ...

    @abstractmethod
    def is_registered(self, event_id: EventId, address: Address) -> bool:
        """Look up the registration index."""
        ...

    @abstractmethod
    def add_participant(self, event_id: EventId, address: Address) -> None:
        """Append a participant and mark them registered."""
        ...

    @abstractmethod
    def add_attendance(self, event_id: EventId, record: AttendanceRecord) -> None:
        """Append an attendance record."""
        ...

    @abstractmethod
    def mark_cancelled(self, event_id: EventId) -> None:
        """Flag the event as cancelled."""
        ...
