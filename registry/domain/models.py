"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in registry/models.py (persistence layer).
Stores hand these out as snapshots; the mutable collections stay inside the store.
"""

from dataclasses import dataclass
from datetime import datetime

from registry.domain.value_objects import Address, AttendanceRecord, Capacity, EventId


@dataclass(frozen=True)
class EventDraft:
    """Validated input for a new event, before an id is allocated."""

    organizer: Address
    required_credential: Address
    name: str
    location: str
    details: str
    start_time: datetime
    end_time: datetime
    max_participants: Capacity
    created_at: datetime


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    organizer: Address
    required_credential: Address
    name: str
    location: str
    details: str
    start_time: datetime
    end_time: datetime
    max_participants: Capacity
    created_at: datetime
    registration_closed: bool = False
    cancelled: bool = False
    participants: tuple[Address, ...] = ()
    attendance: tuple[AttendanceRecord, ...] = ()

    def is_organized_by(self, address: Address) -> bool:
        return self.organizer == address

    def has_checked_in(self, address: Address) -> bool:
        return any(record.attendee == address for record in self.attendance)
