"""In-process EventStore.

An arena of event records keyed by sequential id. Each record owns its
participant list, registration set and attendance list; callers only ever
see frozen snapshots.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from registry.domain import Address, AttendanceRecord, Event, EventDraft, EventId
from registry.stores.interfaces import EventStore


@dataclass
class _EventRecord:
    draft: EventDraft
    registration_closed: bool = False
    cancelled: bool = False
    participants: list[Address] = field(default_factory=list)
    registrations: set[Address] = field(default_factory=set)
    attendance: list[AttendanceRecord] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock)

    def snapshot(self, event_id: EventId) -> Event:
        return Event(
            id=event_id,
            organizer=self.draft.organizer,
            required_credential=self.draft.required_credential,
            name=self.draft.name,
            location=self.draft.location,
            details=self.draft.details,
            start_time=self.draft.start_time,
            end_time=self.draft.end_time,
            max_participants=self.draft.max_participants,
            created_at=self.draft.created_at,
            registration_closed=self.registration_closed,
            cancelled=self.cancelled,
            participants=tuple(self.participants),
            attendance=tuple(self.attendance),
        )


class InMemoryEventStore(EventStore):
    """Thread-safe event store living in process memory."""

    def __init__(self) -> None:
        # Guards the id counter, the table and every record's collections.
        self._lock = threading.Lock()
        self._records: dict[int, _EventRecord] = {}
        self._last_id = 0

    def create_event(self, draft: EventDraft, *, registration_closed: bool = False) -> Event:
        with self._lock:
            self._last_id += 1
            event_id = EventId(self._last_id)
            record = _EventRecord(draft=draft, registration_closed=registration_closed)
            self._records[event_id.value] = record
            return record.snapshot(event_id)

    def list_events(self) -> list[Event]:
        with self._lock:
            return [record.snapshot(EventId(key)) for key, record in sorted(self._records.items())]

    def get_event(self, event_id: EventId) -> Event | None:
        with self._lock:
            record = self._records.get(event_id.value)
            return record.snapshot(event_id) if record is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        with self._lock:
            return event_id.value in self._records

    @contextmanager
    def locked(self, event_id: EventId) -> Iterator[Event | None]:
        with self._lock:
            record = self._records.get(event_id.value)
        if record is None:
            yield None
            return
        with record.lock:
            yield self.get_event(event_id)

    def is_registered(self, event_id: EventId, address: Address) -> bool:
        with self._lock:
            record = self._records.get(event_id.value)
            return record is not None and address in record.registrations

    def add_participant(self, event_id: EventId, address: Address) -> None:
        with self._lock:
            record = self._records[event_id.value]
            if address in record.registrations:
                raise ValueError(f"{address} is already registered for event {event_id}")
            record.registrations.add(address)
            record.participants.append(address)

    def add_attendance(self, event_id: EventId, record: AttendanceRecord) -> None:
        with self._lock:
            self._records[event_id.value].attendance.append(record)

    def mark_cancelled(self, event_id: EventId) -> None:
        with self._lock:
            self._records[event_id.value].cancelled = True
