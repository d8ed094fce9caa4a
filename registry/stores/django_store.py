"""Django ORM implementation of the EventStore."""

from collections.abc import Iterator
from contextlib import contextmanager

from django.db import transaction

from registry import models
from registry.domain import Address, AttendanceRecord, Capacity, Event, EventDraft, EventId
from registry.stores.interfaces import EventStore


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.pk),
        organizer=row.organizer,
        required_credential=row.required_credential,
        name=row.name,
        location=row.location,
        details=row.details,
        start_time=row.start_time,
        end_time=row.end_time,
        max_participants=Capacity(row.max_participants),
        created_at=row.created_at,
        registration_closed=row.registration_closed,
        cancelled=row.cancelled,
        participants=tuple(r.participant for r in row.registrations.all()),
        attendance=tuple(AttendanceRecord(a.attendee, a.checked_in_at) for a in row.attendance.all()),
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def _queryset(self):
        return models.Event.objects.prefetch_related("registrations", "attendance")

    def create_event(self, draft: EventDraft, *, registration_closed: bool = False) -> Event:
        row = models.Event.objects.create(
            organizer=draft.organizer,
            required_credential=draft.required_credential,
            name=draft.name,
            location=draft.location,
            details=draft.details,
            start_time=draft.start_time,
            end_time=draft.end_time,
            max_participants=draft.max_participants.value,
            registration_closed=registration_closed,
            created_at=draft.created_at,
        )
        return _to_domain(row)

    def list_events(self) -> list[Event]:
        return [_to_domain(row) for row in self._queryset().order_by("id")]

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._queryset().filter(pk=event_id.value).first()
        return _to_domain(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    @contextmanager
    def locked(self, event_id: EventId) -> Iterator[Event | None]:
        with transaction.atomic():
            row = models.Event.objects.select_for_update().filter(pk=event_id.value).first()
            yield _to_domain(row) if row is not None else None

    def is_registered(self, event_id: EventId, address: Address) -> bool:
        return models.Registration.objects.filter(event_id=event_id.value, participant=address).exists()

    def add_participant(self, event_id: EventId, address: Address) -> None:
        models.Registration.objects.create(event_id=event_id.value, participant=address)

    def add_attendance(self, event_id: EventId, record: AttendanceRecord) -> None:
        models.Attendance.objects.create(
            event_id=event_id.value,
            attendee=record.attendee,
            checked_in_at=record.checked_in_at,
        )

    def mark_cancelled(self, event_id: EventId) -> None:
        models.Event.objects.filter(pk=event_id.value).update(cancelled=True)
