"""Unit tests for domain primitives and errors.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timezone

import pytest

from registry.domain import AttendanceRecord, Capacity, Event, EventId
from registry.domain.errors import (
    DomainError,
    ErrorCode,
    EventDoesNotExistError,
    InvalidEventIdError,
    NotEventOrganizerError,
)

NOW = datetime(2030, 1, 1, tzinfo=timezone.utc)


def make_event(**overrides) -> Event:
    fields = {
        "id": EventId(1),
        "organizer": "0xorganizer",
        "required_credential": "0xcredential",
        "name": "Meetup",
        "location": "Hall A",
        "details": "Doors at six",
        "start_time": NOW,
        "end_time": NOW.replace(hour=3),
        "max_participants": Capacity(10),
        "created_at": NOW,
    }
    fields.update(overrides)
    return Event(**fields)


class TestEventId:
    """Tests for EventId value object."""

    def test_accepts_positive_integer(self):
        """EventId wraps a positive integer."""
        assert EventId(7).value == 7

    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_non_positive(self, value):
        """EventId raises ValueError below 1."""
        with pytest.raises(ValueError):
            EventId(value)

    def test_rejects_bool(self):
        """Booleans are not event ids."""
        with pytest.raises(ValueError):
            EventId(True)

    def test_from_string_valid(self):
        """EventId.from_string parses integer text."""
        assert EventId.from_string(" 42 ") == EventId(42)

    def test_from_string_invalid(self):
        """EventId.from_string raises ValueError for non-numeric text."""
        with pytest.raises(ValueError):
            EventId.from_string("forty-two")


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        assert Capacity(1).value == 1

    def test_capacity_rejects_zero(self):
        """Capacity raises ValueError for zero."""
        with pytest.raises(ValueError):
            Capacity(0)


class TestEvent:
    """Tests for Event snapshot helpers."""

    def test_defaults_are_open_and_empty(self):
        event = make_event()
        assert not event.cancelled
        assert not event.registration_closed
        assert event.participants == ()
        assert event.attendance == ()

    def test_is_organized_by(self):
        event = make_event()
        assert event.is_organized_by("0xorganizer")
        assert not event.is_organized_by("0xsomeone")

    def test_has_checked_in(self):
        event = make_event(attendance=(AttendanceRecord("0xalice", NOW),))
        assert event.has_checked_in("0xalice")
        assert not event.has_checked_in("0xbob")


class TestDomainErrors:
    """Tests for domain error codes and messages."""

    def test_str_includes_code(self):
        assert str(InvalidEventIdError()) == "INVALID_EVENT_ID: Invalid event ID"

    def test_error_carries_event_id(self):
        error = NotEventOrganizerError(EventId(3))
        assert error.code is ErrorCode.NOT_EVENT_ORGANIZER
        assert error.event_id == EventId(3)

    def test_errors_are_domain_errors(self):
        with pytest.raises(DomainError) as excinfo:
            raise EventDoesNotExistError(5)
        assert excinfo.value.code is ErrorCode.EVENT_DOES_NOT_EXIST
