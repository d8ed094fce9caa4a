from registry.domain.models import Event, EventDraft
from registry.domain.value_objects import MAX_ADDRESS_LENGTH, Address, AttendanceRecord, Capacity, EventId

__all__ = [
    "Event",
    "EventDraft",
    "EventId",
    "Address",
    "AttendanceRecord",
    "Capacity",
    "MAX_ADDRESS_LENGTH",
]
