"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import datetime
from typing import Self

# Principals and credential collections are opaque identities, compared only for equality.
Address = str

# Column width for stored addresses.
MAX_ADDRESS_LENGTH = 255


@dataclass(frozen=True)
class EventId:
    """Sequential identifier for an Event. Always positive."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("EventId must be an integer")
        if self.value < 1:
            raise ValueError("EventId must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value.strip()))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Capacity:
    """Positive integer representing the advertised participant limit."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Capacity must be positive")


@dataclass(frozen=True)
class AttendanceRecord:
    """A participant checked in at a given time."""

    attendee: Address
    checked_in_at: datetime
