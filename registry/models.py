"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models

from registry.domain import MAX_ADDRESS_LENGTH


class Event(models.Model):
    """Persistence model for events. The auto-increment key is the event id."""

    id = models.BigAutoField(primary_key=True)
    organizer = models.CharField(max_length=MAX_ADDRESS_LENGTH)
    required_credential = models.CharField(max_length=MAX_ADDRESS_LENGTH)
    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    details = models.TextField()
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()
    max_participants = models.PositiveIntegerField()
    registration_closed = models.BooleanField(default=False)
    cancelled = models.BooleanField(default=False)
    created_at = models.DateTimeField()

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(start_time__lt=models.F("end_time")),
                name="registry_event_starts_before_end",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class Registration(models.Model):
    """Persistence model for the registration index. Key order is insertion order."""

    id = models.BigAutoField(primary_key=True)
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="registrations")
    participant = models.CharField(max_length=MAX_ADDRESS_LENGTH)
    registered_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["event", "participant"], name="registry_unique_registration"),
        ]

    def __str__(self) -> str:
        return f"{self.participant} - {self.event_id}"


class Attendance(models.Model):
    """Persistence model for check-ins."""

    id = models.BigAutoField(primary_key=True)
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="attendance")
    attendee = models.CharField(max_length=MAX_ADDRESS_LENGTH)
    checked_in_at = models.DateTimeField()

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["event", "attendee"], name="registry_unique_attendance"),
        ]

    def __str__(self) -> str:
        return f"{self.attendee} - {self.event_id} @ {self.checked_in_at}"
