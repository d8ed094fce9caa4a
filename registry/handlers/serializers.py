"""Serializers for request payloads and domain model responses.

Input serializers check format only. Business rules (blank names, time
ordering, capacity) are the registry's job so they surface as domain errors.
"""

from rest_framework import serializers

from registry.domain import MAX_ADDRESS_LENGTH


class EventCreateSerializer(serializers.Serializer):
    """Payload for POST /api/events."""

    required_credential = serializers.CharField(allow_blank=True, max_length=MAX_ADDRESS_LENGTH)
    name = serializers.CharField(allow_blank=True, max_length=255)
    location = serializers.CharField(allow_blank=True, max_length=255)
    details = serializers.CharField(allow_blank=True)
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()
    max_participants = serializers.IntegerField()


class CheckInSerializer(serializers.Serializer):
    """Payload for POST /api/events/{event_id}/check-ins."""

    participant = serializers.CharField(max_length=MAX_ADDRESS_LENGTH)


class AttendanceRecordSerializer(serializers.Serializer):
    """Serializer for AttendanceRecord domain values."""

    attendee = serializers.CharField()
    checked_in_at = serializers.DateTimeField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model. Participant identities are not exposed."""

    id = serializers.IntegerField(source="id.value")
    organizer = serializers.CharField()
    required_credential = serializers.CharField()
    name = serializers.CharField()
    location = serializers.CharField()
    details = serializers.CharField()
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()
    created_at = serializers.DateTimeField()
    max_participants = serializers.IntegerField(source="max_participants.value")
    registration_closed = serializers.BooleanField()
    cancelled = serializers.BooleanField()
    participant_count = serializers.SerializerMethodField()

    def get_participant_count(self, event) -> int:
        return len(event.participants)
