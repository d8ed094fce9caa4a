from registry.handlers.views import (
    AttendanceListView,
    CancelEventView,
    CheckInView,
    EventDetailView,
    EventListView,
    ParticipantListView,
    RegistrationView,
)

__all__ = [
    "AttendanceListView",
    "CancelEventView",
    "CheckInView",
    "EventDetailView",
    "EventListView",
    "ParticipantListView",
    "RegistrationView",
]
