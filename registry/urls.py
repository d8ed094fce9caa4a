from django.urls import path

from registry.handlers import (
    AttendanceListView,
    CancelEventView,
    CheckInView,
    EventDetailView,
    EventListView,
    ParticipantListView,
    RegistrationView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/registrations",
        RegistrationView.as_view(),
        name="event-registrations",
    ),
    path(
        "events/<str:event_id>/participants",
        ParticipantListView.as_view(),
        name="event-participants",
    ),
    path(
        "events/<str:event_id>/attendance",
        AttendanceListView.as_view(),
        name="event-attendance",
    ),
    path("events/<str:event_id>/check-ins", CheckInView.as_view(), name="event-check-ins"),
    path("events/<str:event_id>/cancel", CancelEventView.as_view(), name="event-cancel"),
]
