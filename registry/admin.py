from django.contrib import admin

from registry.models import Attendance, Event, Registration


class ReadOnlyAdmin(admin.ModelAdmin):
    """Registry state only changes through the registry service."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0
    can_delete = False
    readonly_fields = ["participant", "registered_at"]

    def has_add_permission(self, request, obj=None):
        return False


class AttendanceInline(admin.TabularInline):
    model = Attendance
    extra = 0
    can_delete = False
    readonly_fields = ["attendee", "checked_in_at"]

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Event)
class EventAdmin(ReadOnlyAdmin):
    list_display = ["id", "name", "organizer", "start_time", "cancelled"]
    list_filter = ["cancelled", "registration_closed"]
    search_fields = ["name", "location", "organizer"]
    inlines = [RegistrationInline, AttendanceInline]


@admin.register(Registration)
class RegistrationAdmin(ReadOnlyAdmin):
    list_display = ["participant", "event", "registered_at"]
    list_filter = ["event"]


@admin.register(Attendance)
class AttendanceAdmin(ReadOnlyAdmin):
    list_display = ["attendee", "event", "checked_in_at"]
    list_filter = ["event"]
