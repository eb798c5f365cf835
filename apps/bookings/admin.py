"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "event_name",
        "speaker",
        "organizer",
        "availability",
        "status",
        "created_at",
    )
    list_filter = ("status", "created_at")
    search_fields = ("event_name", "speaker__full_name", "organizer__email")
    readonly_fields = (
        "availability",
        "speaker",
        "organizer",
        "cancelled_by",
        "confirmed_at",
        "cancelled_at",
        "created_at",
        "updated_at",
    )

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False
