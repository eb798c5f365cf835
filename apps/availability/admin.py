"""Admin registration for availability slots."""

from __future__ import annotations

from django.contrib import admin

from .models import SpeakerAvailability


@admin.register(SpeakerAvailability)
class SpeakerAvailabilityAdmin(admin.ModelAdmin):
    list_display = ("speaker", "date", "start_time", "end_time", "status", "created_at")
    list_filter = ("status", "date")
    search_fields = ("speaker__full_name", "speaker__email")
    readonly_fields = ("status", "created_at", "updated_at")
