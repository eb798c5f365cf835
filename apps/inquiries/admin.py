"""Admin registration for inquiries."""

from __future__ import annotations

from django.contrib import admin

from .models import Inquiry


@admin.register(Inquiry)
class InquiryAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "speaker", "event_date", "status", "created_at")
    list_filter = ("status", "created_at")
    search_fields = ("name", "email", "message", "speaker__full_name")
    readonly_fields = ("created_at", "updated_at")
