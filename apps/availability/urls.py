"""URL routing for availability, mounted under ``speakers/<speaker_id>/``."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import SpeakerAvailabilityViewSet, SpeakerCalendarDatesView, SpeakerCalendarView

availability_list = SpeakerAvailabilityViewSet.as_view({"get": "list", "post": "create"})
availability_detail = SpeakerAvailabilityViewSet.as_view({"delete": "destroy"})

urlpatterns = [
    path("availability/", availability_list, name="speaker-availability-list"),
    path("availability/<uuid:pk>/", availability_detail, name="speaker-availability-detail"),
    path("calendar/", SpeakerCalendarView.as_view(), name="speaker-calendar"),
    path("calendar/dates/", SpeakerCalendarDatesView.as_view(), name="speaker-calendar-dates"),
]
