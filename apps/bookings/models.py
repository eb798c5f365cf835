"""Booking ledger models for SpeakerHub."""

from __future__ import annotations

import uuid

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

ACTIVE_STATUSES = ("pending", "confirmed")


class Booking(models.Model):
    """Organizer booking of one speaker availability slot."""

    class Status(models.TextChoices):
        PENDING = "pending", _("Awaiting speaker approval")
        CONFIRMED = "confirmed", _("Confirmed")
        CANCELLED = "cancelled", _("Cancelled")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    availability = models.ForeignKey(
        "availability.SpeakerAvailability",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    speaker = models.ForeignKey(
        "users.Speaker",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    event_name = models.CharField(max_length=255)
    event_type = models.CharField(max_length=100, blank=True)
    event_location = models.CharField(max_length=255)
    attendees = models.PositiveIntegerField(null=True, blank=True)
    notes = models.TextField(blank=True)
    organizer_name = models.CharField(max_length=255, blank=True)
    organizer_email = models.EmailField(blank=True)
    organizer_phone = models.CharField(max_length=32, blank=True)
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.CONFIRMED,
    )
    cancelled_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    cancellation_reason = models.CharField(max_length=255, blank=True)
    confirmed_at = models.DateTimeField(null=True, blank=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "bookings"
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["availability"],
                condition=models.Q(status__in=ACTIVE_STATUSES),
                name="booking_one_active_per_slot",
            ),
        ]
        indexes = [
            models.Index(fields=["speaker", "status"], name="booking_speaker_status_idx"),
            models.Index(fields=["organizer", "status"], name="booking_organizer_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.event_name} ({self.get_status_display()})"

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES
