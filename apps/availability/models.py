"""Availability models for SpeakerHub."""

from __future__ import annotations

import uuid

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class SpeakerAvailability(models.Model):
    """A bookable time slot published by a speaker."""

    class Status(models.TextChoices):
        AVAILABLE = "available", _("Available")
        PENDING = "pending", _("Pending approval")
        BOOKED = "booked", _("Booked")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    speaker = models.ForeignKey(
        "users.Speaker",
        on_delete=models.CASCADE,
        related_name="availability_slots",
    )
    date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.AVAILABLE,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "speaker_availability"
        verbose_name = _("Availability slot")
        verbose_name_plural = _("Availability slots")
        ordering = ["date", "start_time"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(start_time__lt=models.F("end_time")),
                name="availability_valid_time_range",
            ),
        ]
        indexes = [
            models.Index(fields=["speaker", "date", "start_time"], name="avail_speaker_date_idx"),
            models.Index(fields=["speaker", "status"], name="avail_speaker_status_idx"),
        ]

    def __str__(self) -> str:
        return (
            f"{self.speaker_id}: {self.date} "
            f"{self.start_time:%H:%M}-{self.end_time:%H:%M} ({self.status})"
        )
