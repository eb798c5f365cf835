"""Inquiry model."""

from __future__ import annotations

import uuid

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Inquiry(models.Model):
    """Contact request addressed to a speaker."""

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        RESPONDED = "responded", _("Responded")
        CLOSED = "closed", _("Closed")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    speaker = models.ForeignKey(
        "users.Speaker",
        on_delete=models.CASCADE,
        related_name="inquiries",
    )
    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="inquiries",
    )
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=32, blank=True)
    message = models.TextField()
    event_date = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inquiries"
        verbose_name = _("Inquiry")
        verbose_name_plural = _("Inquiries")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["speaker", "status"], name="inquiry_speaker_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Inquiry from {self.name} to {self.speaker_id} ({self.status})"
