"""Inquiry log: append-only contact requests addressed to speakers."""

from __future__ import annotations

import logging
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from django.core.validators import validate_email  # type: ignore
from django.db.models import QuerySet  # type: ignore

from apps.availability.domain.parsing import parse_calendar_date
from apps.users.models import Speaker
from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import NotFoundError, ValidationError

from .events import InquirySubmitted
from .models import Inquiry

logger = logging.getLogger(__name__)

# ``inquiries`` column sizes
NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 254
PHONE_MAX_LENGTH = 32


def _required(value, label: str) -> str:
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValidationError(f"{label} is required")
    return text


def _within(value: str, limit: int, label: str) -> str:
    if len(value) > limit:
        raise ValidationError(f"{label} must be at most {limit} characters")
    return value


class InquiryLog:
    """
    Durable store of inquiries.

    Inquiries are independent of slots and bookings, so writes need no
    coordination beyond a single insert or status update.
    """

    def __init__(self, uow_factory=DjangoUnitOfWork):
        self.uow_factory = uow_factory

    def submit(
        self,
        speaker_id: UUID,
        organizer_id: int | None,
        name: str,
        email: str,
        message: str,
        phone: str = "",
        event_date=None,
    ) -> Inquiry:
        """
        Record a new pending inquiry.

        Raises:
            ValidationError: empty name, email or message, over-long fields,
                malformed email or date
            NotFoundError: unknown speaker
        """
        name = _within(_required(name, "Name"), NAME_MAX_LENGTH, "Name")
        email = _within(_required(email, "Email"), EMAIL_MAX_LENGTH, "Email")
        phone = _within((phone or "").strip(), PHONE_MAX_LENGTH, "Phone")
        message = _required(message, "Message")
        try:
            validate_email(email)
        except DjangoValidationError:
            raise ValidationError(f"Invalid email address '{email}'")
        parsed_date = parse_calendar_date(event_date) if event_date not in (None, "") else None

        if not Speaker.objects.filter(pk=speaker_id).exists():
            raise NotFoundError(f"Speaker {speaker_id} not found")

        with self.uow_factory() as uow:
            inquiry = Inquiry.objects.create(
                speaker_id=speaker_id,
                organizer_id=organizer_id,
                name=name,
                email=email,
                phone=phone,
                message=message,
                event_date=parsed_date,
            )
            uow.record_event(InquirySubmitted(
                aggregate_id=inquiry.id,
                inquiry_id=inquiry.id,
                speaker_id=inquiry.speaker_id,
                organizer_id=organizer_id,
                email=email,
            ))

        logger.info(f"Inquiry {inquiry.id} submitted to speaker {speaker_id}")
        return inquiry

    def update_status(self, inquiry_id: UUID, new_status: str, *, speaker_id: UUID | None = None) -> Inquiry:
        """Speaker-side acknowledgement. ``speaker_id`` restricts the update to that speaker's inquiries."""
        if new_status not in Inquiry.Status.values:
            raise ValidationError(
                f"Unknown inquiry status '{new_status}', expected one of {', '.join(Inquiry.Status.values)}"
            )

        qs = Inquiry.objects.filter(pk=inquiry_id)
        if speaker_id is not None:
            qs = qs.filter(speaker_id=speaker_id)
        inquiry = qs.first()
        if inquiry is None:
            raise NotFoundError(f"Inquiry {inquiry_id} not found")

        inquiry.status = new_status
        inquiry.save(update_fields=["status", "updated_at"])
        logger.info(f"Inquiry {inquiry_id} marked {new_status}")
        return inquiry

    def list_for_speaker(self, speaker_id: UUID, status: str | None = None) -> QuerySet:
        """Speaker's inquiries, newest first."""
        qs = Inquiry.objects.filter(speaker_id=speaker_id)
        if status is not None:
            if status not in Inquiry.Status.values:
                raise ValidationError(f"Unknown inquiry status '{status}'")
            qs = qs.filter(status=status)
        return qs.order_by("-created_at")
