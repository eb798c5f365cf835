"""ORM-backed booking ledger."""

from __future__ import annotations

import logging
from typing import Dict, List
from uuid import UUID

from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import Count  # type: ignore
from django.utils import timezone  # type: ignore

from apps.users.models import Speaker
from shared.domain.exceptions import NotFoundError, SlotUnavailableError
from shared.infrastructure.db import lock_queryset_if_possible

from .domain.entities import Booking, BookingStatus
from .domain.repositories import AbstractBookingLedger
from .domain.value_objects import ContactSnapshot, EventDetails
from .models import Booking as BookingModel

logger = logging.getLogger(__name__)


def booking_from_model(model: BookingModel) -> Booking:
    return Booking(
        id=model.id,
        availability_id=model.availability_id,
        speaker_id=model.speaker_id,
        organizer_id=model.organizer_id,
        event=EventDetails(
            name=model.event_name,
            location=model.event_location,
            event_type=model.event_type,
            attendees=model.attendees,
            notes=model.notes,
        ),
        contact=ContactSnapshot(
            name=model.organizer_name,
            email=model.organizer_email,
            phone=model.organizer_phone,
        ),
        status=BookingStatus(model.status),
        cancelled_by=model.cancelled_by_id,
        cancellation_reason=model.cancellation_reason,
        confirmed_at=model.confirmed_at,
        cancelled_at=model.cancelled_at,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def speaker_requires_approval(speaker_id: UUID) -> bool:
    """Approval policy read from the speaker profile."""
    flag = Speaker.objects.filter(pk=speaker_id).values_list("requires_booking_approval", flat=True).first()
    if flag is None:
        raise NotFoundError(f"Speaker {speaker_id} not found")
    return flag


class DjangoBookingLedger(AbstractBookingLedger):
    """
    Booking storage on the ``bookings`` table.

    The partial unique constraint ``booking_one_active_per_slot`` is the
    last line that keeps two active bookings off one slot; a violation on
    insert surfaces as SlotUnavailableError.
    """

    def get_by_id(self, booking_id: UUID, *, lock: bool = False) -> Booking | None:
        qs = BookingModel.objects.filter(pk=booking_id)
        if lock:
            qs = lock_queryset_if_possible(qs)
        model = qs.first()
        return booking_from_model(model) if model else None

    def add(self, booking: Booking) -> None:
        try:
            # Savepoint so the enclosing transaction stays usable after a violation.
            with transaction.atomic():
                BookingModel.objects.create(
                    id=booking.id,
                    availability_id=booking.availability_id,
                    speaker_id=booking.speaker_id,
                    organizer_id=booking.organizer_id,
                    event_name=booking.event.name,
                    event_type=booking.event.event_type,
                    event_location=booking.event.location,
                    attendees=booking.event.attendees,
                    notes=booking.event.notes,
                    organizer_name=booking.contact.name,
                    organizer_email=booking.contact.email,
                    organizer_phone=booking.contact.phone,
                    status=booking.status.value,
                    confirmed_at=timezone.now() if booking.status == BookingStatus.CONFIRMED else None,
                )
        except IntegrityError as exc:
            logger.warning(f"Active booking already exists for slot {booking.availability_id}: {exc}")
            raise SlotUnavailableError(f"Slot {booking.availability_id} is already booked") from exc

    def save(self, booking: Booking) -> None:
        now = timezone.now()
        changes = {"status": booking.status.value, "updated_at": now}
        if booking.status == BookingStatus.CONFIRMED:
            changes["confirmed_at"] = now
        elif booking.status == BookingStatus.CANCELLED:
            changes.update(
                cancelled_by_id=booking.cancelled_by,
                cancellation_reason=booking.cancellation_reason[:255],
                cancelled_at=now,
            )
        updated = BookingModel.objects.filter(pk=booking.id).update(**changes)
        if not updated:
            raise NotFoundError(f"Booking {booking.id} not found")

    def list_for_speaker(self, speaker_id: UUID) -> List[Booking]:
        qs = BookingModel.objects.filter(speaker_id=speaker_id).order_by("-created_at")
        return [booking_from_model(m) for m in qs]

    def list_for_organizer(self, organizer_id: int) -> List[Booking]:
        qs = BookingModel.objects.filter(organizer_id=organizer_id).order_by("-created_at")
        return [booking_from_model(m) for m in qs]

    def count_by_status(self, *, speaker_id: UUID | None = None, organizer_id: int | None = None) -> Dict[str, int]:
        qs = BookingModel.objects.all()
        if speaker_id is not None:
            qs = qs.filter(speaker_id=speaker_id)
        if organizer_id is not None:
            qs = qs.filter(organizer_id=organizer_id)
        counts = {status.value: 0 for status in BookingStatus}
        for row in qs.values("status").annotate(n=Count("id")):
            counts[row["status"]] = row["n"]
        counts["total"] = sum(counts.values())
        return counts
