"""Message bus subscriptions that hand committed events to Celery."""

from __future__ import annotations

import logging

from apps.bookings.domain.events import BookingCancelled, BookingConfirmed, BookingCreated
from apps.inquiries.events import InquirySubmitted

from . import tasks

logger = logging.getLogger(__name__)


def on_booking_created(event: BookingCreated) -> None:
    tasks.notify_booking_created.delay(str(event.booking_id))


def on_booking_confirmed(event: BookingConfirmed) -> None:
    tasks.notify_booking_confirmed.delay(str(event.booking_id))


def on_booking_cancelled(event: BookingCancelled) -> None:
    tasks.notify_booking_cancelled.delay(str(event.booking_id))


def on_inquiry_submitted(event: InquirySubmitted) -> None:
    tasks.notify_inquiry_submitted.delay(str(event.inquiry_id))


def register_handlers(bus) -> None:  # type: ignore
    bus.register_event_handler(BookingCreated, on_booking_created)
    bus.register_event_handler(BookingConfirmed, on_booking_confirmed)
    bus.register_event_handler(BookingCancelled, on_booking_cancelled)
    bus.register_event_handler(InquirySubmitted, on_inquiry_submitted)
    logger.debug("Notification handlers registered")
