"""Celery tasks delivering booking and inquiry notifications."""

from celery import shared_task
import logging

logger = logging.getLogger(__name__)


def _load_booking(booking_id):
    from apps.bookings.models import Booking

    booking = Booking.objects.select_related("speaker", "speaker__user", "organizer").filter(pk=booking_id).first()
    if booking is None:
        logger.warning(f"Booking {booking_id} vanished before notification")
    return booking


@shared_task
def notify_booking_created(booking_id):
    """Tell the speaker about the new booking and acknowledge it to the organizer."""
    from .services import send_booking_created_emails

    booking = _load_booking(booking_id)
    if booking is None:
        return 0
    sent = send_booking_created_emails(booking)
    logger.info(f"Booking {booking_id} created: {sent} emails sent")
    return sent


@shared_task
def notify_booking_confirmed(booking_id):
    from .services import send_booking_confirmed_email

    booking = _load_booking(booking_id)
    if booking is None:
        return 0
    return int(send_booking_confirmed_email(booking))


@shared_task
def notify_booking_cancelled(booking_id):
    from .services import send_booking_cancelled_emails

    booking = _load_booking(booking_id)
    if booking is None:
        return 0
    sent = send_booking_cancelled_emails(booking)
    logger.info(f"Booking {booking_id} cancelled: {sent} emails sent")
    return sent


@shared_task
def notify_inquiry_submitted(inquiry_id):
    """Forward a new inquiry to the speaker"""
    from apps.inquiries.models import Inquiry
    from .services import send_inquiry_email

    inquiry = Inquiry.objects.select_related("speaker", "speaker__user").filter(pk=inquiry_id).first()
    if inquiry is None:
        logger.warning(f"Inquiry {inquiry_id} vanished before notification")
        return 0
    return int(send_inquiry_email(inquiry))
