"""Notification services for sending booking and inquiry emails."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore

if TYPE_CHECKING:  # pragma: no cover
    from apps.bookings.models import Booking
    from apps.inquiries.models import Inquiry

logger = logging.getLogger(__name__)


# ============================================================================
# EMAIL NOTIFICATIONS
# ============================================================================

def send_email_notification(recipient_email: str, subject: str, message: str) -> bool:
    """
    Send one plain-text email.

    Returns:
        bool: True if the message was handed to the email backend
    """
    if not recipient_email:
        logger.warning(f"No recipient for email '{subject}', skipped")
        return False

    try:
        send_mail(
            subject=subject,
            message=message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient_email],
            fail_silently=False,
        )
        logger.info(f"Email sent successfully to {recipient_email}: {subject}")
        return True

    except Exception as e:
        logger.error(f"Failed to send email to {recipient_email}: {e}", exc_info=True)
        return False


def _slot_label(booking: "Booking") -> str:
    slot = booking.availability
    if slot is None:
        return "a withdrawn slot"
    return f"{slot.date:%Y-%m-%d} {slot.start_time:%H:%M}-{slot.end_time:%H:%M}"


def _organizer_email(booking: "Booking") -> str:
    return booking.organizer_email or booking.organizer.email


def send_booking_created_emails(booking: "Booking") -> int:
    """Speaker gets the booking request, organizer gets a receipt."""
    awaiting = booking.status == booking.Status.PENDING
    when = _slot_label(booking)

    speaker_message = (
        f"{booking.organizer_name or _organizer_email(booking)} booked you for "
        f"\"{booking.event_name}\" at {booking.event_location} on {when}."
    )
    if awaiting:
        speaker_message += "\nThe booking is waiting for your approval."

    organizer_subject = (
        f"Booking request sent: {booking.event_name}" if awaiting
        else f"Booking confirmed: {booking.event_name}"
    )
    organizer_message = (
        f"Your booking of {booking.speaker.full_name} on {when} "
        + ("is waiting for the speaker's approval." if awaiting else "is confirmed.")
    )

    sent = 0
    sent += send_email_notification(booking.speaker.contact_email, f"New booking: {booking.event_name}", speaker_message)
    sent += send_email_notification(_organizer_email(booking), organizer_subject, organizer_message)
    return sent


def send_booking_confirmed_email(booking: "Booking") -> bool:
    return send_email_notification(
        _organizer_email(booking),
        f"Booking confirmed: {booking.event_name}",
        f"{booking.speaker.full_name} confirmed your booking on {_slot_label(booking)}.",
    )


def send_booking_cancelled_emails(booking: "Booking") -> int:
    """Both parties learn about the cancellation."""
    reason = f"\nReason: {booking.cancellation_reason}" if booking.cancellation_reason else ""
    subject = f"Booking cancelled: {booking.event_name}"
    when = _slot_label(booking)

    sent = 0
    sent += send_email_notification(
        booking.speaker.contact_email,
        subject,
        f"The booking for \"{booking.event_name}\" on {when} was cancelled.{reason}",
    )
    sent += send_email_notification(
        _organizer_email(booking),
        subject,
        f"Your booking of {booking.speaker.full_name} on {when} was cancelled.{reason}",
    )
    return sent


def send_inquiry_email(inquiry: "Inquiry") -> bool:
    lines = [
        f"From: {inquiry.name} <{inquiry.email}>",
    ]
    if inquiry.phone:
        lines.append(f"Phone: {inquiry.phone}")
    if inquiry.event_date:
        lines.append(f"Event date: {inquiry.event_date:%Y-%m-%d}")
    lines.extend(["", inquiry.message])
    return send_email_notification(
        inquiry.speaker.contact_email,
        f"New inquiry from {inquiry.name}",
        "\n".join(lines),
    )
