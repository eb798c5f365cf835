from __future__ import annotations

from datetime import time, timedelta
from unittest import mock

import pytest
from django.utils import timezone

from apps.availability.models import SpeakerAvailability
from apps.bookings.application.coordinator import BookingCoordinator
from apps.bookings.domain.events import BookingCancelled, BookingConfirmed, BookingCreated
from apps.inquiries.events import InquirySubmitted
from apps.inquiries.services import InquiryLog
from apps.notifications import handlers, tasks
from apps.notifications.services import send_email_notification
from apps.users.models import Speaker, User
from shared.application.message_bus import message_bus

EVENT = {"name": "ML Days", "location": "Chennai"}


@pytest.fixture
def organizer(db):
    return User.objects.create_user(email="org@example.com", password="OrgPass123")


@pytest.fixture
def speaker(db):
    return Speaker.objects.create(full_name="Tara Speaker", email="tara@example.com")


@pytest.fixture
def slot(speaker):
    return SpeakerAvailability.objects.create(
        speaker=speaker,
        date=timezone.localdate() + timedelta(days=5),
        start_time=time(14, 0),
        end_time=time(15, 0),
    )


@pytest.mark.parametrize(
    "event_type,handler",
    [
        (BookingCreated, handlers.on_booking_created),
        (BookingConfirmed, handlers.on_booking_confirmed),
        (BookingCancelled, handlers.on_booking_cancelled),
        (InquirySubmitted, handlers.on_inquiry_submitted),
    ],
)
def test_handlers_registered_on_startup(event_type, handler):
    assert handler in message_bus.handlers_for(event_type)


def test_booking_emails_both_parties(organizer, slot, mailoutbox, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        BookingCoordinator().attempt_booking(organizer.id, slot.id, EVENT)

    recipients = sorted(m.to[0] for m in mailoutbox)
    assert recipients == ["org@example.com", "tara@example.com"]
    assert any("Booking confirmed: ML Days" == m.subject for m in mailoutbox)


def test_pending_booking_asks_for_approval(organizer, speaker, slot, mailoutbox, django_capture_on_commit_callbacks):
    speaker.requires_booking_approval = True
    speaker.save()

    with django_capture_on_commit_callbacks(execute=True):
        BookingCoordinator().attempt_booking(organizer.id, slot.id, EVENT)

    speaker_mail = next(m for m in mailoutbox if m.to == ["tara@example.com"])
    assert "waiting for your approval" in speaker_mail.body


def test_cancellation_emails_include_reason(organizer, slot, mailoutbox, django_capture_on_commit_callbacks):
    coordinator = BookingCoordinator()
    booking = coordinator.attempt_booking(organizer.id, slot.id, EVENT)
    mailoutbox.clear()

    with django_capture_on_commit_callbacks(execute=True):
        coordinator.cancel_booking(organizer.id, booking.id, "Budget cut")

    assert len(mailoutbox) == 2
    assert all("Reason: Budget cut" in m.body for m in mailoutbox)


def test_inquiry_forwarded_to_speaker(speaker, mailoutbox, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        InquiryLog().submit(speaker.id, None, "Kiran", "kiran@example.com", "Keynote in June?", event_date="2030-06-10")

    (mail,) = mailoutbox
    assert mail.to == ["tara@example.com"]
    assert "Keynote in June?" in mail.body
    assert "Event date: 2030-06-10" in mail.body


@pytest.mark.django_db
def test_missing_booking_is_skipped(mailoutbox):
    assert tasks.notify_booking_created("00000000-0000-0000-0000-000000000000") == 0
    assert mailoutbox == []


def test_send_failure_is_reported_not_raised():
    with mock.patch("apps.notifications.services.send_mail", side_effect=OSError("smtp down")):
        assert send_email_notification("x@example.com", "Subject", "Body") is False


def test_empty_recipient_is_skipped(mailoutbox):
    assert send_email_notification("", "Subject", "Body") is False
    assert mailoutbox == []
