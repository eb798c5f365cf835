from __future__ import annotations

from datetime import date
from unittest import mock
from uuid import uuid4

import pytest

from apps.inquiries.events import InquirySubmitted
from apps.inquiries.models import Inquiry
from apps.inquiries.services import InquiryLog
from apps.users.models import Speaker
from shared.domain.exceptions import NotFoundError, ValidationError

pytestmark = pytest.mark.django_db


@pytest.fixture
def speaker():
    return Speaker.objects.create(full_name="Mira Speaker")


@pytest.fixture
def log():
    return InquiryLog()


def _submit(log, speaker, **overrides):
    fields = {
        "speaker_id": speaker.id,
        "organizer_id": None,
        "name": "Priya",
        "email": "priya@example.com",
        "message": "Are you free in May?",
    }
    fields.update(overrides)
    return log.submit(**fields)


def test_empty_message_is_rejected(log, speaker):
    with pytest.raises(ValidationError):
        _submit(log, speaker, message="   ")
    assert not Inquiry.objects.exists()


@pytest.mark.parametrize("field", ["name", "email"])
def test_required_contact_fields(log, speaker, field):
    with pytest.raises(ValidationError):
        _submit(log, speaker, **{field: ""})


def test_malformed_email_is_rejected(log, speaker):
    with pytest.raises(ValidationError):
        _submit(log, speaker, email="not-an-email")


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "P" * 256},
        {"email": "p" * 250 + "@example.com"},
        {"phone": "9" * 33},
    ],
)
def test_overlong_fields_are_rejected(log, speaker, overrides):
    with pytest.raises(ValidationError):
        _submit(log, speaker, **overrides)
    assert not Inquiry.objects.exists()


def test_valid_inquiry_is_pending_and_listed(log, speaker):
    inquiry = _submit(log, speaker, phone=" +91 98 ", event_date="2030-05-01")

    assert inquiry.status == Inquiry.Status.PENDING
    assert inquiry.phone == "+91 98"
    assert inquiry.event_date == date(2030, 5, 1)
    assert list(log.list_for_speaker(speaker.id)) == [inquiry]


def test_unknown_speaker(log):
    with pytest.raises(NotFoundError):
        log.submit(uuid4(), None, "Priya", "priya@example.com", "Hello")


def test_list_is_newest_first_and_filterable(log, speaker):
    first = _submit(log, speaker)
    second = _submit(log, speaker, message="Second question")
    log.update_status(first.id, Inquiry.Status.RESPONDED)

    assert [i.id for i in log.list_for_speaker(speaker.id)] == [second.id, first.id]
    assert [i.id for i in log.list_for_speaker(speaker.id, status="responded")] == [first.id]
    with pytest.raises(ValidationError):
        log.list_for_speaker(speaker.id, status="archived")


def test_update_status_rejects_unknown_value(log, speaker):
    inquiry = _submit(log, speaker)
    with pytest.raises(ValidationError):
        log.update_status(inquiry.id, "spam")


def test_update_status_scoped_to_speaker(log, speaker):
    inquiry = _submit(log, speaker)
    with pytest.raises(NotFoundError):
        log.update_status(inquiry.id, "closed", speaker_id=uuid4())
    assert log.update_status(inquiry.id, "closed", speaker_id=speaker.id).status == "closed"


def test_submission_event_published_after_commit(log, speaker, django_capture_on_commit_callbacks):
    with mock.patch("shared.application.message_bus.message_bus.publish_events") as publish:
        with django_capture_on_commit_callbacks(execute=True):
            inquiry = _submit(log, speaker)

    (event,) = publish.call_args.args[0]
    assert isinstance(event, InquirySubmitted)
    assert event.inquiry_id == inquiry.id
