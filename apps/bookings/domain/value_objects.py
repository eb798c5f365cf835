"""
Booking Value Objects

- EventDetails: organizer-supplied description of the event being booked
- ContactSnapshot: organizer contact details frozen at booking time

Length limits mirror the ``bookings`` columns so over-long input is a
ValidationError rather than a storage failure.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from shared.domain.base import ValueObject
from shared.domain.exceptions import ValidationError

# PositiveIntegerField upper bound
MAX_ATTENDEES = 2147483647

NAME_MAX_LENGTH = 255
LOCATION_MAX_LENGTH = 255
EVENT_TYPE_MAX_LENGTH = 100
CONTACT_NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 254
PHONE_MAX_LENGTH = 32


def _text(value: Any) -> str:
    if value is None:
        return ''
    if not isinstance(value, str):
        raise ValidationError(f"Expected text, got {type(value).__name__}")
    return value.strip()


def check_length(value: str, limit: int, label: str):
    if len(value) > limit:
        raise ValidationError(f"{label} must be at most {limit} characters")


def _attendees(value: Any) -> int | None:
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValidationError("Attendee count must be a whole number")
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text.startswith('-') else text
        # isdecimal() alone admits non-ASCII digits
        if not (digits.isascii() and digits.isdecimal()):
            raise ValidationError(f"Attendee count must be a whole number, got '{value}'")
        value = int(text)
    if not isinstance(value, int):
        raise ValidationError("Attendee count must be a whole number")
    return value


@dataclass(frozen=True)
class EventDetails(ValueObject):
    """
    Event metadata attached to a booking

    Name and location are required. The attendee count is optional,
    never negative and fits the storage column.
    """
    name: str
    location: str
    event_type: str = ''
    attendees: int | None = None
    notes: str = ''

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValidationError("Event name is required")
        if not self.location or not self.location.strip():
            raise ValidationError("Event location is required")
        check_length(self.name, NAME_MAX_LENGTH, "Event name")
        check_length(self.location, LOCATION_MAX_LENGTH, "Event location")
        check_length(self.event_type, EVENT_TYPE_MAX_LENGTH, "Event type")
        if self.attendees is not None:
            if self.attendees < 0:
                raise ValidationError("Attendee count cannot be negative")
            if self.attendees > MAX_ATTENDEES:
                raise ValidationError(f"Attendee count cannot exceed {MAX_ATTENDEES}")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> 'EventDetails':
        """Build from loosely-typed request data (``name``, ``location``, ``type``, ``attendees``, ``notes``)."""
        return cls(
            name=_text(payload.get('name')),
            location=_text(payload.get('location')),
            event_type=_text(payload.get('type', payload.get('event_type'))),
            attendees=_attendees(payload.get('attendees')),
            notes=_text(payload.get('notes')),
        )


@dataclass(frozen=True)
class ContactSnapshot(ValueObject):
    """
    Organizer contact copied onto the booking

    Later profile edits never rewrite historical bookings.
    """
    name: str = ''
    email: str = ''
    phone: str = ''

    def __post_init__(self):
        check_length(self.name, CONTACT_NAME_MAX_LENGTH, "Contact name")
        check_length(self.email, EMAIL_MAX_LENGTH, "Contact email")
        check_length(self.phone, PHONE_MAX_LENGTH, "Contact phone")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> 'ContactSnapshot':
        payload = payload or {}
        return cls(
            name=_text(payload.get('name')),
            email=_text(payload.get('email')),
            phone=_text(payload.get('phone')),
        )
