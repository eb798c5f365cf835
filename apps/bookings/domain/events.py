"""
Booking Domain Events

Published after the transaction that produced them commits.
Consumed by the notification collaborator; delivery is its concern.
"""

from dataclasses import dataclass
from uuid import UUID

from shared.domain.base import DomainEvent


@dataclass
class BookingCreated(DomainEvent):
    """
    Event: An organizer booked a slot

    Triggers:
    - Notify the speaker of the new booking
    - Send the organizer a confirmation (or "awaiting approval") email
    """
    booking_id: UUID
    slot_id: UUID
    speaker_id: UUID
    organizer_id: int
    status: str


@dataclass
class BookingConfirmed(DomainEvent):
    """
    Event: Speaker approved a pending booking (PENDING -> CONFIRMED)

    Triggers:
    - Tell the organizer the booking is confirmed
    """
    booking_id: UUID
    slot_id: UUID | None
    speaker_id: UUID
    organizer_id: int


@dataclass
class BookingCancelled(DomainEvent):
    """
    Event: Booking was cancelled and its slot released

    Triggers:
    - Notify the other party
    """
    booking_id: UUID
    slot_id: UUID | None
    speaker_id: UUID
    organizer_id: int
    cancelled_by: int | None
    old_status: str
