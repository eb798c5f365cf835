"""
Booking Domain Entities

- BookingStatus: FSM states for booking lifecycle
- Booking: an organizer's commitment to exactly one slot
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from apps.availability.domain.entities import SlotStatus
from shared.domain.base import Aggregate, utcnow
from shared.domain.exceptions import InvalidStateError

from .value_objects import ContactSnapshot, EventDetails, check_length

REASON_MAX_LENGTH = 255


class BookingStatus(Enum):
    """
    Booking Status Finite State Machine

    State transitions:
    - PENDING -> CONFIRMED (speaker approved)
    - PENDING -> CANCELLED (speaker declined or organizer withdrew)
    - CONFIRMED -> CANCELLED (either party cancelled)

    Bookings are never deleted; CANCELLED is terminal.
    """
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'


ACTIVE_STATUSES = (BookingStatus.PENDING, BookingStatus.CONFIRMED)


@dataclass(eq=False)
class Booking(Aggregate):
    """
    Booking Aggregate Root

    Key invariants:
    - References exactly one slot at creation; speaker_id matches the slot owner
    - At most one active (pending/confirmed) booking per slot
    - The slot status mirrors the booking status: pending <-> pending,
      confirmed <-> booked, cancelled <-> available
    """

    availability_id: UUID | None
    speaker_id: UUID
    organizer_id: int
    event: EventDetails
    contact: ContactSnapshot = field(default_factory=ContactSnapshot)
    status: BookingStatus = BookingStatus.CONFIRMED

    cancelled_by: int | None = None
    cancellation_reason: str = ''
    confirmed_at: datetime | None = None
    cancelled_at: datetime | None = None

    @classmethod
    def open(
        cls,
        *,
        slot_id: UUID,
        speaker_id: UUID,
        organizer_id: int,
        event: EventDetails,
        contact: ContactSnapshot,
        requires_approval: bool = False,
    ) -> 'Booking':
        """
        Create the booking for a slot that was just taken

        Events: BookingCreated
        """
        from .events import BookingCreated

        status = BookingStatus.PENDING if requires_approval else BookingStatus.CONFIRMED
        booking = cls(
            id=uuid4(),
            availability_id=slot_id,
            speaker_id=speaker_id,
            organizer_id=organizer_id,
            event=event,
            contact=contact,
            status=status,
            confirmed_at=None if requires_approval else utcnow(),
        )
        booking.add_event(BookingCreated(
            aggregate_id=booking.id,
            booking_id=booking.id,
            slot_id=slot_id,
            speaker_id=speaker_id,
            organizer_id=organizer_id,
            status=status.value,
        ))
        return booking

    def confirm(self):
        """
        Speaker approval (PENDING -> CONFIRMED)

        Events: BookingConfirmed
        """
        if self.status != BookingStatus.PENDING:
            raise InvalidStateError(
                f"Cannot confirm booking with status {self.status.value}. "
                f"Booking must be PENDING."
            )

        from .events import BookingConfirmed

        self.status = BookingStatus.CONFIRMED
        self.confirmed_at = utcnow()

        self.add_event(BookingConfirmed(
            aggregate_id=self.id,
            booking_id=self.id,
            slot_id=self.availability_id,
            speaker_id=self.speaker_id,
            organizer_id=self.organizer_id,
        ))

    def cancel(self, actor_id: int | None, reason: str = ''):
        """
        Cancel booking (PENDING/CONFIRMED -> CANCELLED)

        Events: BookingCancelled
        """
        if not self.is_active:
            raise InvalidStateError(
                f"Cannot cancel booking with status {self.status.value}"
            )
        check_length(reason, REASON_MAX_LENGTH, "Cancellation reason")

        from .events import BookingCancelled

        old_status = self.status
        self.status = BookingStatus.CANCELLED
        self.cancelled_by = actor_id
        self.cancellation_reason = reason
        self.cancelled_at = utcnow()

        self.add_event(BookingCancelled(
            aggregate_id=self.id,
            booking_id=self.id,
            slot_id=self.availability_id,
            speaker_id=self.speaker_id,
            organizer_id=self.organizer_id,
            cancelled_by=actor_id,
            old_status=old_status.value,
        ))

    @property
    def is_active(self) -> bool:
        """Active bookings hold their slot."""
        return self.status in ACTIVE_STATUSES

    @property
    def slot_status(self) -> SlotStatus:
        """Slot status that corresponds to this booking's status."""
        if self.status == BookingStatus.PENDING:
            return SlotStatus.PENDING
        if self.status == BookingStatus.CONFIRMED:
            return SlotStatus.BOOKED
        return SlotStatus.AVAILABLE

    def __str__(self):
        return f"Booking {self.id} ({self.status.value})"

    def __repr__(self):
        return (
            f"Booking(id={self.id}, slot={self.availability_id}, "
            f"status={self.status.value}, event={self.event.name!r})"
        )
