"""
Booking Command Handlers

These are the use cases for the booking domain.
They orchestrate domain operations within transactions.

Commands:
- AttemptBookingCommand: Book an available slot
- ConfirmBookingCommand: Speaker approves a pending booking
- CancelBookingCommand: Cancel a booking and release its slot
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict
from uuid import UUID
import logging

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import (
    InvalidStateError,
    NotFoundError,
    SlotUnavailableError,
)
from apps.availability.domain.entities import SlotStatus
from apps.availability.domain.repositories import AbstractSlotRepository
from apps.bookings.domain.entities import Booking
from apps.bookings.domain.repositories import AbstractBookingLedger
from apps.bookings.domain.value_objects import ContactSnapshot, EventDetails

logger = logging.getLogger(__name__)

ApprovalPolicy = Callable[[UUID], bool]


def auto_confirm(speaker_id: UUID) -> bool:
    """Default policy: every booking is confirmed immediately."""
    return False


# ===== Commands =====

@dataclass
class AttemptBookingCommand:
    """
    Command to book one slot for an organizer

    ``event_details`` and ``contact`` are loosely-typed payloads, validated
    before any state changes.
    """
    organizer_id: int
    slot_id: UUID
    event_details: Dict[str, Any]
    contact: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ConfirmBookingCommand:
    """Command to approve a pending booking"""
    booking_id: UUID
    actor_id: int | None = None


@dataclass
class CancelBookingCommand:
    """Command to cancel a booking"""
    booking_id: UUID
    actor_id: int | None = None
    reason: str = ''


# ===== Command Handlers =====

class AttemptBookingHandler:
    """
    Handler for AttemptBooking command

    Strategy:
    1. Read the slot; fail fast if missing or not available
    2. Validate event details (no state touched on failure)
    3. Open transaction
    4. Compare-and-swap the slot out of AVAILABLE; losing the race
       means another booking took it
    5. Insert the booking; the partial unique index on active
       bookings per slot backs up step 4
    6. Commit, then publish BookingCreated
    """

    def __init__(
        self,
        slot_repo: AbstractSlotRepository,
        booking_ledger: AbstractBookingLedger,
        approval_policy: ApprovalPolicy = auto_confirm,
        uow_factory=DjangoUnitOfWork,
    ):
        self.slot_repo = slot_repo
        self.booking_ledger = booking_ledger
        self.approval_policy = approval_policy
        self.uow_factory = uow_factory

    def handle(self, command: AttemptBookingCommand) -> Booking:
        logger.info(
            f"Booking attempt on slot {command.slot_id} by organizer {command.organizer_id}"
        )

        slot = self.slot_repo.get_by_id(command.slot_id)
        if slot is None:
            raise NotFoundError(f"Slot {command.slot_id} not found")
        if not slot.is_available:
            raise SlotUnavailableError(
                f"Slot {command.slot_id} is {slot.status.value}, not available"
            )

        event = EventDetails.from_payload(command.event_details or {})
        contact = ContactSnapshot.from_payload(command.contact)
        requires_approval = self.approval_policy(slot.speaker_id)

        booking = Booking.open(
            slot_id=slot.id,
            speaker_id=slot.speaker_id,
            organizer_id=command.organizer_id,
            event=event,
            contact=contact,
            requires_approval=requires_approval,
        )

        with self.uow_factory() as uow:
            taken = self.slot_repo.compare_and_set_status(
                slot.id,
                expected=[SlotStatus.AVAILABLE],
                new_status=booking.slot_status,
            )
            if not taken:
                logger.warning(f"Lost race for slot {slot.id}")
                raise SlotUnavailableError(f"Slot {slot.id} was booked by someone else")

            self.booking_ledger.add(booking)
            uow.collect_events(booking)

        logger.info(f"Booking {booking.id} created with status {booking.status.value}")
        return booking


class ConfirmBookingHandler:
    """
    Handler for ConfirmBooking command

    Moves booking PENDING -> CONFIRMED and its slot PENDING -> BOOKED
    in one transaction.
    """

    def __init__(
        self,
        slot_repo: AbstractSlotRepository,
        booking_ledger: AbstractBookingLedger,
        uow_factory=DjangoUnitOfWork,
    ):
        self.slot_repo = slot_repo
        self.booking_ledger = booking_ledger
        self.uow_factory = uow_factory

    def handle(self, command: ConfirmBookingCommand) -> Booking:
        logger.info(f"Confirming booking {command.booking_id}")

        with self.uow_factory() as uow:
            booking = self.booking_ledger.get_by_id(command.booking_id, lock=True)
            if booking is None:
                raise NotFoundError(f"Booking {command.booking_id} not found")

            booking.confirm()

            if booking.availability_id is not None:
                moved = self.slot_repo.compare_and_set_status(
                    booking.availability_id,
                    expected=[SlotStatus.PENDING],
                    new_status=SlotStatus.BOOKED,
                )
                if not moved:
                    raise InvalidStateError(
                        f"Slot {booking.availability_id} is not awaiting approval"
                    )

            self.booking_ledger.save(booking)
            uow.collect_events(booking)

        logger.info(f"Booking {booking.id} confirmed")
        return booking


class CancelBookingHandler:
    """
    Handler for CancelBooking command

    Inverse of AttemptBooking: the booking becomes CANCELLED and its slot
    returns to AVAILABLE. The booking row is kept for the audit trail.
    """

    def __init__(
        self,
        slot_repo: AbstractSlotRepository,
        booking_ledger: AbstractBookingLedger,
        uow_factory=DjangoUnitOfWork,
    ):
        self.slot_repo = slot_repo
        self.booking_ledger = booking_ledger
        self.uow_factory = uow_factory

    def handle(self, command: CancelBookingCommand) -> Booking:
        logger.info(f"Cancelling booking {command.booking_id} (actor {command.actor_id})")

        with self.uow_factory() as uow:
            booking = self.booking_ledger.get_by_id(command.booking_id, lock=True)
            if booking is None:
                raise NotFoundError(f"Booking {command.booking_id} not found")

            booking.cancel(command.actor_id, command.reason)

            if booking.availability_id is not None:
                released = self.slot_repo.compare_and_set_status(
                    booking.availability_id,
                    expected=[SlotStatus.PENDING, SlotStatus.BOOKED],
                    new_status=SlotStatus.AVAILABLE,
                )
                if not released:
                    raise InvalidStateError(
                        f"Slot {booking.availability_id} is not held by booking {booking.id}"
                    )

            self.booking_ledger.save(booking)
            uow.collect_events(booking)

        logger.info(f"Booking {booking.id} cancelled")
        return booking
