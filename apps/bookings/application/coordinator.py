"""
Booking Coordinator

Single entry point the API layer uses for every booking transition and
ledger read. Repositories and the approval policy are injected so the
same coordinator runs against the ORM or against in-memory fakes.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping
from uuid import UUID

from shared.application.uow import DjangoUnitOfWork
from apps.availability.domain.repositories import AbstractSlotRepository
from apps.bookings.domain.entities import Booking
from apps.bookings.domain.repositories import AbstractBookingLedger

from .command_handlers import (
    ApprovalPolicy,
    AttemptBookingCommand,
    AttemptBookingHandler,
    CancelBookingCommand,
    CancelBookingHandler,
    ConfirmBookingCommand,
    ConfirmBookingHandler,
)


class BookingCoordinator:

    def __init__(
        self,
        slot_repo: AbstractSlotRepository | None = None,
        booking_ledger: AbstractBookingLedger | None = None,
        approval_policy: ApprovalPolicy | None = None,
        uow_factory=DjangoUnitOfWork,
    ):
        if slot_repo is None:
            from apps.availability.repositories import DjangoSlotRepository

            slot_repo = DjangoSlotRepository()
        if booking_ledger is None:
            from apps.bookings.repositories import DjangoBookingLedger

            booking_ledger = DjangoBookingLedger()
        if approval_policy is None:
            from apps.bookings.repositories import speaker_requires_approval

            approval_policy = speaker_requires_approval

        self.booking_ledger = booking_ledger
        self._attempt = AttemptBookingHandler(slot_repo, booking_ledger, approval_policy, uow_factory)
        self._confirm = ConfirmBookingHandler(slot_repo, booking_ledger, uow_factory)
        self._cancel = CancelBookingHandler(slot_repo, booking_ledger, uow_factory)

    def attempt_booking(
        self,
        organizer_id: int,
        slot_id: UUID,
        event_details: Mapping[str, Any],
        contact: Mapping[str, Any] | None = None,
    ) -> Booking:
        """Book ``slot_id``; exactly one concurrent attempt per slot succeeds."""
        return self._attempt.handle(AttemptBookingCommand(
            organizer_id=organizer_id,
            slot_id=slot_id,
            event_details=dict(event_details or {}),
            contact=dict(contact or {}),
        ))

    def confirm_booking(self, actor_id: int | None, booking_id: UUID) -> Booking:
        return self._confirm.handle(ConfirmBookingCommand(booking_id=booking_id, actor_id=actor_id))

    def cancel_booking(self, actor_id: int | None, booking_id: UUID, reason: str = '') -> Booking:
        return self._cancel.handle(CancelBookingCommand(
            booking_id=booking_id,
            actor_id=actor_id,
            reason=reason,
        ))

    def get_booking(self, booking_id: UUID) -> Booking | None:
        return self.booking_ledger.get_by_id(booking_id)

    def list_for_speaker(self, speaker_id: UUID) -> List[Booking]:
        return self.booking_ledger.list_for_speaker(speaker_id)

    def list_for_organizer(self, organizer_id: int) -> List[Booking]:
        return self.booking_ledger.list_for_organizer(organizer_id)

    def stats_for_speaker(self, speaker_id: UUID) -> Dict[str, int]:
        return self.booking_ledger.count_by_status(speaker_id=speaker_id)

    def stats_for_organizer(self, organizer_id: int) -> Dict[str, int]:
        return self.booking_ledger.count_by_status(organizer_id=organizer_id)
