"""Slot store: speaker-side writes and listings of availability slots."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List
from uuid import UUID

from django.utils import timezone  # type: ignore

from shared.application.uow import AbstractUnitOfWork, DjangoUnitOfWork
from shared.domain.exceptions import ConflictError, NotFoundError

from .domain.entities import Slot
from .domain.parsing import parse_calendar_date, parse_time_of_day
from .domain.repositories import AbstractSlotRepository

logger = logging.getLogger(__name__)


class SlotStore:
    """
    CRUD over a speaker's slots.

    No notifications are emitted here; slot creation and deletion are
    visible to organizers only through the availability projection.
    """

    def __init__(
        self,
        slot_repo: AbstractSlotRepository | None = None,
        uow_factory: Callable[[], AbstractUnitOfWork] = DjangoUnitOfWork,
        today: Callable[[], date] = timezone.localdate,
    ):
        if slot_repo is None:
            from .repositories import DjangoSlotRepository

            slot_repo = DjangoSlotRepository()
        self.slot_repo = slot_repo
        self.uow_factory = uow_factory
        self.today = today

    def create_slot(self, speaker_id: UUID, slot_date, start_time, end_time) -> Slot:
        """
        Publish a new available slot.

        Raises:
            ValidationError: past date, malformed values, or start >= end
            NotFoundError: unknown speaker
            ConflictError: overlaps another slot of the same speaker
        """
        slot = Slot.create(
            speaker_id,
            parse_calendar_date(slot_date),
            parse_time_of_day(start_time),
            parse_time_of_day(end_time),
            today=self.today(),
        )

        with self.uow_factory():
            # Serializes concurrent creations for one speaker so the
            # overlap check below sees every committed sibling.
            if not self.slot_repo.lock_speaker(speaker_id):
                raise NotFoundError(f"Speaker {speaker_id} not found")

            overlapping = self.slot_repo.find_overlapping(speaker_id, slot.time_range)
            if overlapping:
                raise ConflictError(
                    f"Slot {slot.time_range} overlaps existing slot {overlapping[0].time_range}"
                )

            self.slot_repo.add(slot)

        logger.info(f"Speaker {speaker_id} published slot {slot.id} ({slot.time_range})")
        return slot

    def delete_slot(self, speaker_id: UUID, slot_id: UUID) -> None:
        """
        Withdraw an available slot.

        Raises:
            NotFoundError: slot absent or owned by another speaker
            ConflictError: slot is pending or booked
        """
        with self.uow_factory():
            if self.slot_repo.delete_if_available(speaker_id, slot_id):
                logger.info(f"Speaker {speaker_id} deleted slot {slot_id}")
                return

            slot = self.slot_repo.get_by_id(slot_id)
            if slot is None or str(slot.speaker_id) != str(speaker_id):
                raise NotFoundError(f"Slot {slot_id} not found")

            raise ConflictError(
                f"Slot {slot_id} is {slot.status.value} and cannot be deleted"
            )

    def list_slots(self, speaker_id: UUID, from_date=None) -> List[Slot]:
        """Slots on or after ``from_date`` (default today), ordered by date and start time."""
        start = parse_calendar_date(from_date) if from_date is not None else self.today()
        return self.slot_repo.list_for_speaker(speaker_id, from_date=start)
