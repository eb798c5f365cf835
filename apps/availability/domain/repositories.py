"""
Slot Repository Interface

The slot store, the projection and the booking coordinator depend on this
interface rather than on the ORM, so the shared durable store is an explicit
collaborator injected into each of them.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, List
from uuid import UUID

from shared.domain.value_objects import TimeRange

from .entities import Slot, SlotStatus


class AbstractSlotRepository(ABC):

    @abstractmethod
    def get_by_id(self, slot_id: UUID) -> Slot | None:
        """Committed state of one slot, or None."""

    @abstractmethod
    def list_for_speaker(
        self,
        speaker_id: UUID,
        *,
        from_date: date | None = None,
        until_date: date | None = None,
    ) -> List[Slot]:
        """Slots ordered by (date, start_time), bounds inclusive."""

    @abstractmethod
    def dates_for_speaker(self, speaker_id: UUID, *, from_date: date | None = None) -> List[date]:
        """Distinct dates with at least one slot, ascending."""

    @abstractmethod
    def find_overlapping(self, speaker_id: UUID, time_range: TimeRange) -> List[Slot]:
        """Slots of the speaker sharing any time with ``time_range``."""

    @abstractmethod
    def lock_speaker(self, speaker_id: UUID) -> bool:
        """
        Serialize slot writers of one speaker for the current transaction.

        Returns False if the speaker does not exist.
        """

    @abstractmethod
    def add(self, slot: Slot) -> None:
        """Persist a new slot."""

    @abstractmethod
    def compare_and_set_status(
        self,
        slot_id: UUID,
        expected: Iterable[SlotStatus],
        new_status: SlotStatus,
    ) -> bool:
        """
        Atomically move the slot to ``new_status`` if its current status
        is one of ``expected``. Returns False when no row matched.
        """

    @abstractmethod
    def delete_if_available(self, speaker_id: UUID, slot_id: UUID) -> bool:
        """Delete the speaker's slot only while available. True if deleted."""
