"""
Availability Domain Entities

- SlotStatus: lifecycle states of a bookable slot
- Slot: one bookable interval for one speaker
"""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from uuid import UUID

from shared.domain.base import Entity
from shared.domain.exceptions import ValidationError
from shared.domain.value_objects import TimeRange


class SlotStatus(Enum):
    """
    Slot Status

    State transitions:
    - AVAILABLE -> BOOKED (booking confirmed immediately)
    - AVAILABLE -> PENDING (booking awaits speaker approval)
    - PENDING -> BOOKED (speaker confirmed the booking)
    - PENDING/BOOKED -> AVAILABLE (booking cancelled)
    - AVAILABLE -> (deleted) (speaker withdrew the slot)
    """
    AVAILABLE = 'available'
    PENDING = 'pending'
    BOOKED = 'booked'


@dataclass(eq=False)
class Slot(Entity):
    """
    Slot Entity

    Owned and mutated by its speaker; read by any organizer.
    Status changes other than creation go through the booking coordinator.
    """

    speaker_id: UUID
    time_range: TimeRange
    status: SlotStatus = SlotStatus.AVAILABLE

    @classmethod
    def create(cls, speaker_id: UUID, slot_date: date, start_time: time, end_time: time, *, today: date) -> 'Slot':
        """New available slot. Rejects past dates and empty or inverted ranges."""
        if slot_date < today:
            raise ValidationError(f"Cannot create a slot in the past ({slot_date.isoformat()})")
        return cls(
            speaker_id=speaker_id,
            time_range=TimeRange(slot_date, start_time, end_time),
        )

    @property
    def date(self) -> date:
        return self.time_range.date

    @property
    def start_time(self) -> time:
        return self.time_range.start_time

    @property
    def end_time(self) -> time:
        return self.time_range.end_time

    @property
    def is_available(self) -> bool:
        return self.status == SlotStatus.AVAILABLE

    def overlaps_with(self, other: 'Slot') -> bool:
        return self.speaker_id == other.speaker_id and self.time_range.overlaps_with(other.time_range)

    def __str__(self):
        return f"Slot {self.time_range} ({self.status.value})"
