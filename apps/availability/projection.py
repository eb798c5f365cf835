"""
Availability Projection

Read model for calendar views. Queries never lock and never write; each
one is answered from a single read of committed slot rows, so a caller
never sees half of a booking transition. Displays may lag behind the
booking coordinator, which stays authoritative.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Iterable, List
from uuid import UUID

from shared.domain.exceptions import ValidationError

from .domain.entities import Slot, SlotStatus
from .domain.parsing import parse_calendar_date
from .domain.repositories import AbstractSlotRepository


MAX_CALENDAR_DAYS = 366


class AggregateStatus(Enum):
    NONE = 'none'
    AVAILABLE = 'available'
    BOOKED = 'booked'
    MIXED = 'mixed'


def aggregate_status_of(slots: Iterable[Slot]) -> AggregateStatus:
    """
    Date-level summary of slot statuses.

    none if there are no slots, available if all are available, booked if
    all are booked, mixed otherwise (pending slots always make a day mixed).
    """
    statuses = {slot.status for slot in slots}
    if not statuses:
        return AggregateStatus.NONE
    if statuses == {SlotStatus.AVAILABLE}:
        return AggregateStatus.AVAILABLE
    if statuses == {SlotStatus.BOOKED}:
        return AggregateStatus.BOOKED
    return AggregateStatus.MIXED


@dataclass(frozen=True)
class DaySummary:
    date: date
    status: AggregateStatus
    total_slots: int
    available_slots: int

    @property
    def has_available(self) -> bool:
        return self.available_slots > 0


class AvailabilityProjection:

    def __init__(self, slot_repo: AbstractSlotRepository | None = None):
        if slot_repo is None:
            from .repositories import DjangoSlotRepository

            slot_repo = DjangoSlotRepository()
        self.slot_repo = slot_repo

    def slots_for_date(self, speaker_id: UUID, on_date) -> List[Slot]:
        """All slots of the date in any status, ordered by start time."""
        day = parse_calendar_date(on_date)
        return self.slot_repo.list_for_speaker(speaker_id, from_date=day, until_date=day)

    def date_has_available(self, speaker_id: UUID, on_date) -> bool:
        return any(slot.is_available for slot in self.slots_for_date(speaker_id, on_date))

    def dates_with_any_slot(self, speaker_id: UUID, from_date=None) -> List[date]:
        start = parse_calendar_date(from_date) if from_date is not None else None
        return self.slot_repo.dates_for_speaker(speaker_id, from_date=start)

    def aggregate_status(self, speaker_id: UUID, on_date) -> AggregateStatus:
        return aggregate_status_of(self.slots_for_date(speaker_id, on_date))

    def calendar(self, speaker_id: UUID, start, end) -> List[DaySummary]:
        """One summary per day of the inclusive range ``start``..``end``."""
        first = parse_calendar_date(start)
        last = parse_calendar_date(end)
        if last < first:
            raise ValidationError("Calendar end date must not be before start date")
        if (last - first).days >= MAX_CALENDAR_DAYS:
            raise ValidationError(f"Calendar range is limited to {MAX_CALENDAR_DAYS} days")

        by_date: dict[date, list[Slot]] = {}
        for slot in self.slot_repo.list_for_speaker(speaker_id, from_date=first, until_date=last):
            by_date.setdefault(slot.date, []).append(slot)

        result = []
        current = first
        while current <= last:
            slots = by_date.get(current, [])
            result.append(
                DaySummary(
                    date=current,
                    status=aggregate_status_of(slots),
                    total_slots=len(slots),
                    available_slots=sum(1 for slot in slots if slot.is_available),
                )
            )
            current = current + timedelta(days=1)
        return result
