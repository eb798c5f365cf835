"""Calendar read model over the in-memory slot repository."""

from __future__ import annotations

from datetime import date, time, timedelta
from uuid import uuid4

import pytest

from apps.availability.domain.entities import Slot, SlotStatus
from apps.availability.projection import (
    AggregateStatus,
    AvailabilityProjection,
    aggregate_status_of,
)
from shared.domain.exceptions import ValidationError
from shared.domain.value_objects import TimeRange

from .fakes import InMemorySlotRepository

DAY = date(2030, 6, 1)


def make_slot(speaker_id, start_hour, status=SlotStatus.AVAILABLE, on=DAY):
    return Slot(
        speaker_id=speaker_id,
        time_range=TimeRange(on, time(start_hour, 0), time(start_hour + 1, 0)),
        status=status,
    )


@pytest.fixture
def speaker_id():
    return uuid4()


@pytest.fixture
def repo(speaker_id):
    return InMemorySlotRepository(speakers=[speaker_id])


@pytest.fixture
def projection(repo):
    return AvailabilityProjection(slot_repo=repo)


@pytest.mark.parametrize(
    "statuses,expected",
    [
        ([], AggregateStatus.NONE),
        ([SlotStatus.AVAILABLE, SlotStatus.AVAILABLE], AggregateStatus.AVAILABLE),
        ([SlotStatus.BOOKED], AggregateStatus.BOOKED),
        ([SlotStatus.AVAILABLE, SlotStatus.BOOKED], AggregateStatus.MIXED),
        ([SlotStatus.PENDING], AggregateStatus.MIXED),
        ([SlotStatus.BOOKED, SlotStatus.PENDING], AggregateStatus.MIXED),
    ],
)
def test_aggregate_status_of(speaker_id, statuses, expected):
    slots = [make_slot(speaker_id, 9 + i, status) for i, status in enumerate(statuses)]
    assert aggregate_status_of(slots) == expected


def test_date_with_one_available_slot_among_booked(projection, repo, speaker_id):
    repo.add(make_slot(speaker_id, 9, SlotStatus.BOOKED))
    repo.add(make_slot(speaker_id, 10, SlotStatus.AVAILABLE))
    repo.add(make_slot(speaker_id, 14, SlotStatus.BOOKED))

    assert projection.date_has_available(speaker_id, DAY) is True
    assert projection.aggregate_status(speaker_id, DAY) == AggregateStatus.MIXED


def test_fully_booked_date(projection, repo, speaker_id):
    repo.add(make_slot(speaker_id, 9, SlotStatus.BOOKED))

    assert projection.date_has_available(speaker_id, DAY.isoformat()) is False
    assert projection.aggregate_status(speaker_id, DAY) == AggregateStatus.BOOKED


def test_empty_date(projection, speaker_id):
    assert projection.slots_for_date(speaker_id, DAY) == []
    assert projection.date_has_available(speaker_id, DAY) is False
    assert projection.aggregate_status(speaker_id, DAY) == AggregateStatus.NONE


def test_slots_for_date_sorted_and_scoped(projection, repo, speaker_id):
    repo.add(make_slot(speaker_id, 14))
    repo.add(make_slot(speaker_id, 9))
    repo.add(make_slot(speaker_id, 9, on=DAY + timedelta(days=1)))
    repo.add(make_slot(uuid4(), 11))

    slots = projection.slots_for_date(speaker_id, DAY)

    assert [s.start_time for s in slots] == [time(9, 0), time(14, 0)]


def test_reads_are_repeatable(projection, repo, speaker_id):
    repo.add(make_slot(speaker_id, 9))
    first = [(s.id, s.status) for s in projection.slots_for_date(speaker_id, DAY)]
    second = [(s.id, s.status) for s in projection.slots_for_date(speaker_id, DAY)]
    assert first == second


def test_dates_with_any_slot(projection, repo, speaker_id):
    repo.add(make_slot(speaker_id, 9, on=DAY + timedelta(days=2)))
    repo.add(make_slot(speaker_id, 9, SlotStatus.BOOKED, on=DAY))
    repo.add(make_slot(speaker_id, 10, on=DAY))

    assert projection.dates_with_any_slot(speaker_id) == [DAY, DAY + timedelta(days=2)]
    assert projection.dates_with_any_slot(speaker_id, DAY + timedelta(days=1)) == [DAY + timedelta(days=2)]


def test_calendar_covers_every_day(projection, repo, speaker_id):
    repo.add(make_slot(speaker_id, 9, on=DAY))
    repo.add(make_slot(speaker_id, 10, SlotStatus.BOOKED, on=DAY))
    repo.add(make_slot(speaker_id, 9, SlotStatus.BOOKED, on=DAY + timedelta(days=2)))

    days = projection.calendar(speaker_id, DAY, DAY + timedelta(days=2))

    assert [d.date for d in days] == [DAY, DAY + timedelta(days=1), DAY + timedelta(days=2)]
    assert [d.status for d in days] == [AggregateStatus.MIXED, AggregateStatus.NONE, AggregateStatus.BOOKED]
    assert days[0].total_slots == 2
    assert days[0].available_slots == 1
    assert days[0].has_available is True
    assert days[2].has_available is False


def test_calendar_rejects_inverted_range(projection, speaker_id):
    with pytest.raises(ValidationError):
        projection.calendar(speaker_id, DAY, DAY - timedelta(days=1))


def test_calendar_rejects_oversized_range(projection, speaker_id):
    with pytest.raises(ValidationError):
        projection.calendar(speaker_id, DAY, DAY + timedelta(days=400))
