"""Slot store rules checked against the in-memory repository."""

from __future__ import annotations

from datetime import date, time, timedelta
from uuid import uuid4

import pytest

from apps.availability.domain.entities import Slot, SlotStatus
from apps.availability.services import SlotStore
from shared.domain.exceptions import ConflictError, NotFoundError, ValidationError
from shared.domain.value_objects import TimeRange

from .fakes import FakeUnitOfWork, InMemorySlotRepository

TODAY = date(2030, 3, 10)
TOMORROW = TODAY + timedelta(days=1)


@pytest.fixture
def speaker_id():
    return uuid4()


@pytest.fixture
def repo(speaker_id):
    return InMemorySlotRepository(speakers=[speaker_id])


@pytest.fixture
def store(repo):
    return SlotStore(slot_repo=repo, uow_factory=FakeUnitOfWork, today=lambda: TODAY)


def test_create_slot_is_available(store, repo, speaker_id):
    slot = store.create_slot(speaker_id, "2030-03-11", "09:00", "10:00")

    assert slot.status == SlotStatus.AVAILABLE
    assert slot.date == TOMORROW
    assert slot.start_time == time(9, 0)
    assert repo.get_by_id(slot.id) is not None


def test_slot_today_is_allowed(store, speaker_id):
    slot = store.create_slot(speaker_id, TODAY, "18:00", "19:00")
    assert slot.date == TODAY


def test_slot_in_the_past_is_rejected(store, repo, speaker_id):
    with pytest.raises(ValidationError):
        store.create_slot(speaker_id, TODAY - timedelta(days=1), "09:00", "10:00")
    assert repo.slots == {}


@pytest.mark.parametrize("start,end", [("10:00", "10:00"), ("11:00", "10:00")])
def test_empty_or_inverted_range_is_rejected(store, repo, speaker_id, start, end):
    with pytest.raises(ValidationError):
        store.create_slot(speaker_id, TOMORROW, start, end)
    assert repo.slots == {}


@pytest.mark.parametrize("value", ["25:00", "9am", "", "9:00", "09:5"])
def test_malformed_time_is_rejected(store, speaker_id, value):
    with pytest.raises(ValidationError):
        store.create_slot(speaker_id, TOMORROW, value, "10:00")


def test_malformed_date_is_rejected(store, speaker_id):
    with pytest.raises(ValidationError):
        store.create_slot(speaker_id, "11/03/2030", "09:00", "10:00")


def test_unknown_speaker(store):
    with pytest.raises(NotFoundError):
        store.create_slot(uuid4(), TOMORROW, "09:00", "10:00")


def test_overlapping_slot_conflicts(store, speaker_id):
    store.create_slot(speaker_id, TOMORROW, "09:00", "10:00")

    with pytest.raises(ConflictError):
        store.create_slot(speaker_id, TOMORROW, "09:30", "10:30")


def test_back_to_back_slots_are_allowed(store, speaker_id):
    store.create_slot(speaker_id, TOMORROW, "09:00", "10:00")
    store.create_slot(speaker_id, TOMORROW, "10:00", "11:00")

    assert len(store.list_slots(speaker_id)) == 2


def test_other_speakers_do_not_conflict(repo, store, speaker_id):
    other = uuid4()
    repo.speakers.add(other)
    store.create_slot(speaker_id, TOMORROW, "09:00", "10:00")
    store.create_slot(other, TOMORROW, "09:00", "10:00")


def test_delete_available_slot(store, repo, speaker_id):
    slot = store.create_slot(speaker_id, TOMORROW, "09:00", "10:00")

    store.delete_slot(speaker_id, slot.id)

    assert repo.get_by_id(slot.id) is None


@pytest.mark.parametrize("status", [SlotStatus.PENDING, SlotStatus.BOOKED])
def test_delete_taken_slot_conflicts(store, repo, speaker_id, status):
    slot = store.create_slot(speaker_id, TOMORROW, "09:00", "10:00")
    repo.compare_and_set_status(slot.id, [SlotStatus.AVAILABLE], status)

    with pytest.raises(ConflictError):
        store.delete_slot(speaker_id, slot.id)
    assert repo.get_by_id(slot.id).status == status


def test_delete_unknown_slot(store, speaker_id):
    with pytest.raises(NotFoundError):
        store.delete_slot(speaker_id, uuid4())


def test_delete_slot_of_another_speaker(store, repo, speaker_id):
    slot = store.create_slot(speaker_id, TOMORROW, "09:00", "10:00")

    with pytest.raises(NotFoundError):
        store.delete_slot(uuid4(), slot.id)
    assert repo.get_by_id(slot.id) is not None


def test_list_slots_defaults_to_today(store, repo, speaker_id):
    store.create_slot(speaker_id, TOMORROW + timedelta(days=1), "14:00", "15:00")
    store.create_slot(speaker_id, TOMORROW, "10:00", "11:00")
    store.create_slot(speaker_id, TOMORROW, "09:00", "10:00")
    repo.add(Slot(speaker_id=speaker_id, time_range=TimeRange(TODAY - timedelta(days=2), time(8, 0), time(9, 0))))

    slots = store.list_slots(speaker_id)

    assert [(s.date, s.start_time) for s in slots] == [
        (TOMORROW, time(9, 0)),
        (TOMORROW, time(10, 0)),
        (TOMORROW + timedelta(days=1), time(14, 0)),
    ]


def test_list_slots_from_explicit_date(store, speaker_id):
    store.create_slot(speaker_id, TOMORROW, "09:00", "10:00")
    store.create_slot(speaker_id, TOMORROW + timedelta(days=3), "09:00", "10:00")

    slots = store.list_slots(speaker_id, from_date=(TOMORROW + timedelta(days=2)).isoformat())

    assert [s.date for s in slots] == [TOMORROW + timedelta(days=3)]
