"""ORM-backed slot repository."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List
from uuid import UUID

from django.db.models import Q  # type: ignore
from django.utils import timezone  # type: ignore

from apps.users.models import Speaker
from shared.domain.value_objects import TimeRange
from shared.infrastructure.db import lock_queryset_if_possible

from .domain.entities import Slot, SlotStatus
from .domain.repositories import AbstractSlotRepository
from .models import SpeakerAvailability

logger = logging.getLogger(__name__)


def slot_from_model(model: SpeakerAvailability) -> Slot:
    return Slot(
        id=model.id,
        speaker_id=model.speaker_id,
        time_range=TimeRange(model.date, model.start_time, model.end_time),
        status=SlotStatus(model.status),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class DjangoSlotRepository(AbstractSlotRepository):
    """
    Slot storage on the ``speaker_availability`` table.

    Status changes are compare-and-swap UPDATEs: the WHERE clause carries
    the expected status, so two transactions racing for one row cannot both
    see it match. The row count tells the caller who won.
    """

    def get_by_id(self, slot_id: UUID) -> Slot | None:
        model = SpeakerAvailability.objects.filter(pk=slot_id).first()
        return slot_from_model(model) if model else None

    def list_for_speaker(
        self,
        speaker_id: UUID,
        *,
        from_date: date | None = None,
        until_date: date | None = None,
    ) -> List[Slot]:
        qs = SpeakerAvailability.objects.filter(speaker_id=speaker_id)
        if from_date is not None:
            qs = qs.filter(date__gte=from_date)
        if until_date is not None:
            qs = qs.filter(date__lte=until_date)
        return [slot_from_model(m) for m in qs.order_by("date", "start_time")]

    def dates_for_speaker(self, speaker_id: UUID, *, from_date: date | None = None) -> List[date]:
        qs = SpeakerAvailability.objects.filter(speaker_id=speaker_id)
        if from_date is not None:
            qs = qs.filter(date__gte=from_date)
        return list(qs.order_by("date").values_list("date", flat=True).distinct())

    def find_overlapping(self, speaker_id: UUID, time_range: TimeRange) -> List[Slot]:
        overlap_filter = Q(start_time__lt=time_range.end_time) & Q(end_time__gt=time_range.start_time)
        qs = SpeakerAvailability.objects.filter(
            speaker_id=speaker_id,
            date=time_range.date,
        ).filter(overlap_filter)
        return [slot_from_model(m) for m in qs.order_by("start_time")]

    def lock_speaker(self, speaker_id: UUID) -> bool:
        qs = lock_queryset_if_possible(Speaker.objects.filter(pk=speaker_id))
        return qs.first() is not None

    def add(self, slot: Slot) -> None:
        SpeakerAvailability.objects.create(
            id=slot.id,
            speaker_id=slot.speaker_id,
            date=slot.date,
            start_time=slot.start_time,
            end_time=slot.end_time,
            status=slot.status.value,
        )

    def compare_and_set_status(
        self,
        slot_id: UUID,
        expected: Iterable[SlotStatus],
        new_status: SlotStatus,
    ) -> bool:
        updated = SpeakerAvailability.objects.filter(
            pk=slot_id,
            status__in=[status.value for status in expected],
        ).update(status=new_status.value, updated_at=timezone.now())
        if not updated:
            logger.info(f"Slot {slot_id} status CAS to {new_status.value} matched no row")
        return updated == 1

    def delete_if_available(self, speaker_id: UUID, slot_id: UUID) -> bool:
        deleted, _ = SpeakerAvailability.objects.filter(
            pk=slot_id,
            speaker_id=speaker_id,
            status=SpeakerAvailability.Status.AVAILABLE,
        ).delete()
        return deleted > 0
