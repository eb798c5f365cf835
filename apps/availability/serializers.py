"""Serializers for the availability API."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

TIME_INPUT_FORMATS = ["%H:%M", "%H:%M:%S"]


class SlotSerializer(serializers.Serializer):
    """Read representation of a ``Slot`` entity."""

    id = serializers.UUIDField(read_only=True)
    speaker_id = serializers.UUIDField(read_only=True)
    date = serializers.DateField(read_only=True)
    start_time = serializers.TimeField(format="%H:%M", read_only=True)
    end_time = serializers.TimeField(format="%H:%M", read_only=True)
    status = serializers.CharField(source="status.value", read_only=True)


class SlotCreateSerializer(serializers.Serializer):
    """Speaker input for a new slot. Range and date rules are enforced by the slot store."""

    date = serializers.DateField()
    start_time = serializers.TimeField(input_formats=TIME_INPUT_FORMATS)
    end_time = serializers.TimeField(input_formats=TIME_INPUT_FORMATS)


class DaySummarySerializer(serializers.Serializer):
    date = serializers.DateField()
    status = serializers.CharField(source="status.value")
    total_slots = serializers.IntegerField()
    available_slots = serializers.IntegerField()
    has_available = serializers.BooleanField()
