"""Serializers for the booking API."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore


class BookingCreateSerializer(serializers.Serializer):
    """
    Organizer request to book a slot.

    Event details stay a loose mapping here; the booking domain decides
    what is required so the API and internal callers share one rule set.
    """

    slot_id = serializers.UUIDField()
    event = serializers.DictField()
    contact = serializers.DictField(required=False, default=dict)


class BookingCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)


class EventDetailsSerializer(serializers.Serializer):
    name = serializers.CharField()
    type = serializers.CharField(source="event_type")
    location = serializers.CharField()
    attendees = serializers.IntegerField(allow_null=True)
    notes = serializers.CharField()


class ContactSnapshotSerializer(serializers.Serializer):
    name = serializers.CharField()
    email = serializers.CharField()
    phone = serializers.CharField()


class BookingSerializer(serializers.Serializer):
    """Read representation of a ``Booking`` aggregate."""

    id = serializers.UUIDField(read_only=True)
    slot_id = serializers.UUIDField(source="availability_id", read_only=True, allow_null=True)
    speaker_id = serializers.UUIDField(read_only=True)
    organizer_id = serializers.IntegerField(read_only=True)
    status = serializers.CharField(source="status.value", read_only=True)
    event = EventDetailsSerializer(read_only=True)
    contact = ContactSnapshotSerializer(read_only=True)
    cancelled_by = serializers.IntegerField(read_only=True, allow_null=True)
    cancellation_reason = serializers.CharField(read_only=True)
    confirmed_at = serializers.DateTimeField(read_only=True, allow_null=True)
    cancelled_at = serializers.DateTimeField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)


class BookingStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    pending = serializers.IntegerField()
    confirmed = serializers.IntegerField()
    cancelled = serializers.IntegerField()
