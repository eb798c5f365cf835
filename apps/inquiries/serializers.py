"""Serializers for the inquiry API."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Inquiry


class InquiryCreateSerializer(serializers.Serializer):
    """Presence and format checks happen in ``InquiryLog.submit``."""

    speaker_id = serializers.UUIDField()
    name = serializers.CharField(required=False, allow_blank=True, default="")
    email = serializers.CharField(required=False, allow_blank=True, default="")
    phone = serializers.CharField(required=False, allow_blank=True, default="")
    message = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    event_date = serializers.DateField(required=False, allow_null=True, default=None)


class InquiryStatusSerializer(serializers.Serializer):
    status = serializers.CharField()


class InquirySerializer(serializers.ModelSerializer):
    speaker_id = serializers.UUIDField(read_only=True)
    organizer_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = Inquiry
        fields = [
            "id",
            "speaker_id",
            "organizer_id",
            "name",
            "email",
            "phone",
            "message",
            "event_date",
            "status",
            "created_at",
        ]
        read_only_fields = fields
