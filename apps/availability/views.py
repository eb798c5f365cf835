"""API views for speaker availability and calendars."""

from __future__ import annotations

from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.users.models import Speaker
from apps.users.permissions import IsSpeakerOwnerOrReadOnly

from .projection import AvailabilityProjection
from .serializers import DaySummarySerializer, SlotCreateSerializer, SlotSerializer
from .services import SlotStore


class SpeakerAvailabilityViewSet(viewsets.ViewSet):
    """Speakers publish and withdraw slots; anyone may list upcoming ones."""

    permission_classes = [IsSpeakerOwnerOrReadOnly]

    def initial(self, request, *args, **kwargs):  # type: ignore
        super().initial(request, *args, **kwargs)
        self.speaker = get_object_or_404(Speaker, pk=kwargs.get("speaker_id"))

    def get_slot_store(self) -> SlotStore:
        return SlotStore()

    def list(self, request, speaker_id=None):  # type: ignore
        slots = self.get_slot_store().list_slots(self.speaker.id, request.query_params.get("from"))
        return Response(SlotSerializer(slots, many=True).data)

    def create(self, request, speaker_id=None):  # type: ignore
        serializer = SlotCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        slot = self.get_slot_store().create_slot(
            self.speaker.id,
            serializer.validated_data["date"],
            serializer.validated_data["start_time"],
            serializer.validated_data["end_time"],
        )
        return Response(SlotSerializer(slot).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, speaker_id=None, pk=None):  # type: ignore
        self.get_slot_store().delete_slot(self.speaker.id, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class SpeakerCalendarView(APIView):
    """
    Calendar read model for organizers.

    ``?date=`` returns that day's slots with its aggregate status,
    ``?start=&end=`` returns one summary per day of the range.
    """

    permission_classes = [permissions.AllowAny]

    def get(self, request, speaker_id):  # type: ignore
        speaker = get_object_or_404(Speaker, pk=speaker_id)
        projection = AvailabilityProjection()
        on_date = request.query_params.get("date")
        start = request.query_params.get("start")
        end = request.query_params.get("end")

        if on_date:
            slots = projection.slots_for_date(speaker.id, on_date)
            return Response(
                {
                    "speaker_id": speaker.id,
                    "date": on_date,
                    "aggregate_status": projection.aggregate_status(speaker.id, on_date).value,
                    "has_available": any(slot.is_available for slot in slots),
                    "slots": SlotSerializer(slots, many=True).data,
                }
            )

        if start and end:
            days = projection.calendar(speaker.id, start, end)
            return Response({"speaker_id": speaker.id, "dates": DaySummarySerializer(days, many=True).data})

        return Response(
            {"detail": "Either date or both start and end are required."},
            status=status.HTTP_400_BAD_REQUEST,
        )


class SpeakerCalendarDatesView(APIView):
    """Dates that have at least one slot, used to enable calendar days."""

    permission_classes = [permissions.AllowAny]

    def get(self, request, speaker_id):  # type: ignore
        speaker = get_object_or_404(Speaker, pk=speaker_id)
        dates = AvailabilityProjection().dates_with_any_slot(speaker.id, request.query_params.get("from"))
        return Response({"speaker_id": speaker.id, "dates": [d.isoformat() for d in dates]})
