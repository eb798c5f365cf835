"""API views for the booking domain."""

from __future__ import annotations

from django.http import Http404  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.exceptions import PermissionDenied  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsOrganizer, is_platform_admin, speaker_profile_id

from .application.coordinator import BookingCoordinator
from .domain.entities import Booking, BookingStatus
from .serializers import (
    BookingCancelSerializer,
    BookingCreateSerializer,
    BookingSerializer,
    BookingStatsSerializer,
)


def acts_as_speaker(user, booking: Booking) -> bool:  # type: ignore
    if is_platform_admin(user):
        return True
    return speaker_profile_id(user) == booking.speaker_id


def acts_as_organizer(user, booking: Booking) -> bool:  # type: ignore
    if is_platform_admin(user):
        return True
    return user.is_authenticated and booking.organizer_id == user.id


class BookingViewSet(viewsets.ViewSet):
    """
    Booking lifecycle for organizers and speakers.

    Speakers see bookings of their profile, everyone else sees the
    bookings they made. ``?status=`` narrows the list.
    """

    permission_classes = [permissions.IsAuthenticated]

    def get_permissions(self):  # type: ignore
        if self.action == "create":
            return [permissions.IsAuthenticated(), IsOrganizer()]
        return super().get_permissions()

    def get_coordinator(self) -> BookingCoordinator:
        return BookingCoordinator()

    def get_booking(self, pk) -> Booking:  # type: ignore
        booking = self.get_coordinator().get_booking(pk)
        user = self.request.user
        if booking is None or not (acts_as_speaker(user, booking) or acts_as_organizer(user, booking)):
            raise Http404
        return booking

    def list(self, request):  # type: ignore
        coordinator = self.get_coordinator()
        own_speaker_id = speaker_profile_id(request.user)
        if own_speaker_id is not None:
            bookings = coordinator.list_for_speaker(own_speaker_id)
        else:
            bookings = coordinator.list_for_organizer(request.user.id)

        wanted = request.query_params.get("status")
        if wanted:
            if wanted not in {s.value for s in BookingStatus}:
                return Response(
                    {"detail": f"Unknown status '{wanted}'.", "code": "validation_error"},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            bookings = [b for b in bookings if b.status.value == wanted]
        return Response(BookingSerializer(bookings, many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        return Response(BookingSerializer(self.get_booking(pk)).data)

    def create(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = request.user
        contact = {
            "name": user.display_name,
            "email": user.email,
            "phone": user.phone,
            **serializer.validated_data["contact"],
        }
        booking = self.get_coordinator().attempt_booking(
            organizer_id=user.id,
            slot_id=serializer.validated_data["slot_id"],
            event_details=serializer.validated_data["event"],
            contact=contact,
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):  # type: ignore
        booking = self.get_booking(pk)
        serializer = BookingCancelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = self.get_coordinator().cancel_booking(
            request.user.id,
            booking.id,
            serializer.validated_data["reason"],
        )
        return Response(BookingSerializer(booking).data)

    @action(detail=True, methods=["post"])
    def confirm(self, request, pk=None):  # type: ignore
        booking = self.get_booking(pk)
        if not acts_as_speaker(request.user, booking):
            raise PermissionDenied("Only the booked speaker can confirm this booking.")
        booking = self.get_coordinator().confirm_booking(request.user.id, booking.id)
        return Response(BookingSerializer(booking).data)

    @action(detail=False, methods=["get"])
    def stats(self, request):  # type: ignore
        coordinator = self.get_coordinator()
        own_speaker_id = speaker_profile_id(request.user)
        if own_speaker_id is not None:
            counts = coordinator.stats_for_speaker(own_speaker_id)
        else:
            counts = coordinator.stats_for_organizer(request.user.id)
        return Response(BookingStatsSerializer(counts).data)
