"""API views for speaker inquiries."""

from __future__ import annotations

from rest_framework import generics, permissions, status  # type: ignore
from rest_framework.exceptions import PermissionDenied  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.users.permissions import is_platform_admin, speaker_profile_id

from .models import Inquiry
from .serializers import InquiryCreateSerializer, InquirySerializer, InquiryStatusSerializer
from .services import InquiryLog


class InquiryListCreateView(generics.ListCreateAPIView):
    """
    Anyone may send an inquiry; speakers read the ones addressed to them.

    ``?status=`` filters the list.
    """

    serializer_class = InquirySerializer
    filterset_fields = ["status"]

    def get_permissions(self):  # type: ignore
        if self.request.method == "POST":
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated()]

    def get_queryset(self):  # type: ignore
        user = self.request.user
        if is_platform_admin(user):
            return Inquiry.objects.all()
        own_speaker_id = speaker_profile_id(user)
        if own_speaker_id is None:
            raise PermissionDenied("Only speakers can read inquiries.")
        return InquiryLog().list_for_speaker(own_speaker_id)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = InquiryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        inquiry = InquiryLog().submit(
            speaker_id=data["speaker_id"],
            organizer_id=request.user.id if request.user.is_authenticated else None,
            name=data["name"],
            email=data["email"],
            message=data["message"],
            phone=data["phone"],
            event_date=data["event_date"],
        )
        return Response(InquirySerializer(inquiry).data, status=status.HTTP_201_CREATED)


class InquiryStatusView(APIView):
    """Speaker acknowledges an inquiry."""

    permission_classes = [permissions.IsAuthenticated]

    def patch(self, request, pk):  # type: ignore
        serializer = InquiryStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = request.user
        if is_platform_admin(user):
            scope = None
        else:
            scope = speaker_profile_id(user)
            if scope is None:
                raise PermissionDenied("Only speakers can update inquiries.")
        inquiry = InquiryLog().update_status(pk, serializer.validated_data["status"], speaker_id=scope)
        return Response(InquirySerializer(inquiry).data)
