"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import time, timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.availability.models import SpeakerAvailability
from apps.bookings.models import Booking
from apps.users.models import Speaker, User


class BookingAPITests(APITestCase):
    """Covers booking, conflicts, approval and cancellation."""

    def setUp(self) -> None:
        self.organizer = User.objects.create_user(
            email="organizer@example.com",
            phone="+919800000001",
            password="OrganizerPass123",
            first_name="Olga",
            last_name="Organizer",
        )
        self.rival = User.objects.create_user(
            email="rival@example.com",
            password="RivalPass123",
        )
        self.speaker_user = User.objects.create_user(
            email="speaker@example.com",
            password="SpeakerPass123",
            role=User.RoleChoices.SPEAKER,
        )
        self.speaker = Speaker.objects.create(user=self.speaker_user, full_name="Sam Speaker")
        self.slot = SpeakerAvailability.objects.create(
            speaker=self.speaker,
            date=timezone.localdate() + timedelta(days=2),
            start_time=time(10, 0),
            end_time=time(11, 0),
        )
        self.list_url = reverse("booking-list")

    def _payload(self, **event) -> dict:
        return {
            "slot_id": str(self.slot.id),
            "event": {"name": "PyCon workshop", "location": "Pune", "attendees": 40, **event},
        }

    def _book(self, user=None):  # type: ignore
        self.client.force_authenticate(user or self.organizer)
        return self.client.post(self.list_url, self._payload(), format="json")

    def test_organizer_can_book_slot(self) -> None:
        response = self._book()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], "confirmed")
        self.assertEqual(response.data["event"]["name"], "PyCon workshop")
        self.assertEqual(response.data["contact"]["email"], "organizer@example.com")
        self.assertEqual(response.data["contact"]["name"], "Olga Organizer")
        self.slot.refresh_from_db()
        self.assertEqual(self.slot.status, SpeakerAvailability.Status.BOOKED)

    def test_second_booking_conflicts(self) -> None:
        self._book()

        response = self._book(self.rival)

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["code"], "slot_unavailable")
        self.assertEqual(Booking.objects.count(), 1)

    def test_speaker_cannot_book(self) -> None:
        response = self._book(self.speaker_user)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_missing_location_is_rejected(self) -> None:
        self.client.force_authenticate(self.organizer)

        response = self.client.post(self.list_url, self._payload(location=""), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "validation_error")
        self.slot.refresh_from_db()
        self.assertEqual(self.slot.status, SpeakerAvailability.Status.AVAILABLE)

    def test_unstorable_attendee_count_is_rejected(self) -> None:
        self.client.force_authenticate(self.organizer)

        for attendees in (10**20, "①"):
            response = self.client.post(self.list_url, self._payload(attendees=attendees), format="json")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
            self.assertEqual(response.data["code"], "validation_error")

        self.slot.refresh_from_db()
        self.assertEqual(self.slot.status, SpeakerAvailability.Status.AVAILABLE)

    def test_unknown_slot_is_404(self) -> None:
        self.client.force_authenticate(self.organizer)
        payload = self._payload()
        payload["slot_id"] = "00000000-0000-0000-0000-000000000000"

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_approval_required_then_confirmed(self) -> None:
        self.speaker.requires_booking_approval = True
        self.speaker.save()
        booking_id = self._book().data["id"]
        confirm_url = reverse("booking-confirm", kwargs={"pk": booking_id})

        self.slot.refresh_from_db()
        self.assertEqual(self.slot.status, SpeakerAvailability.Status.PENDING)

        organizer_attempt = self.client.post(confirm_url)
        self.assertEqual(organizer_attempt.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.speaker_user)
        response = self.client.post(confirm_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "confirmed")
        self.slot.refresh_from_db()
        self.assertEqual(self.slot.status, SpeakerAvailability.Status.BOOKED)

    def test_organizer_can_cancel(self) -> None:
        booking_id = self._book().data["id"]
        url = reverse("booking-cancel", kwargs={"pk": booking_id})

        response = self.client.post(url, {"reason": "Venue closed"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "cancelled")
        self.assertEqual(response.data["cancellation_reason"], "Venue closed")
        self.slot.refresh_from_db()
        self.assertEqual(self.slot.status, SpeakerAvailability.Status.AVAILABLE)

        again = self.client.post(url, format="json")
        self.assertEqual(again.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(again.data["code"], "invalid_state")

    def test_stranger_cannot_see_or_cancel(self) -> None:
        booking_id = self._book().data["id"]
        self.client.force_authenticate(self.rival)

        self.assertEqual(
            self.client.get(reverse("booking-detail", kwargs={"pk": booking_id})).status_code,
            status.HTTP_404_NOT_FOUND,
        )
        response = self.client.post(reverse("booking-cancel", kwargs={"pk": booking_id}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_lists_and_stats_per_role(self) -> None:
        booking_id = self._book().data["id"]

        organizer_list = self.client.get(self.list_url)
        self.assertEqual([b["id"] for b in organizer_list.data], [booking_id])

        self.client.force_authenticate(self.speaker_user)
        speaker_list = self.client.get(self.list_url, {"status": "confirmed"})
        self.assertEqual([b["id"] for b in speaker_list.data], [booking_id])
        self.assertEqual(self.client.get(self.list_url, {"status": "pending"}).data, [])
        self.assertEqual(
            self.client.get(self.list_url, {"status": "archived"}).status_code,
            status.HTTP_400_BAD_REQUEST,
        )

        stats = self.client.get(reverse("booking-stats"))
        self.assertEqual(stats.data, {"total": 1, "pending": 0, "confirmed": 1, "cancelled": 0})

        self.client.force_authenticate(self.rival)
        self.assertEqual(self.client.get(self.list_url).data, [])

    def test_anonymous_is_rejected(self) -> None:
        response = self.client.get(self.list_url)
        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))
