"""Token authentication and role helpers."""

from __future__ import annotations

from types import SimpleNamespace

from django.contrib.auth.models import AnonymousUser
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import Speaker, User
from apps.users.permissions import IsSpeakerOwnerOrReadOnly, is_platform_admin, speaker_profile_id


class AuthAPITests(APITestCase):

    def setUp(self) -> None:
        self.user = User.objects.create_user(
            email="organizer@example.com",
            password="OrganizerPass123",
        )

    def test_obtain_token_with_email(self) -> None:
        response = self.client.post(
            reverse("auth:token_obtain_pair"),
            {"email": "organizer@example.com", "password": "OrganizerPass123"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertIn("access", response.data)
        self.assertIn("refresh", response.data)

    def test_token_grants_access(self) -> None:
        token = self.client.post(
            reverse("auth:token_obtain_pair"),
            {"email": "organizer@example.com", "password": "OrganizerPass123"},
            format="json",
        ).data["access"]

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        response = self.client.get(reverse("booking-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_wrong_password(self) -> None:
        response = self.client.post(
            reverse("auth:token_obtain_pair"),
            {"email": "organizer@example.com", "password": "nope"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class RoleTests(APITestCase):

    def test_default_role_is_organizer(self) -> None:
        user = User.objects.create_user(email="a@example.com", password="APass12345")
        self.assertTrue(user.is_organizer())
        self.assertFalse(user.is_speaker())

    def test_superuser_is_platform_admin(self) -> None:
        admin = User.objects.create_superuser(email="root@example.com", password="RootPass123")
        self.assertTrue(admin.is_platform_admin())
        self.assertTrue(is_platform_admin(admin))
        self.assertFalse(is_platform_admin(AnonymousUser()))

    def test_speaker_profile_lookup(self) -> None:
        user = User.objects.create_user(email="s@example.com", password="SPass12345", role=User.RoleChoices.SPEAKER)
        self.assertIsNone(speaker_profile_id(user))

        speaker = Speaker.objects.create(user=user, full_name="Sol Speaker")
        user = User.objects.get(pk=user.pk)

        self.assertEqual(speaker_profile_id(user), speaker.id)
        self.assertEqual(speaker.contact_email, "s@example.com")

    def test_owner_permission_matches_url_speaker(self) -> None:
        user = User.objects.create_user(email="o@example.com", password="OPass12345", role=User.RoleChoices.SPEAKER)
        speaker = Speaker.objects.create(user=user, full_name="Owner")
        permission = IsSpeakerOwnerOrReadOnly()

        own = SimpleNamespace(kwargs={"speaker_id": speaker.id})
        foreign = SimpleNamespace(kwargs={"speaker_id": "00000000-0000-0000-0000-000000000000"})
        request = SimpleNamespace(method="POST", user=user)

        self.assertTrue(permission.has_permission(request, own))
        self.assertFalse(permission.has_permission(request, foreign))
        self.assertTrue(permission.has_permission(SimpleNamespace(method="GET", user=AnonymousUser()), foreign))
