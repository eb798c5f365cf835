"""Role-based permission classes shared by the marketplace APIs.

Authentication is an outside collaborator; these checks only decide
whether the already-authenticated identity may act for a role.
"""

from __future__ import annotations

from rest_framework import permissions  # type: ignore


def is_platform_admin(user) -> bool:  # type: ignore
    if not user.is_authenticated:
        return False
    if getattr(user, "is_staff", False) or getattr(user, "is_superuser", False):
        return True
    return hasattr(user, "is_platform_admin") and user.is_platform_admin()


def speaker_profile_id(user):  # type: ignore
    """Id of the speaker profile owned by ``user`` or ``None``."""

    if not user.is_authenticated:
        return None
    profile = getattr(user, "speaker_profile", None)
    return profile.id if profile is not None else None


class IsOrganizer(permissions.BasePermission):
    """Only organizers (and admins) may book speakers."""

    message = "Only organizers can book speakers."

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        if not user.is_authenticated:
            return False
        if is_platform_admin(user):
            return True
        return hasattr(user, "is_organizer") and user.is_organizer()


class IsSpeakerOwnerOrReadOnly(permissions.BasePermission):
    """
    Reads are public, writes require owning the speaker profile
    addressed by the ``speaker_id`` URL kwarg.
    """

    message = "You can only manage your own availability."

    def has_permission(self, request, view) -> bool:  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        if is_platform_admin(user):
            return True
        owned_id = speaker_profile_id(user)
        if owned_id is None:
            return False
        return str(owned_id) == str(view.kwargs.get("speaker_id"))
