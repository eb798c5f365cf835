"""Inquiry domain events."""

from dataclasses import dataclass
from uuid import UUID

from shared.domain.base import DomainEvent


@dataclass
class InquirySubmitted(DomainEvent):
    """
    Event: Someone sent a speaker a contact request

    Triggers:
    - Forward the inquiry to the speaker by email
    """
    inquiry_id: UUID
    speaker_id: UUID
    organizer_id: int | None
    email: str
