"""
Booking Ledger Interface

Durable record of bookings. Rows are inserted once and afterwards only
change status; nothing is ever deleted.
"""

from abc import ABC, abstractmethod
from typing import Dict, List
from uuid import UUID

from .entities import Booking


class AbstractBookingLedger(ABC):

    @abstractmethod
    def get_by_id(self, booking_id: UUID, *, lock: bool = False) -> Booking | None:
        """Load a booking, optionally holding a row lock until commit."""

    @abstractmethod
    def add(self, booking: Booking) -> None:
        """
        Insert a new booking.

        Raises SlotUnavailableError if another active booking already
        references the same slot.
        """

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """Persist status changes of an existing booking."""

    @abstractmethod
    def list_for_speaker(self, speaker_id: UUID) -> List[Booking]:
        """Newest first."""

    @abstractmethod
    def list_for_organizer(self, organizer_id: int) -> List[Booking]:
        """Newest first."""

    @abstractmethod
    def count_by_status(self, *, speaker_id: UUID | None = None, organizer_id: int | None = None) -> Dict[str, int]:
        """Counts per booking status value plus ``total``."""
