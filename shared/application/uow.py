"""
Unit of Work

One transaction per command. Domain events gathered during the command
reach the message bus only once the database has committed.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from django.db import DatabaseError, transaction

from shared.domain.base import DomainEvent
from shared.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Commits on a clean exit, rolls back when the block raises."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        ...

    @abstractmethod
    def rollback(self):
        ...

    @abstractmethod
    def collect_events(self, aggregate):
        """Take ownership of the events pending on ``aggregate``."""


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    ``transaction.atomic()`` with deferred event publishing.

    Slot transitions and ledger writes made inside the block land
    together. Events are queued with ``transaction.on_commit`` so a
    booking that rolls back never notifies anyone:

        with DjangoUnitOfWork() as uow:
            if not slot_repo.compare_and_set_status(slot_id, expected, new):
                raise SlotUnavailableError(...)
            ledger.add(booking)
            uow.collect_events(booking)

    A ``DatabaseError`` leaving the block surfaces as ``StorageError``.
    """

    def __init__(self):
        self._events: List[DomainEvent] = []
        self._atomic = None

    def __enter__(self):
        self._atomic = transaction.atomic()
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._atomic:
                self._atomic.__exit__(exc_type, exc_val, exc_tb)

        if exc_type is not None and issubclass(exc_type, DatabaseError):
            raise StorageError(f"Transaction aborted: {exc_val}") from exc_val
        return False

    def commit(self):
        pending, self._events = self._events, []
        logger.debug(f"Leaving atomic block with {len(pending)} pending events")
        if pending:
            transaction.on_commit(lambda: self._publish(pending))

    def rollback(self):
        logger.warning(f"Rolling back, dropping {len(self._events)} pending events")
        self._events = []

    def record_event(self, event: DomainEvent):
        """Queue an event raised by an ORM-backed service rather than an aggregate."""
        self._events.append(event)

    def collect_events(self, aggregate):
        events = getattr(aggregate, 'events', None)
        if not events:
            return
        self._events.extend(events)
        aggregate.clear_events()
        logger.debug(f"Collected {len(events)} events from {type(aggregate).__name__} {aggregate.id}")

    @staticmethod
    def _publish(events: List[DomainEvent]):
        from shared.application.message_bus import message_bus

        logger.info(f"Publishing {len(events)} domain events after commit")
        try:
            message_bus.publish_events(events)
        except Exception as e:
            logger.error(f"Error publishing events: {e}", exc_info=True)
