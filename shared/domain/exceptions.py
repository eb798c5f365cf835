"""
Domain Error Taxonomy

Every failure of a core operation surfaces as exactly one of these kinds so
that callers (the API layer, management commands, tests) can react to the
kind rather than to the message text.
"""


class DomainError(Exception):
    """Base class for all errors raised by the domain and application layers."""

    code = 'domain_error'

    def __init__(self, message: str = ''):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message or self.code


class ValidationError(DomainError):
    """Malformed or missing required input. User-correctable."""

    code = 'validation_error'


class NotFoundError(DomainError):
    """Referenced slot, booking, inquiry or speaker does not exist."""

    code = 'not_found'


class SlotUnavailableError(DomainError):
    """The slot was taken by a competing booking attempt."""

    code = 'slot_unavailable'


class ConflictError(DomainError):
    """The request collides with existing state (overlapping or booked slot)."""

    code = 'conflict'


class InvalidStateError(DomainError):
    """The requested status transition is not allowed from the current status."""

    code = 'invalid_state'


class StorageError(DomainError):
    """Transport or transaction failure. Retryable by the caller."""

    code = 'storage_error'
