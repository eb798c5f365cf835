"""DRF exception handler translating domain errors into HTTP responses."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler as drf_exception_handler  # type: ignore

from shared.domain.exceptions import (
    ConflictError,
    DomainError,
    InvalidStateError,
    NotFoundError,
    SlotUnavailableError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    SlotUnavailableError: status.HTTP_409_CONFLICT,
    ConflictError: status.HTTP_409_CONFLICT,
    InvalidStateError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def domain_exception_handler(exc, context):  # type: ignore
    """Falls back to DRF's handler for everything that is not a DomainError."""

    if not isinstance(exc, DomainError):
        return drf_exception_handler(exc, context)

    status_code = status.HTTP_400_BAD_REQUEST
    for error_type, mapped_status in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            status_code = mapped_status
            break

    if isinstance(exc, StorageError):
        logger.error(f"Storage failure in {context.get('view').__class__.__name__}: {exc}")
    else:
        logger.info(f"Domain error {exc.code}: {exc}")

    return Response({"detail": str(exc), "code": exc.code}, status=status_code)
