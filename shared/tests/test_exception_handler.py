import pytest
from rest_framework.exceptions import NotAuthenticated

from shared.api.exception_handler import domain_exception_handler
from shared.domain.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    SlotUnavailableError,
    StorageError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error,status_code,code",
    [
        (ValidationError("bad"), 400, "validation_error"),
        (NotFoundError("gone"), 404, "not_found"),
        (SlotUnavailableError("taken"), 409, "slot_unavailable"),
        (ConflictError("overlap"), 409, "conflict"),
        (InvalidStateError("cancelled"), 409, "invalid_state"),
        (StorageError("db down"), 503, "storage_error"),
    ],
)
def test_domain_errors_are_mapped(error, status_code, code):
    response = domain_exception_handler(error, {"view": None})

    assert response.status_code == status_code
    assert response.data == {"detail": str(error), "code": code}


def test_other_errors_fall_back_to_drf():
    response = domain_exception_handler(NotAuthenticated(), {"view": None, "request": None})
    assert response.status_code in (401, 403)


def test_unhandled_errors_are_left_alone():
    assert domain_exception_handler(RuntimeError("boom"), {"view": None}) is None
