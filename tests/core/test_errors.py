"""Error Hierarchy — status codes, categories and failure envelopes."""

from taskapi.core.errors import (
    ConflictError, DatabaseError, DuplicateUsernameError, ErrorCategory,
    InvalidIdentifierError, StoreUnavailableError, TaskApiError,
)


def test_failure_envelope_shape():
    err = DuplicateUsernameError("mallory")
    response = err.to_response()

    assert response["message"] == "failure"
    assert response["payload"]["code"] == "DUPLICATE_USERNAME"
    assert response["payload"]["category"] == "conflict"
    assert "mallory" in response["payload"]["message"]
    assert response["payload"]["timestamp"]


def test_duplicate_is_a_500_class_conflict():
    err = DuplicateUsernameError()
    assert isinstance(err, ConflictError)
    assert isinstance(err, TaskApiError)
    assert err.http_status == 500
    assert err.message == "Username already exists"


def test_store_unavailable_is_503():
    err = StoreUnavailableError()
    assert err.http_status == 503
    assert err.category is ErrorCategory.UNAVAILABLE


def test_database_error_message_includes_operation():
    err = DatabaseError("boom", "insert")
    assert err.message == "Database insert failed: boom"
    assert err.http_status == 500


def test_invalid_identifier_names_field():
    err = InvalidIdentifierError("abc", "user")
    assert err.field == "user"
    assert err.code == "INVALID_IDENTIFIER"


def test_duplicate_username_is_a_unique_violation():
    from taskapi.core.errors import UniqueViolationError

    assert isinstance(DuplicateUsernameError("x"), UniqueViolationError)
    assert UniqueViolationError("dup").code == "UNIQUE_VIOLATION"
