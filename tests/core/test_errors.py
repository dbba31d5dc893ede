"""Error Hierarchy: verifies status codes and the {"error": message} envelope."""

from listkeeper.core.errors import (
    DatabaseError, ErrorCategory, ErrorSeverity, ItemValidationError,
    ListKeeperError, StoreUnavailableError,
)


def test_validation_error_is_400():
    err = ItemValidationError("Text is required", "text")
    assert err.http_status == 400
    assert err.field == "text"
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response() == {"error": "Text is required"}


def test_database_error_keeps_driver_message():
    err = DatabaseError("database is locked", "commit")
    assert err.http_status == 500
    assert err.operation == "commit"
    assert err.to_response() == {"error": "database is locked"}


def test_store_unavailable_message():
    err = StoreUnavailableError()
    assert err.http_status == 500
    assert err.to_response() == {"error": "Database not available"}


def test_all_errors_share_base():
    for err in (
        ItemValidationError("m", "text"),
        DatabaseError("m", "query"),
        StoreUnavailableError(),
    ):
        assert isinstance(err, ListKeeperError)


def test_severities_and_categories_in_use():
    assert {s.value for s in ErrorSeverity} == {"warning", "error", "critical"}
    assert {c.value for c in ErrorCategory} == {"validation", "database"}
    assert ItemValidationError("m", "text").severity == ErrorSeverity.WARNING
    assert DatabaseError("m", "query").category == ErrorCategory.DATABASE
