from app.core.exceptions import (
    AppError,
    ConcurrentScheduleWriteError,
    ResourceNotFoundError,
    ScheduleValidationError,
    SchedulingConflictError,
    StoreUnavailableError,
)


def test_schedule_validation_error_structure():
    err = ScheduleValidationError(message="Test error", details={"foo": "bar"})
    assert err.status_code == 400
    assert err.message == "Test error"
    assert err.details == {"foo": "bar"}
    assert isinstance(err, AppError)


def test_app_error_defaults():
    err = AppError("Generic error")
    assert err.status_code == 500
    assert err.details == {}


def test_resource_not_found_message():
    err = ResourceNotFoundError("Faculty", "f-1")
    assert err.status_code == 404
    assert err.message == "Faculty with id f-1 not found"


def test_store_unavailable_names_the_operation():
    err = StoreUnavailableError("holiday lookup")
    assert err.status_code == 500
    assert err.details == {"operation": "holiday lookup"}


def test_conflict_errors_are_409():
    refused = SchedulingConflictError([{"type": "EXACT_DUPLICATE"}])
    assert refused.status_code == 409
    assert refused.details["conflicts"] == [{"type": "EXACT_DUPLICATE"}]

    raced = ConcurrentScheduleWriteError()
    assert raced.status_code == 409
    assert raced.details == {"retryable": True}
