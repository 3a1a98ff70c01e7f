import pytest

from funext import NoDataError, ResultFailedError
from funext.results import (
    DataResult,
    ErrorType,
    FAILURE_MESSAGE,
    NO_DATA_MESSAGE,
    Outcome,
    Result,
    SUCCESS_MESSAGE,
)


def test_success_has_default_message():
    result = Result.on_success()

    assert result.outcome is Outcome.SUCCESS
    assert result.message == SUCCESS_MESSAGE
    assert result.error_type is ErrorType.NONE
    assert result.fault is None
    assert result


def test_failure_has_default_message():
    result = Result.on_failure()

    assert result.outcome is Outcome.FAILURE
    assert result.message == FAILURE_MESSAGE
    assert result.error_type is ErrorType.FAILURE
    assert not result


def test_empty_message_is_replaced():
    assert Result.on_failure("").message == FAILURE_MESSAGE


def test_custom_message_is_kept():
    assert Result.on_failure("Disk full").message == "Disk full"


def test_exception_message_contains_fault():
    fault = ValueError("bad value")
    result = Result.on_exception(fault)

    assert result.outcome is Outcome.EXCEPTION
    assert result.error_type is ErrorType.EXCEPTION_THROWN
    assert result.fault is fault
    assert result.has_fault
    assert result.message == "Operation failed with exception: bad value"


def test_exception_without_fault_becomes_failure():
    result = Result(Outcome.EXCEPTION)

    assert result.outcome is Outcome.FAILURE
    assert result.error_type is ErrorType.FAILURE
    assert result.message == FAILURE_MESSAGE


def test_error_type_is_reconciled_with_outcome():
    assert Result(Outcome.SUCCESS, error_type=ErrorType.NO_DATA).error_type is (
        ErrorType.NONE
    )
    assert Result(Outcome.FAILURE, error_type=ErrorType.NONE).error_type is (
        ErrorType.FAILURE
    )
    assert Result.on_failure(error_type=ErrorType.UNKNOWN).error_type is (
        ErrorType.UNKNOWN
    )


def test_from_bool():
    assert Result.from_bool(True) == Result.on_success()
    assert Result.from_bool(False) == Result.on_failure()


def test_success_without_data_becomes_no_data_failure():
    result = DataResult.on_success(None, "Loaded")

    assert result.outcome is Outcome.FAILURE
    assert result.error_type is ErrorType.NO_DATA
    assert result.message == NO_DATA_MESSAGE
    assert not result.has_data
    assert result.data is None


@pytest.mark.parametrize("value", [0, "", [], False, 0.0])
def test_falsy_values_are_data(value):
    result = DataResult.on_success(value)

    assert result.is_success
    assert result.has_data
    assert result.data == value


def test_payload_is_dropped_for_failures():
    result = DataResult(Outcome.FAILURE, 42, "Nope")

    assert not result.has_data
    assert result.data is None


def test_data_exception_without_fault_becomes_failure():
    result = DataResult(Outcome.EXCEPTION, message="Crashed")

    assert result.outcome is Outcome.FAILURE
    assert result.error_type is ErrorType.FAILURE
    assert result.message == "Crashed"


def test_from_value():
    assert DataResult.from_value(3).unwrap() == 3
    assert DataResult.from_value(None) == DataResult.on_no_data()


def test_unwrap_success():
    assert DataResult.on_success("x").unwrap() == "x"
    assert Result.on_success().unwrap() is None


def test_unwrap_raises_fault():
    fault = KeyError("missing")

    with pytest.raises(KeyError):
        DataResult.on_exception(fault).unwrap()
    with pytest.raises(KeyError):
        Result.on_exception(fault).unwrap()


def test_unwrap_failure():
    with pytest.raises(ResultFailedError, match="Disk full"):
        DataResult.on_failure("Disk full").unwrap()
    with pytest.raises(NoDataError):
        DataResult.on_no_data().unwrap()


def test_to_logical_keeps_state():
    fault = RuntimeError("boom")
    result = DataResult.on_exception(fault, "Crashed").to_logical()

    assert result == Result.on_exception(fault, "Crashed")
    assert DataResult.on_success(1).to_logical() == Result.on_success()
    assert DataResult.on_no_data().to_logical().error_type is ErrorType.NO_DATA


def test_fault_is_dropped_without_exception_outcome():
    fault = ValueError("bad")

    assert Result(Outcome.SUCCESS, fault=fault).fault is None
    assert not Result(Outcome.SUCCESS, fault=fault).has_fault
    assert DataResult(Outcome.FAILURE, fault=fault).fault is None
    assert DataResult(Outcome.SUCCESS, 1, fault=fault).fault is None
    assert DataResult(Outcome.EXCEPTION, fault=fault).fault is fault
