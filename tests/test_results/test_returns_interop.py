import pytest
from returns.maybe import Nothing, Some
from returns.result import Failure, Success

from funext import NoDataError, ResultFailedError
from funext.option import NOTHING, Some as FunextSome
from funext.results import (
    DataResult,
    ErrorType,
    from_maybe,
    from_returns,
    to_maybe,
    to_returns,
)


def test_success_to_returns():
    assert to_returns(DataResult.on_success(1)) == Success(1)


def test_exception_to_returns():
    fault = ValueError("bad")

    assert to_returns(DataResult.on_exception(fault)) == Failure(fault)


def test_failure_to_returns():
    container = to_returns(DataResult.on_failure("Disk full"))

    error = container.failure()
    assert type(error) is ResultFailedError
    assert str(error) == "Disk full"
    assert isinstance(to_returns(DataResult.on_no_data()).failure(), NoDataError)


@pytest.mark.parametrize(
    "result",
    [
        DataResult.on_success("data"),
        DataResult.on_failure("Disk full"),
        DataResult.on_no_data("Nothing here"),
    ],
)
def test_round_trip(result):
    assert from_returns(to_returns(result)) == result


def test_exception_round_trip_keeps_fault():
    fault = KeyError("id")

    result = from_returns(to_returns(DataResult.on_exception(fault)))

    assert result.fault is fault
    assert result.error_type is ErrorType.EXCEPTION_THROWN


def test_failure_with_plain_value():
    result = from_returns(Failure("not found"))

    assert result.is_failure
    assert result.message == "not found"


def test_success_holding_none():
    assert from_returns(Success(None)).error_type is ErrorType.NO_DATA


def test_from_returns_rejects_other_containers():
    with pytest.raises(TypeError):
        from_returns(Some(1))


def test_maybe():
    assert to_maybe(FunextSome(1)) == Some(1)
    assert to_maybe(NOTHING) == Nothing
    assert from_maybe(Some(2)) == FunextSome(2)
    assert from_maybe(Nothing) == NOTHING
