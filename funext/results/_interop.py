"""Conversions between funext containers and the ones of the returns library."""

from __future__ import annotations

from typing import Any, assert_never

from returns.maybe import Maybe, Nothing as ReturnsNothing, Some as ReturnsSome
from returns.result import Failure, Result as ReturnsResult, Success

from ._outcome import ErrorType, Outcome
from ._result import DataResult
from .._exceptions import NoDataError, ResultFailedError
from ..option import Option, Some, from_optional


def to_returns[T](result: DataResult[T]) -> ReturnsResult[T, Exception]:
    """Convert a data result into a returns result.

    An exception outcome becomes a failure holding the captured fault.
    Other failures hold a :class:`ResultFailedError`, or a :class:`NoDataError` if
    no data was produced, with the message of the result.
    """

    match result.outcome:
        case Outcome.SUCCESS:
            return Success(result.unwrap())
        case Outcome.EXCEPTION:
            assert result.fault is not None
            return Failure(result.fault)
        case Outcome.FAILURE:
            if result.error_type is ErrorType.NO_DATA:
                return Failure(NoDataError(result.message))
            return Failure(ResultFailedError(result.message))
        case other:
            assert_never(other)


def from_returns[T](container: ReturnsResult[T, Any]) -> DataResult[T]:
    """Convert a returns result into a data result.

    A success holding None becomes a failure with no data.
    A failure holding an exception becomes an exception outcome, except for the
    errors produced by :func:`to_returns` which give back a failure.
    Any other failure value becomes a failure whose message is the string
    representation of the value.
    """

    match container:
        case Success(value):
            return DataResult.from_value(value)
        case Failure(NoDataError() as error):
            return DataResult.on_no_data(str(error))
        case Failure(ResultFailedError() as error):
            return DataResult.on_failure(str(error))
        case Failure(Exception() as error):
            return DataResult.on_exception(error)
        case Failure(error):
            return DataResult.on_failure(str(error))
        case other:
            raise TypeError(f"Expected a returns result, got {other!r}")


def to_maybe[T](option: Option[T]) -> Maybe[T]:
    if isinstance(option, Some):
        return ReturnsSome(option.value)
    return ReturnsNothing


def from_maybe[T](maybe: Maybe[T]) -> Option[T]:
    return from_optional(maybe.value_or(None))
