from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Optional

import attrs

from .._exceptions import with_note
from ..option import NOTHING, Option, Some, from_optional
from ..results import DataResult, Result

logger = logging.getLogger(__name__)


@attrs.frozen
class Try[T]:
    """Outcome of a computation that might have raised an exception.

    A try holds either the value returned by the computation or the exception it
    raised, never both.
    It can hold neither if the computation returned None.

    Instances are created by :func:`try_catch` and :func:`try_catch_async`.
    """

    _value: Option[T]
    _fault: Option[Exception]

    @property
    def value(self) -> Option[T]:
        return self._value

    @property
    def fault(self) -> Option[Exception]:
        return self._fault

    @property
    def is_exception(self) -> bool:
        return self._fault.is_some()

    @property
    def is_data(self) -> bool:
        return self._value.is_some()

    def to_result(self) -> Result:
        """Convert the try into a result without data.

        A captured fault gives an exception outcome.
        If the computation returned a result, it is returned as is, and a data
        result loses its payload.
        A boolean is converted with :meth:`Result.from_bool`.
        Any other normal completion gives a success.
        """

        if isinstance(self._fault, Some):
            return Result.on_exception(self._fault.value)
        value = self._value.unwrap_or(None)
        if isinstance(value, Result):
            return value
        if isinstance(value, DataResult):
            return value.to_logical()
        if isinstance(value, bool):
            return Result.from_bool(value)
        return Result.on_success()

    def to_data_result(self) -> DataResult[T]:
        """Convert the try into a data result.

        A captured fault gives an exception outcome, a missing value gives a
        failure with no data.
        If the computation returned a data result, it is returned as is.
        """

        if isinstance(self._fault, Some):
            return DataResult.on_exception(self._fault.value)
        value = self._value.unwrap_or(None)
        if isinstance(value, DataResult):
            return value
        return DataResult.from_value(value)


def _identity(error: Exception) -> Exception:
    return error


def _capture[T](
    error: Exception, on_fault: Callable[[Exception], Exception]
) -> Try[T]:
    try:
        fault = on_fault(error)
    except Exception as transform_error:
        fault = with_note(
            transform_error, f"Raised while handling {error!r} in try_catch"
        )
    else:
        if not isinstance(fault, Exception):
            fault = with_note(
                error, f"Fault handler returned {fault!r} instead of an exception"
            )
    logger.debug("Captured fault %r", fault)
    return Try(NOTHING, Some(fault))


def try_catch[T](
    operation: Callable[[], T],
    on_fault: Callable[[Exception], Exception] = _identity,
) -> Try[T]:
    """Run an operation and capture its outcome.

    Args:
        operation: The computation to run.
        on_fault: Called with the exception raised by the operation, if any.
            It can be used to wrap or replace the exception before it is stored.
            If it raises itself, the exception it raised is stored instead.
            If it returns something that is not an exception, the original
            exception is stored.

    Returns:
        A try holding the value returned by the operation or the captured fault.
        This function never raises for :class:`Exception` subclasses.
        Other exceptions like :class:`KeyboardInterrupt` are propagated.
    """

    try:
        value = operation()
    except Exception as error:
        return _capture(error, on_fault)
    return Try(from_optional(value), NOTHING)


async def try_catch_async[T](
    operation: Callable[[], Awaitable[T]],
    on_fault: Callable[[Exception], Exception] = _identity,
) -> Try[T]:
    """Asynchronous version of :func:`try_catch`.

    Cancellation of the calling task is not captured.
    """

    try:
        value = await operation()
    except Exception as error:
        return _capture(error, on_fault)
    return Try(from_optional(value), NOTHING)


def as_result(operation: Callable[[], Any]) -> Result:
    """Run an operation and convert its outcome with :meth:`Try.to_result`."""

    return try_catch(operation).to_result()


async def as_result_async(operation: Callable[[], Awaitable[Any]]) -> Result:
    return (await try_catch_async(operation)).to_result()


def as_data_result[T](operation: Callable[[], Optional[T]]) -> DataResult[T]:
    """Run an operation and convert its outcome with :meth:`Try.to_data_result`."""

    return try_catch(operation).to_data_result()


async def as_data_result_async[T](
    operation: Callable[[], Awaitable[Optional[T]]],
) -> DataResult[T]:
    return (await try_catch_async(operation)).to_data_result()


def resolve_try[T](result: DataResult[Try[T]]) -> DataResult[T]:
    """Flatten a data result holding a try.

    If the outer result did not succeed, its state is propagated.
    Otherwise, the inner try is converted with :meth:`Try.to_data_result`.
    """

    return result.bind(lambda inner: inner.to_data_result())
