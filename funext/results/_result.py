from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Optional, Self, assert_never

import attrs

from ._outcome import Outcome, ErrorType, reconcile_error_type, default_message
from .._exceptions import NoDataError, ResultFailedError
from ..option import NOTHING, Option, from_optional


@attrs.frozen(init=False)
class Result:
    """Outcome of an operation that does not produce data.

    A result is built through its factories: :meth:`on_success`,
    :meth:`on_failure`, :meth:`on_exception` and :meth:`from_bool`.

    The state of a result is corrected at construction: an exception outcome
    requested without a fault becomes a failure, a fault given with any other
    outcome is dropped, and a missing message is replaced by the default message
    of the outcome.

    A result is truthy if and only if it is a success.

    Attributes:
        outcome: How the operation concluded.
        message: Human-readable description of the outcome, never empty.
        fault: The exception captured when the outcome is
            :attr:`Outcome.EXCEPTION`.
        error_type: Refinement of the outcome, see :class:`ErrorType`.
    """

    outcome: Outcome
    message: str
    fault: Optional[Exception]
    error_type: ErrorType

    def __init__(
        self,
        outcome: Outcome,
        message: Optional[str] = None,
        fault: Optional[Exception] = None,
        error_type: Optional[ErrorType] = None,
    ) -> None:
        if outcome is Outcome.EXCEPTION and fault is None:
            outcome = Outcome.FAILURE
        if outcome is not Outcome.EXCEPTION:
            fault = None
        error_type = reconcile_error_type(outcome, error_type)
        self.__attrs_init__(
            outcome,
            message or default_message(outcome, error_type, fault),
            fault,
            error_type,
        )

    @classmethod
    def on_success(cls, message: Optional[str] = None) -> Result:
        return cls(Outcome.SUCCESS, message)

    @classmethod
    def on_failure(
        cls, message: Optional[str] = None, error_type: ErrorType = ErrorType.FAILURE
    ) -> Result:
        return cls(Outcome.FAILURE, message, error_type=error_type)

    @classmethod
    def on_exception(cls, fault: Exception, message: Optional[str] = None) -> Result:
        return cls(Outcome.EXCEPTION, message, fault)

    @classmethod
    def from_bool(cls, flag: bool) -> Result:
        """Convert a boolean flag into a result.

        True gives a success and False a failure, both with default messages.
        """

        return cls.on_success() if flag else cls.on_failure()

    @property
    def is_success(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.outcome is Outcome.FAILURE

    @property
    def is_exception(self) -> bool:
        return self.outcome is Outcome.EXCEPTION

    @property
    def has_fault(self) -> bool:
        return self.fault is not None

    def __bool__(self) -> bool:
        return self.is_success

    def unwrap(self) -> None:
        """Raise if the result is not a success.

        Raises:
            The captured fault if the outcome is an exception.
            ResultFailedError: If the outcome is a failure.
        """

        _raise_unless_success(self)

    def bind(self, func: Callable[[Result], Result]) -> Result:
        """Chain an operation after a successful result.

        The continuation receives this result and is only called if it is a
        success.
        Otherwise, this result is returned unchanged.
        """

        if self.is_success:
            return func(self)
        return self

    async def bind_async(self, func: Callable[[Result], Awaitable[Result]]) -> Result:
        if self.is_success:
            return await func(self)
        return self

    def bind_data[R](self, func: Callable[[Result], DataResult[R]]) -> DataResult[R]:
        """Chain an operation producing data after a successful result.

        If this result is not a success, the continuation is not called and a data
        result with the same outcome, message, fault and error type is returned.
        """

        if self.is_success:
            return func(self)
        return DataResult(self.outcome, None, self.message, self.fault, self.error_type)

    async def bind_data_async[R](
        self, func: Callable[[Result], Awaitable[DataResult[R]]]
    ) -> DataResult[R]:
        if self.is_success:
            return await func(self)
        return DataResult(self.outcome, None, self.message, self.fault, self.error_type)

    def match[R](
        self,
        on_success: Callable[[Result], R],
        on_failure: Callable[[Result], R],
        on_exception: Optional[Callable[[Result], R]] = None,
    ) -> R:
        """Dispatch on the outcome of the result.

        If no exception handler is provided, the failure handler is called for
        exception outcomes.
        """

        match self.outcome:
            case Outcome.SUCCESS:
                return on_success(self)
            case Outcome.FAILURE:
                return on_failure(self)
            case Outcome.EXCEPTION:
                return (on_exception or on_failure)(self)
            case other:
                assert_never(other)

    def tap(
        self,
        on_success: Optional[Callable[[Result], Any]] = None,
        on_failure: Optional[Callable[[Result], Any]] = None,
    ) -> Self:
        """Run a side effect depending on the outcome and return the same result."""

        _tap(self, on_success, on_failure)
        return self


@attrs.frozen(init=False)
class DataResult[T]:
    """Outcome of an operation that produces data on success.

    The state of a data result is corrected at construction, in this order:

    * a success requested without data becomes a failure with error type
      :attr:`ErrorType.NO_DATA`,
    * an exception outcome requested without a fault becomes a failure,
    * a fault given with an outcome other than exception is dropped,
    * a missing message is replaced by the default message of the outcome.

    This makes it impossible to build a success that holds no data, or an exception
    outcome that holds no exception.
    The payload is dropped for any outcome other than success.

    Only None is considered as missing data, falsy values like ``0`` or ``""`` are
    valid payloads.

    Attributes:
        outcome: How the operation concluded.
        message: Human-readable description of the outcome, never empty.
        fault: The exception captured when the outcome is
            :attr:`Outcome.EXCEPTION`.
        error_type: Refinement of the outcome, see :class:`ErrorType`.
    """

    _data: Option[T]
    outcome: Outcome
    message: str
    fault: Optional[Exception]
    error_type: ErrorType

    def __init__(
        self,
        outcome: Outcome,
        data: Optional[T] = None,
        message: Optional[str] = None,
        fault: Optional[Exception] = None,
        error_type: Optional[ErrorType] = None,
    ) -> None:
        payload = from_optional(data) if outcome is Outcome.SUCCESS else NOTHING
        if outcome is Outcome.SUCCESS and payload.is_nothing():
            outcome = Outcome.FAILURE
            error_type = ErrorType.NO_DATA
            message = None
        if outcome is Outcome.EXCEPTION and fault is None:
            outcome = Outcome.FAILURE
        if outcome is not Outcome.EXCEPTION:
            fault = None
        error_type = reconcile_error_type(outcome, error_type)
        self.__attrs_init__(
            payload,
            outcome,
            message or default_message(outcome, error_type, fault),
            fault,
            error_type,
        )

    @classmethod
    def on_success(cls, data: Optional[T], message: Optional[str] = None) -> Self:
        return cls(Outcome.SUCCESS, data, message)

    @classmethod
    def on_failure(
        cls, message: Optional[str] = None, error_type: ErrorType = ErrorType.FAILURE
    ) -> Self:
        return cls(Outcome.FAILURE, None, message, error_type=error_type)

    @classmethod
    def on_no_data(cls, message: Optional[str] = None) -> Self:
        return cls(Outcome.FAILURE, None, message, error_type=ErrorType.NO_DATA)

    @classmethod
    def on_exception(cls, fault: Exception, message: Optional[str] = None) -> Self:
        return cls(Outcome.EXCEPTION, None, message, fault)

    @classmethod
    def from_value(cls, value: Optional[T]) -> Self:
        """Convert a plain value into a data result.

        None gives a failure with error type :attr:`ErrorType.NO_DATA`, any other
        value gives a success holding it.
        """

        if value is None:
            return cls.on_no_data()
        return cls.on_success(value)

    @property
    def data(self) -> Optional[T]:
        """The payload of the result, or None if there is none."""

        return self._data.unwrap_or(None)

    @property
    def data_option(self) -> Option[T]:
        return self._data

    @property
    def has_data(self) -> bool:
        return self._data.is_some()

    @property
    def is_success(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.outcome is Outcome.FAILURE

    @property
    def is_exception(self) -> bool:
        return self.outcome is Outcome.EXCEPTION

    @property
    def has_fault(self) -> bool:
        return self.fault is not None

    def __bool__(self) -> bool:
        return self.is_success

    def unwrap(self) -> T:
        """Return the payload of a successful result.

        Raises:
            The captured fault if the outcome is an exception.
            NoDataError: If the result failed because no data was produced.
            ResultFailedError: If the outcome is any other failure.
        """

        _raise_unless_success(self)
        return self._data.unwrap()

    def to_logical(self) -> Result:
        """Drop the payload and keep the outcome, message, fault and error type."""

        return Result(self.outcome, self.message, self.fault, self.error_type)

    def _propagate[R](self) -> DataResult[R]:
        return DataResult(self.outcome, None, self.message, self.fault, self.error_type)

    def bind[R](self, func: Callable[[T], DataResult[R]]) -> DataResult[R]:
        """Chain an operation on the payload of a successful result.

        If this result is not a success, the continuation is not called and a new
        result with the same outcome, message, fault and error type is returned.
        """

        if self.is_success:
            return func(self._data.unwrap())
        return self._propagate()

    async def bind_async[R](
        self, func: Callable[[T], Awaitable[DataResult[R]]]
    ) -> DataResult[R]:
        if self.is_success:
            return await func(self._data.unwrap())
        return self._propagate()

    def bind_logical(self, func: Callable[[T], Result]) -> Result:
        """Chain an operation that does not produce data on the payload."""

        if self.is_success:
            return func(self._data.unwrap())
        return self.to_logical()

    async def bind_logical_async(
        self, func: Callable[[T], Awaitable[Result]]
    ) -> Result:
        if self.is_success:
            return await func(self._data.unwrap())
        return self.to_logical()

    def map[R](self, func: Callable[[T], Optional[R]]) -> DataResult[R]:
        """Transform the payload of a successful result.

        If the transformation returns None, the new result is a failure with error
        type :attr:`ErrorType.NO_DATA`.
        Other outcomes are passed through.
        """

        if self.is_success:
            return DataResult.on_success(func(self._data.unwrap()))
        return self._propagate()

    async def map_async[R](
        self, func: Callable[[T], Awaitable[Optional[R]]]
    ) -> DataResult[R]:
        if self.is_success:
            return DataResult.on_success(await func(self._data.unwrap()))
        return self._propagate()

    def match[R](
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[DataResult[T]], R],
        on_exception: Optional[Callable[[DataResult[T]], R]] = None,
    ) -> R:
        """Dispatch on the outcome of the result.

        The success handler receives the payload, the other handlers receive the
        result itself.
        If no exception handler is provided, the failure handler is called for
        exception outcomes.
        """

        match self.outcome:
            case Outcome.SUCCESS:
                return on_success(self._data.unwrap())
            case Outcome.FAILURE:
                return on_failure(self)
            case Outcome.EXCEPTION:
                return (on_exception or on_failure)(self)
            case other:
                assert_never(other)

    def tap(
        self,
        on_success: Optional[Callable[[DataResult[T]], Any]] = None,
        on_failure: Optional[Callable[[DataResult[T]], Any]] = None,
    ) -> Self:
        """Run a side effect depending on the outcome and return the same result."""

        _tap(self, on_success, on_failure)
        return self


def _raise_unless_success(result: Result | DataResult[Any]) -> None:
    match result.outcome:
        case Outcome.SUCCESS:
            return
        case Outcome.FAILURE:
            if result.error_type is ErrorType.NO_DATA:
                raise NoDataError(result.message)
            raise ResultFailedError(result.message)
        case Outcome.EXCEPTION:
            assert result.fault is not None
            raise result.fault
        case other:
            assert_never(other)


def _tap(result, on_success, on_failure) -> None:
    if result.is_success:
        if on_success is not None:
            on_success(result)
    elif on_failure is not None:
        on_failure(result)
