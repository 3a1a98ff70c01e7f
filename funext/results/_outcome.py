from __future__ import annotations

import enum
from typing import Optional, assert_never

SUCCESS_MESSAGE = "Operation successful"
FAILURE_MESSAGE = "Operation failed"
NO_DATA_MESSAGE = "No data"


class Outcome(enum.Enum):
    """How an operation concluded."""

    SUCCESS = "success"
    FAILURE = "failure"
    EXCEPTION = "exception"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"


class ErrorType(enum.Enum):
    """Refines the reason of a result.

    The error type is always consistent with the outcome of the result that carries
    it:

    * :attr:`Outcome.SUCCESS` goes with :attr:`NONE`,
    * :attr:`Outcome.EXCEPTION` goes with :attr:`EXCEPTION_THROWN`,
    * :attr:`Outcome.FAILURE` goes with :attr:`FAILURE`, :attr:`NO_DATA` or
      :attr:`UNKNOWN`.
    """

    NONE = "none"
    FAILURE = "failure"
    NO_DATA = "no_data"
    EXCEPTION_THROWN = "exception_thrown"
    UNKNOWN = "unknown"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"


_FAILURE_ERROR_TYPES = frozenset({ErrorType.FAILURE, ErrorType.NO_DATA, ErrorType.UNKNOWN})


def reconcile_error_type(outcome: Outcome, requested: Optional[ErrorType]) -> ErrorType:
    match outcome:
        case Outcome.SUCCESS:
            return ErrorType.NONE
        case Outcome.EXCEPTION:
            return ErrorType.EXCEPTION_THROWN
        case Outcome.FAILURE:
            if requested in _FAILURE_ERROR_TYPES:
                return requested
            return ErrorType.FAILURE
        case other:
            assert_never(other)


def default_message(
    outcome: Outcome, error_type: ErrorType, fault: Optional[Exception]
) -> str:
    match outcome:
        case Outcome.SUCCESS:
            return SUCCESS_MESSAGE
        case Outcome.FAILURE:
            if error_type is ErrorType.NO_DATA:
                return NO_DATA_MESSAGE
            return FAILURE_MESSAGE
        case Outcome.EXCEPTION:
            return f"Operation failed with exception: {fault}"
        case other:
            assert_never(other)
