from __future__ import annotations

import tblib.pickling_support


def with_note[E: BaseException](exc: E, note: str) -> E:
    """Add a note to an exception."""

    exc.add_note(note)
    return exc


def root_cause(error: BaseException) -> BaseException:
    """Return the innermost fault of an error.

    Exception groups that wrap a single exception are unwrapped recursively.
    Groups containing several exceptions, and chained causes, are left untouched
    since the outer error is the one that describes the failure.
    """

    while isinstance(error, BaseExceptionGroup) and len(error.exceptions) == 1:
        error = error.exceptions[0]
    return error


@tblib.pickling_support.install
class ResultFailedError(RuntimeError):
    """Raised when unwrapping a result that did not succeed.

    The message of the error is the message of the result.
    """

    pass


@tblib.pickling_support.install
class NoDataError(ResultFailedError):
    """Raised when accessing a payload that is not present.

    This is raised when unwrapping an empty option, or a result that failed because
    no data was produced.
    """

    pass


@tblib.pickling_support.install
class OperationCancelledError(RuntimeError):
    """Raised by an operation that observed a cancellation request.

    Cooperative operations call
    :meth:`funext.timing.CancellationToken.raise_if_cancellation_requested` at their
    loop boundaries, which raises this error once cancellation was requested.
    """

    pass
