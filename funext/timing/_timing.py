"""Run operations within a time limit.

The wrappers in this module race an operation against a deadline and fold the
outcome of the race into a result:

* if the operation completes first, its value is wrapped as a success, or its own
  result is returned if it already returns one,
* if the operation raises first, the result holds the root cause of the exception,
* if the deadline is reached first, the operation is asked to stop through its
  :class:`CancellationToken` and the result is a failure with the message
  :data:`TIMEOUT_MESSAGE`.

Synchronous wrappers run the operation on a daemon thread of its own and block
the calling thread until the race is resolved, so that operations left running after
their timeout never delay other calls.
A plain synchronous operation cannot be interrupted: after the timeout is reported
it keeps running in its worker thread until it returns.
Operations that accept a cancellation token can observe the request and stop early.

Asynchronous wrappers use structured concurrency with anyio: the operation is
cancelled at its next checkpoint when the deadline is reached.
"""

from __future__ import annotations

import concurrent.futures
import datetime
import logging
import math
import threading
from collections.abc import Awaitable, Callable
from typing import Any, assert_never

import anyio
import anyio.to_thread
import attrs

from ._cancellation import CancellationToken
from .._exceptions import root_cause
from ..results import DataResult, Result

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "Timeout reached"

type Timeout = float | datetime.timedelta


@attrs.frozen
class _Completed[R]:
    value: R


@attrs.frozen
class _Faulted:
    fault: Exception


@attrs.frozen
class _TimedOut:
    pass


type _RaceOutcome[R] = _Completed[R] | _Faulted | _TimedOut


def _to_seconds(timeout: Timeout) -> float:
    if isinstance(timeout, datetime.timedelta):
        seconds = timeout.total_seconds()
    else:
        seconds = float(timeout)
    if math.isnan(seconds) or seconds < 0:
        raise ValueError(f"Timeout must be non-negative, got {seconds} s")
    return seconds


def _describe(operation: Callable[..., Any]) -> str:
    return getattr(operation, "__qualname__", repr(operation))


def _as_fault(error: BaseException) -> Exception:
    error = root_cause(error)
    if not isinstance(error, Exception):
        raise error
    return error


def _start_in_thread[R](
    operation: Callable[..., R], *args: Any
) -> concurrent.futures.Future[R]:
    """Run an operation on a new daemon thread.

    The returned future is already running, it is completed with the value or the
    exception of the operation.
    """

    future: concurrent.futures.Future[R] = concurrent.futures.Future()
    future.set_running_or_notify_cancel()

    def run() -> None:
        try:
            value = operation(*args)
        except BaseException as error:
            future.set_exception(error)
        else:
            future.set_result(value)

    thread = threading.Thread(
        target=run, name=f"funext-timeout-{_describe(operation)}", daemon=True
    )
    thread.start()
    return future


def _race_in_worker[R](
    operation: Callable[..., R],
    timeout: float,
    token: CancellationToken,
    cancellable: bool,
) -> _RaceOutcome[R]:
    args = (token,) if cancellable else ()
    future = _start_in_thread(operation, *args)
    try:
        done, _ = concurrent.futures.wait([future], timeout=timeout)
        if not done:
            if cancellable:
                logger.debug(
                    "Deadline of %s s reached, cancelling %s",
                    timeout,
                    _describe(operation),
                )
            else:
                logger.warning(
                    "Deadline of %s s reached, %s is left running in the background",
                    timeout,
                    _describe(operation),
                )
            return _TimedOut()
        error = future.exception()
        if error is not None:
            return _Faulted(_as_fault(error))
        return _Completed(future.result())
    finally:
        token.cancel()


async def _race_async[R](
    operation: Callable[[], Awaitable[R]],
    timeout: float,
    token: CancellationToken,
) -> _RaceOutcome[R]:
    try:
        with anyio.move_on_after(timeout):
            try:
                value = await operation()
            except Exception as error:
                return _Faulted(_as_fault(error))
            return _Completed(value)
        logger.debug(
            "Deadline of %s s reached, cancelled %s", timeout, _describe(operation)
        )
        return _TimedOut()
    finally:
        token.cancel()


def _to_data_result(outcome: _RaceOutcome[Any]) -> DataResult[Any]:
    match outcome:
        case _Completed(value=DataResult() as result):
            return result
        case _Completed(value=value):
            return DataResult.from_value(value)
        case _Faulted(fault=fault):
            return DataResult.on_exception(fault)
        case _TimedOut():
            return DataResult.on_failure(TIMEOUT_MESSAGE)
        case other:
            assert_never(other)


def _to_result(outcome: _RaceOutcome[Any]) -> Result:
    match outcome:
        case _Completed(value=Result() as result):
            return result
        case _Completed(value=DataResult() as result):
            return result.to_logical()
        case _Completed(value=bool() as flag):
            return Result.from_bool(flag)
        case _Completed():
            return Result.on_success()
        case _Faulted(fault=fault):
            return Result.on_exception(fault)
        case _TimedOut():
            return Result.on_failure(TIMEOUT_MESSAGE)
        case other:
            assert_never(other)


def run_with_timeout[R](
    operation: Callable[[], R | DataResult[R]], timeout: Timeout
) -> DataResult[R]:
    """Run a blocking operation within a time limit.

    Warning:
        The operation cannot be interrupted.
        If it does not finish in time, it keeps running in a worker thread after the
        timeout is reported.
        Use :func:`run_cancellable_with_timeout` for operations that can stop early.

    Args:
        operation: Called without arguments on a worker thread.
            It can return a plain value or a data result.
        timeout: Time limit, in seconds if given as a number.

    Returns:
        The value returned by the operation wrapped in a success, the data result
        returned by the operation, an exception outcome holding the root cause of
        an exception raised by the operation, or a failure if the timeout elapsed.
    """

    seconds = _to_seconds(timeout)
    outcome = _race_in_worker(
        operation, seconds, CancellationToken(), cancellable=False
    )
    return _to_data_result(outcome)


def run_cancellable_with_timeout[R](
    operation: Callable[[CancellationToken], R | DataResult[R]], timeout: Timeout
) -> DataResult[R]:
    """Run a cancellation-aware blocking operation within a time limit.

    The operation receives a token that is cancelled when the timeout elapses.
    It is expected to check the token regularly and stop once it is cancelled.

    See :func:`run_with_timeout` for the possible results.
    """

    seconds = _to_seconds(timeout)
    outcome = _race_in_worker(operation, seconds, CancellationToken(), cancellable=True)
    return _to_data_result(outcome)


def run_logical_with_timeout(
    operation: Callable[[], bool | Result | None], timeout: Timeout
) -> Result:
    """Run a blocking operation that does not produce data within a time limit.

    The operation can return a boolean flag, a result, or nothing.
    The same limitations as :func:`run_with_timeout` apply.
    """

    seconds = _to_seconds(timeout)
    outcome = _race_in_worker(
        operation, seconds, CancellationToken(), cancellable=False
    )
    return _to_result(outcome)


async def run_with_timeout_async[R](
    operation: Callable[[], Awaitable[R | DataResult[R]]], timeout: Timeout
) -> DataResult[R]:
    """Run an asynchronous operation within a time limit.

    If the timeout elapses, the operation is cancelled at its next checkpoint.

    See :func:`run_with_timeout` for the possible results.
    """

    seconds = _to_seconds(timeout)
    outcome = await _race_async(operation, seconds, CancellationToken())
    return _to_data_result(outcome)


async def run_cancellable_with_timeout_async[R](
    operation: Callable[[CancellationToken], Awaitable[R | DataResult[R]]],
    timeout: Timeout,
) -> DataResult[R]:
    """Run a cancellation-aware asynchronous operation within a time limit.

    The token passed to the operation is cancelled once the race is resolved, so
    that work it shared with other tasks or threads can stop as well.
    """

    seconds = _to_seconds(timeout)
    token = CancellationToken()
    outcome = await _race_async(lambda: operation(token), seconds, token)
    return _to_data_result(outcome)


async def run_logical_with_timeout_async(
    operation: Callable[[], Awaitable[bool | Result | None]], timeout: Timeout
) -> Result:
    """Asynchronous version of :func:`run_logical_with_timeout`."""

    seconds = _to_seconds(timeout)
    outcome = await _race_async(operation, seconds, CancellationToken())
    return _to_result(outcome)


async def run_blocking_with_timeout_async[R](
    operation: Callable[[CancellationToken], R | DataResult[R]], timeout: Timeout
) -> DataResult[R]:
    """Run a cancellation-aware blocking operation in a worker thread.

    The calling task is suspended, not blocked, while the operation runs.
    If the timeout elapses, the worker thread is abandoned and the token is
    cancelled to let the operation stop.
    """

    seconds = _to_seconds(timeout)
    token = CancellationToken()

    async def run_in_thread() -> R | DataResult[R]:
        return await anyio.to_thread.run_sync(
            operation, token, abandon_on_cancel=True
        )

    outcome = await _race_async(run_in_thread, seconds, token)
    return _to_data_result(outcome)
