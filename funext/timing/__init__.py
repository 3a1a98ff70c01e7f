"""Bounded-time execution of operations with cooperative cancellation."""

from ._cancellation import CancellationToken
from ._timing import (
    TIMEOUT_MESSAGE,
    Timeout,
    run_blocking_with_timeout_async,
    run_cancellable_with_timeout,
    run_cancellable_with_timeout_async,
    run_logical_with_timeout,
    run_logical_with_timeout_async,
    run_with_timeout,
    run_with_timeout_async,
)

__all__ = [
    "CancellationToken",
    "TIMEOUT_MESSAGE",
    "Timeout",
    "run_blocking_with_timeout_async",
    "run_cancellable_with_timeout",
    "run_cancellable_with_timeout_async",
    "run_logical_with_timeout",
    "run_logical_with_timeout_async",
    "run_with_timeout",
    "run_with_timeout_async",
]
