from __future__ import annotations

import concurrent.futures
import contextlib
from collections.abc import Awaitable, Callable
from typing import Any, Optional

import attrs


def tap[T](target: T, action: Callable[[T], Any]) -> T:
    """Call ``action`` with ``target`` for its side effects and return ``target``."""

    action(target)
    return target


@attrs.frozen
class Identity[T]:
    """Box holding a single value."""

    value: T

    def map[R](self, func: Callable[[T], R]) -> Identity[R]:
        return Identity(func(self.value))


def using[W, R](
    factory: Callable[[], contextlib.AbstractContextManager[W]],
    operate: Callable[[W], R],
) -> R:
    """Create a resource, use it and release it, even if ``operate`` raises."""

    with factory() as resource:
        return operate(resource)


async def using_async[W, R](
    factory: Callable[[], contextlib.AbstractContextManager[W]],
    operate: Callable[[W], Awaitable[R]],
) -> R:
    with factory() as resource:
        return await operate(resource)


def wait_for[T, R](
    future: concurrent.futures.Future[T],
    operation: Callable[[T], R],
    timeout: Optional[float] = None,
) -> Optional[R]:
    """Apply an operation to the value of a future.

    Returns:
        The output of the operation, or None if the future is not done after
        ``timeout`` seconds.
        If the future raised, the exception is propagated.
    """

    done, _ = concurrent.futures.wait([future], timeout=timeout)
    if not done:
        return None
    return operation(future.result())
