"""Kleisli composition of functions returning results."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

from ._result import DataResult, Result


@overload
def fish[**P, B, C](
    before: Callable[P, DataResult[B]], after: Callable[[B], DataResult[C]]
) -> Callable[P, DataResult[C]]: ...


@overload
def fish[**P](
    before: Callable[P, Result], after: Callable[[Result], Result]
) -> Callable[P, Result]: ...


def fish(before: Callable[..., Any], after: Callable[[Any], Any]) -> Callable[..., Any]:
    """Compose two functions returning results.

    The composed function calls ``before`` with its arguments and, only if the
    result is a success, feeds it to ``after``: the payload for data results and
    the result itself for logical results.
    If ``before`` does not succeed, its outcome, message and fault are returned
    without calling ``after``.
    """

    def composed(*args, **kwargs):
        return before(*args, **kwargs).bind(after)

    return composed


@overload
def fish_async[**P, B, C](
    before: Callable[P, Awaitable[DataResult[B]]],
    after: Callable[[B], Awaitable[DataResult[C]]],
) -> Callable[P, Awaitable[DataResult[C]]]: ...


@overload
def fish_async[**P](
    before: Callable[P, Awaitable[Result]],
    after: Callable[[Result], Awaitable[Result]],
) -> Callable[P, Awaitable[Result]]: ...


def fish_async(
    before: Callable[..., Awaitable[Any]], after: Callable[[Any], Awaitable[Any]]
) -> Callable[..., Awaitable[Any]]:
    """Asynchronous version of :func:`fish`."""

    async def composed(*args, **kwargs):
        result = await before(*args, **kwargs)
        return await result.bind_async(after)

    return composed


@overload
async def bind_awaitable[T, R](
    pending: Awaitable[DataResult[T]], func: Callable[[T], Awaitable[DataResult[R]]]
) -> DataResult[R]: ...


@overload
async def bind_awaitable(
    pending: Awaitable[Result], func: Callable[[Result], Awaitable[Result]]
) -> Result: ...


async def bind_awaitable(pending, func):
    """Wait for a pending result, then bind an asynchronous continuation to it."""

    result = await pending
    return await result.bind_async(func)
