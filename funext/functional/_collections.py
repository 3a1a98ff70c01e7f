from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator


def fold[T, R](items: Iterable[T], seed: R, func: Callable[[T, R], R]) -> R:
    """Reduce items from left to right.

    ``func`` is called with the current item and the accumulated value.
    """

    result = seed
    for item in items:
        result = func(item, result)
    return result


def foldi[T, R](items: Iterable[T], seed: R, func: Callable[[int, T, R], R]) -> R:
    """Same as :func:`fold`, but ``func`` also receives the index of the item."""

    result = seed
    for index, item in enumerate(items):
        result = func(index, item, result)
    return result


async def fold_async[T, R](
    items: Awaitable[Iterable[T]], seed: R, func: Callable[[T, R], R]
) -> R:
    return fold(await items, seed, func)


def mapi[T, R](items: Iterable[T], func: Callable[[int, T], R]) -> Iterator[R]:
    for index, item in enumerate(items):
        yield func(index, item)


def flat_map[T, R](items: Iterable[T], func: Callable[[T], Iterable[R]]) -> Iterator[R]:
    for item in items:
        yield from func(item)
