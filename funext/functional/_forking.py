from __future__ import annotations

import concurrent.futures
from collections.abc import Callable

from .._worker_pool import get_worker_pool


def fork[T, O, R](
    target: T, finalize: Callable[[list[O]], R], *prongs: Callable[[T], O]
) -> R:
    """Apply several functions to the same value in parallel and join the outputs.

    The prongs run on the shared worker pool.
    ``finalize`` receives their outputs in the order the prongs were given.
    If a prong raises, the exception is propagated once all prongs are done.

    Warning:
        Forking from a prong of another fork can deadlock if the worker pool has no
        free thread left.
    """

    return fork_all(finalize, *(_bind_target(prong, target) for prong in prongs))


def fork_all[O, R](finalize: Callable[[list[O]], R], *prongs: Callable[[], O]) -> R:
    """Call several functions in parallel and join their outputs."""

    futures = [get_worker_pool().submit(prong) for prong in prongs]
    concurrent.futures.wait(futures)
    return finalize([future.result() for future in futures])


def _bind_target[T, O](prong: Callable[[T], O], target: T) -> Callable[[], O]:
    return lambda: prong(target)


def validate[T](target: T, *predicates: Callable[[T], bool]) -> bool:
    """Check that a value satisfies all predicates.

    Predicates must not have side effects: they are not guaranteed to be all
    evaluated, nor in any particular order.
    Without predicates, the value is valid.
    """

    return all(predicate(target) for predicate in predicates)
