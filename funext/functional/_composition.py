from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any


def before[**P, T, R](first: Callable[P, T], then: Callable[[T], R]) -> Callable[P, R]:
    """Compose two functions, calling ``first`` and feeding its output to ``then``."""

    def composed(*args: P.args, **kwargs: P.kwargs) -> R:
        return then(first(*args, **kwargs))

    return composed


def after[**P, T, R](then: Callable[[T], R], first: Callable[P, T]) -> Callable[P, R]:
    """Same as :func:`before` with the arguments swapped."""

    return before(first, then)


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose single-argument functions from left to right.

    ``compose(f, g, h)(x)`` is ``h(g(f(x)))``.
    Without any function, the identity is returned.
    """

    def composed(value):
        return functools.reduce(lambda acc, func: func(acc), functions, value)

    return composed


def apply[R](func: Callable[..., R], *args: Any) -> Callable[..., R]:
    """Fix the leading positional arguments of a function."""

    return functools.partial(func, *args)
