from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, ParamSpec

import attrs

_P = ParamSpec("_P")


@attrs.frozen(repr=False)
class Unit:
    """Value returned by functions that are only called for their side effects.

    All instances of this class are equal.
    """

    def __repr__(self) -> str:
        return "Unit()"


UNIT = Unit()


def unit() -> Unit:
    return UNIT


def to_func(action: Callable[_P, Any]) -> Callable[_P, Unit]:
    """Wrap a side-effect only callable so that it returns :data:`UNIT`.

    Whatever the action returns is discarded.
    """

    @functools.wraps(action)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> Unit:
        action(*args, **kwargs)
        return UNIT

    return wrapper
