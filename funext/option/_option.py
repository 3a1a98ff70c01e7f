from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal, Never

import attrs
from typing_extensions import TypeIs

from .._exceptions import NoDataError


@attrs.frozen(repr=False)
class Some[T]:
    value: T

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[D](self, default: D) -> T:
        return self.value

    def map[R](self, func: Callable[[T], R]) -> Option[R]:
        return from_optional(func(self.value))

    def bind[R](self, func: Callable[[T], Option[R]]) -> Option[R]:
        return func(self.value)

    def match[R](self, on_some: Callable[[T], R], on_nothing: Callable[[], R]) -> R:
        return on_some(self.value)

    @staticmethod
    def is_some() -> Literal[True]:
        return True

    @staticmethod
    def is_nothing() -> Literal[False]:
        return False

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@attrs.frozen(repr=False)
class Nothing:
    def unwrap(self) -> Never:
        raise NoDataError("Option is empty")

    def unwrap_or[D](self, default: D) -> D:
        return default

    def map(self, func: Callable[[Any], Any]) -> Nothing:
        return self

    def bind(self, func: Callable[[Any], Any]) -> Nothing:
        return self

    def match[R](self, on_some: Callable[[Any], R], on_nothing: Callable[[], R]) -> R:
        return on_nothing()

    @staticmethod
    def is_some() -> Literal[False]:
        return False

    @staticmethod
    def is_nothing() -> Literal[True]:
        return True

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nothing()"


NOTHING = Nothing()

type Option[T] = Some[T] | Nothing


def from_optional[T](value: T | None) -> Option[T]:
    """Wrap a value that might be None.

    None is the only value considered absent: zero, empty strings and empty
    collections are wrapped in :class:`Some`.
    """

    if value is None:
        return NOTHING
    return Some(value)


def is_some[T](option: Option[T]) -> TypeIs[Some[T]]:
    return option.is_some()


def is_nothing(option: Option[Any]) -> TypeIs[Nothing]:
    return option.is_nothing()
