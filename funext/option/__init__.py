"""Defines the option type and its variants: some and nothing.

An option is either :class:`Some`, holding a value, or :data:`NOTHING`.
It makes the presence of a value explicit instead of relying on a sentinel, so that
values like ``0`` or ``""`` are never mistaken for missing data.

Example:
    .. code-block:: python

        from funext.option import from_optional

        name = from_optional(config.get("name")).map(str.upper).unwrap_or("ANONYMOUS")
"""

from ._option import (
    NOTHING,
    Nothing,
    Option,
    Some,
    from_optional,
    is_nothing,
    is_some,
)

__all__ = [
    "NOTHING",
    "Nothing",
    "Option",
    "Some",
    "from_optional",
    "is_nothing",
    "is_some",
]
