"""Boundary between exceptions used as control flow and faults carried as data.

:func:`try_catch` runs a computation and captures whatever it raises into a
:class:`Try`, which can then be converted into a result.
"""

from ._try import (
    Try,
    as_data_result,
    as_data_result_async,
    as_result,
    as_result_async,
    resolve_try,
    try_catch,
    try_catch_async,
)

__all__ = [
    "Try",
    "as_data_result",
    "as_data_result_async",
    "as_result",
    "as_result_async",
    "resolve_try",
    "try_catch",
    "try_catch_async",
]
