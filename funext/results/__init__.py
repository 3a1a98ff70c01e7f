"""Defines the result types used to carry the outcome of an operation as data.

There are two result types:

* :class:`Result` for operations that are only called for their side effects,
* :class:`DataResult` for operations that produce data on success.

Both have three possible outcomes: success, failure and exception.
Exceptions raised by an operation are captured once, with
:func:`funext.trying.try_catch`, and then travel inside results.
The combinators defined on results never raise or capture exceptions themselves.

Example:
    .. code-block:: python

        from funext.results import DataResult, fish
        from funext.trying import as_data_result

        def read_file(path: str) -> DataResult[str]:
            return as_data_result(lambda: Path(path).read_text())

        def parse(content: str) -> DataResult[dict]:
            return as_data_result(lambda: json.loads(content))

        load = fish(read_file, parse)
        load("config.json").match(
            on_success=lambda config: print(config),
            on_failure=lambda result: print(result.message),
        )
"""

from ._composition import bind_awaitable, fish, fish_async
from ._interop import from_maybe, from_returns, to_maybe, to_returns
from ._outcome import (
    FAILURE_MESSAGE,
    NO_DATA_MESSAGE,
    SUCCESS_MESSAGE,
    ErrorType,
    Outcome,
)
from ._result import DataResult, Result

__all__ = [
    "DataResult",
    "ErrorType",
    "FAILURE_MESSAGE",
    "NO_DATA_MESSAGE",
    "Outcome",
    "Result",
    "SUCCESS_MESSAGE",
    "bind_awaitable",
    "fish",
    "fish_async",
    "from_maybe",
    "from_returns",
    "to_maybe",
    "to_returns",
]
