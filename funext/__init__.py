"""Result types and functional helpers to handle failures as data.

The subpackages are:

* :mod:`funext.results`: the :class:`Result` and :class:`DataResult` types and their
  combinators,
* :mod:`funext.trying`: capture of exceptions into results,
* :mod:`funext.option`: explicit presence or absence of a value,
* :mod:`funext.timing`: execution of operations within a time limit,
* :mod:`funext.functional`: small combinators for functions and collections,
* :mod:`funext.provider`: generic asynchronous access to SQL tables,
* :mod:`funext.responses`: conversion of results into HTTP responses.
"""

from ._exceptions import (
    NoDataError,
    OperationCancelledError,
    ResultFailedError,
    root_cause,
    with_note,
)
from ._unit import UNIT, Unit, to_func, unit
from ._worker_pool import (
    WorkerPoolConfig,
    configure_worker_pool,
    shutdown_worker_pool,
)
from .option import NOTHING, Option, Some
from .results import DataResult, ErrorType, Outcome, Result
from .trying import Try, try_catch, try_catch_async

__all__ = [
    "DataResult",
    "ErrorType",
    "NOTHING",
    "NoDataError",
    "OperationCancelledError",
    "Option",
    "Outcome",
    "Result",
    "ResultFailedError",
    "Some",
    "Try",
    "UNIT",
    "Unit",
    "WorkerPoolConfig",
    "configure_worker_pool",
    "root_cause",
    "shutdown_worker_pool",
    "to_func",
    "try_catch",
    "try_catch_async",
    "unit",
    "with_note",
]
