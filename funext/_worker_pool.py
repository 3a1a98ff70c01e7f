"""Shared pool of worker threads.

Forks submit their prongs to this pool.
The pool is created lazily on first use.
"""

from __future__ import annotations

import concurrent.futures
import logging
import threading
import warnings
from typing import Optional

import attrs

logger = logging.getLogger(__name__)


@attrs.frozen
class WorkerPoolConfig:
    """Specifies how the shared worker pool is created.

    Attributes:
        max_workers: The maximum number of threads in the pool.
            If None, the default of :class:`concurrent.futures.ThreadPoolExecutor`
            is used.
        thread_name_prefix: Prefix of the names of the worker threads.
    """

    max_workers: Optional[int] = attrs.field(
        default=None,
        validator=attrs.validators.optional(
            [attrs.validators.instance_of(int), attrs.validators.gt(0)]
        ),
    )
    thread_name_prefix: str = attrs.field(
        default="funext-worker", validator=attrs.validators.instance_of(str)
    )


_lock = threading.Lock()
_config = WorkerPoolConfig()
_executor: Optional[concurrent.futures.ThreadPoolExecutor] = None


def configure_worker_pool(config: WorkerPoolConfig) -> None:
    """Configure the shared worker pool.

    Warning:
        If the pool was already created, it is shut down without waiting for its
        running operations and replaced by a new pool on next use.
    """

    global _config, _executor

    with _lock:
        if _executor is not None:
            warnings.warn("Worker pool configuration is being overwritten.")
            _executor.shutdown(wait=False)
            _executor = None
        _config = config


def get_worker_pool() -> concurrent.futures.ThreadPoolExecutor:
    global _executor

    with _lock:
        if _executor is None:
            _executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=_config.max_workers,
                thread_name_prefix=_config.thread_name_prefix,
            )
            logger.debug("Created worker pool with %r", _config)
        return _executor


def shutdown_worker_pool(wait: bool = True) -> None:
    """Shut down the shared worker pool.

    A new pool is created the next time it is needed.
    """

    global _executor

    with _lock:
        executor, _executor = _executor, None
    if executor is not None:
        executor.shutdown(wait=wait)
