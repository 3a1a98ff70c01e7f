from __future__ import annotations

from collections.abc import Generator

import pytest

from funext import WorkerPoolConfig, configure_worker_pool, shutdown_worker_pool


@pytest.fixture
def anyio_backend():
    return "trio"


@pytest.fixture
def worker_pool() -> Generator[None, None, None]:
    """Provide a fresh shared worker pool and release it after the test."""

    shutdown_worker_pool()
    configure_worker_pool(WorkerPoolConfig(max_workers=4))
    yield
    shutdown_worker_pool(wait=False)
