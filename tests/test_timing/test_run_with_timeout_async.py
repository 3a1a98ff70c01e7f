import threading

import anyio
import anyio.to_thread
import pytest

from funext.results import DataResult, Outcome, Result
from funext.timing import (
    TIMEOUT_MESSAGE,
    CancellationToken,
    run_blocking_with_timeout_async,
    run_cancellable_with_timeout_async,
    run_logical_with_timeout_async,
    run_with_timeout_async,
)


async def test_fast_operation_succeeds(anyio_backend):
    async def fetch() -> int:
        await anyio.sleep(0.05)
        return 7

    result = await run_with_timeout_async(fetch, 0.7)

    assert result.unwrap() == 7


async def test_slow_operation_is_cancelled(anyio_backend):
    reached_end = False

    async def hang() -> int:
        nonlocal reached_end
        await anyio.sleep(1.5)
        reached_end = True
        return 7

    with anyio.fail_after(1.2):
        result = await run_with_timeout_async(hang, 0.7)

    assert result.message == TIMEOUT_MESSAGE
    assert not reached_end


async def test_fault_is_reported(anyio_backend):
    async def fail() -> int:
        raise ConnectionError("Refused")

    result = await run_with_timeout_async(fail, 0.7)

    assert result.outcome is Outcome.EXCEPTION
    assert isinstance(result.fault, ConnectionError)


async def test_exception_group_is_unwrapped(anyio_backend):
    async def fail() -> None:
        raise ValueError("Bad input")

    async def run_in_group() -> int:
        async with anyio.create_task_group() as task_group:
            task_group.start_soon(fail)
        return 0

    result = await run_with_timeout_async(run_in_group, 0.7)

    assert isinstance(result.fault, ValueError)
    assert "Bad input" in result.message


async def test_timeout_error_raised_by_operation_is_a_fault(anyio_backend):
    async def fail() -> int:
        raise TimeoutError("Upstream timed out")

    result = await run_with_timeout_async(fail, 0.7)

    assert result.is_exception


async def test_negative_timeout_is_rejected(anyio_backend):
    async def noop() -> int:
        return 0

    with pytest.raises(ValueError):
        await run_with_timeout_async(noop, -0.1)


async def test_cancellable_operation(anyio_backend):
    tokens = []

    async def remember(token: CancellationToken) -> DataResult[str]:
        tokens.append(token)
        return DataResult.on_success("ok")

    result = await run_cancellable_with_timeout_async(remember, 0.7)

    assert result.unwrap() == "ok"
    assert tokens[0].is_cancellation_requested


async def test_logical_operation(anyio_backend):
    async def check() -> bool:
        return False

    async def hang() -> bool:
        await anyio.sleep_forever()
        return True

    assert await run_logical_with_timeout_async(check, 0.7) == Result.on_failure()
    assert await run_logical_with_timeout_async(hang, 0.1) == Result.on_failure(
        TIMEOUT_MESSAGE
    )


async def test_blocking_operation_is_abandoned_and_stops(anyio_backend):
    stopped = threading.Event()

    def spin(token: CancellationToken) -> int:
        while not token.wait(0.01):
            pass
        stopped.set()
        return 0

    with anyio.fail_after(1):
        result = await run_blocking_with_timeout_async(spin, 0.2)

    assert result.message == TIMEOUT_MESSAGE
    assert await anyio.to_thread.run_sync(stopped.wait, 2)


async def test_blocking_operation_succeeds(anyio_backend):
    result = await run_blocking_with_timeout_async(lambda token: "value", 0.7)

    assert result.unwrap() == "value"
