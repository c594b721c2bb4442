import asyncio

import pytest

from booking_api.core.concurrency import gather_or_fail


async def _value(value, delay=0.0):
    await asyncio.sleep(delay)
    return value


async def _fail(exc, delay=0.0):
    await asyncio.sleep(delay)
    raise exc


async def test_results_keep_submission_order():
    results = await gather_or_fail(_value("a", 0.03), _value("b", 0.0), _value("c", 0.01))
    assert results == ["a", "b", "c"]


async def test_no_awaitables_returns_empty_list():
    assert await gather_or_fail() == []


async def test_first_failure_cancels_running_siblings():
    cancelled = asyncio.Event()

    async def slow():
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    with pytest.raises(KeyError):
        await gather_or_fail(slow(), _fail(KeyError("boom"), 0.01))

    assert cancelled.is_set()


async def test_earliest_failure_wins():
    with pytest.raises(ValueError, match="first"):
        await gather_or_fail(
            _fail(RuntimeError("second"), 0.05),
            _fail(ValueError("first"), 0.0),
        )
