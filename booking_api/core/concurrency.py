"""
Fan-out / fan-in for independent asynchronous operations.

Usage:
    commodities, references = await gather_or_fail(
        manager.fetch(booking_id),
        other_manager.fetch(booking_id),
    )

All awaitables run concurrently. Results come back in submission order. The
first failure cancels the siblings that are still running, waits for them to
settle and is then re-raised unchanged.
"""
import asyncio
import logging
from typing import Any, Awaitable, List

logger = logging.getLogger(__name__)


async def gather_or_fail(*awaitables: Awaitable[Any]) -> List[Any]:
    if not awaitables:
        return []

    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    failures: List[asyncio.Task] = []

    def _record_failure(task: asyncio.Task) -> None:
        if not task.cancelled() and task.exception() is not None:
            failures.append(task)

    # Registered before asyncio.wait's own callback, so failures keep completion order
    for task in tasks:
        task.add_done_callback(_record_failure)

    try:
        _, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        await _cancel_and_settle(tasks)
        raise

    if failures:
        if pending:
            logger.debug(f"Cancelling {len(pending)} sibling task(s) after failure")
            await _cancel_and_settle(pending)
        raise failures[0].exception()

    return [task.result() for task in tasks]


async def _cancel_and_settle(tasks) -> None:
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
