"""Asynchronous computations as re-runnable values.

A coroutine object can only be awaited once, so the task instances work over
zero-argument coroutine functions instead: calling a ``Task`` starts a fresh
run. Scheduling is left entirely to ``asyncio.gather``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")

logger = logging.getLogger(__name__)

Task = Callable[[], Awaitable[A]]


def pure(value: A) -> Task[A]:
    """Create a Task that completes immediately with ``value``."""
    async def _run() -> A:
        return value

    return _run


async def gather(tasks: Iterable[Task[A]]) -> list[A]:
    """Run every task to completion.

    Semantics:
        - Results come back in argument order
        - Cancellation, timeouts and error propagation are exactly those
          of asyncio.gather; the first exception propagates

    Args:
        tasks: Tasks to start, each called once.

    Returns:
        list[A]: The results in argument order.
    """
    pending = [task() for task in tasks]
    logger.debug("Gathering %d tasks", len(pending))
    return list(await asyncio.gather(*pending))


def combine(tasks: Iterable[Task[A]], fold: Callable[[list[A]], B]) -> Task[B]:
    """Create a Task that gathers ``tasks`` and folds their results.

    The tasks are captured eagerly, so a generator argument is consumed once
    and the returned Task can still be run any number of times.
    """
    captured = tuple(tasks)

    async def _run() -> B:
        return fold(await gather(captured))

    return _run
