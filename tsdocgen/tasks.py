"""Asyncio combinators for fan-out work."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Iterable, List, TypeVar

from .validation import Validation, collect

T = TypeVar("T")


async def settle_all(awaitables: Iterable[Awaitable[Validation[T]]]) -> Validation[List[T]]:
    """Wait for every task and merge all outcomes, keeping every error.

    No task is cancelled because a sibling failed. Unexpected exceptions are
    re-raised only after all tasks have settled.
    """
    results = await asyncio.gather(*awaitables, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return collect(results)  # type: ignore[arg-type]


async def gather_fail_fast(awaitables: Iterable[Awaitable[T]]) -> List[T]:
    """Wait for every task, stopping at the first failure and cancelling the rest."""
    tasks = [asyncio.ensure_future(awaitable) for awaitable in awaitables]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


__all__ = ["gather_fail_fast", "settle_all"]
