"""Concurrent fan-out that settles every task."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class TaskResult(Generic[T]):
    """Result of a concurrent task."""

    item: T
    success: bool
    result: Any | None = None
    error: str | None = None
    exception: BaseException | None = None


async def map_settled(
    items: list[T],
    func: Callable[[T], Awaitable[R]],
    on_success: Callable[[T, R], None] | None = None,
    on_failure: Callable[[T, Exception], None] | None = None,
) -> list[TaskResult[T]]:
    """Run ``func`` over every item concurrently and wait for all of them.

    Every item is started without waiting for the others and there is no
    concurrency limit. A failing item never fails the join: its exception is
    handed to ``on_failure`` as soon as it happens and recorded in its
    ``TaskResult``.

    Args:
        items: Items to process
        func: Async function to apply to each item
        on_success: Optional callback invoked when an item succeeds
        on_failure: Optional callback invoked when an item fails

    Returns:
        List of TaskResult objects, in the order of ``items``
    """

    async def process_item(item: T) -> TaskResult[T]:
        try:
            result = await func(item)
        except Exception as e:
            if on_failure:
                on_failure(item, e)
            return TaskResult(item=item, success=False, error=str(e), exception=e)

        if on_success:
            on_success(item, result)
        return TaskResult(item=item, success=True, result=result)

    tasks = [process_item(item) for item in items]
    return list(await asyncio.gather(*tasks))
