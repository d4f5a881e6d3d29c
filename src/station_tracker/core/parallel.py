"""Order-preserving concurrent map over asyncio tasks."""

import asyncio
from typing import Awaitable, Callable, Dict, Iterable, List, Tuple, TypeVar

from station_tracker.core.exceptions import AggregateError
from station_tracker.core.logger import get_logger

T = TypeVar("T")
U = TypeVar("U")

logger = get_logger("core.parallel")


async def parallel_map(
    items: Iterable[T],
    transform: Callable[[T], Awaitable[U]],
) -> List[U]:
    """
    Apply an async transform to every item concurrently, keeping input order.

    One task is started per item and tagged with the item's index. Results
    are collected in completion order into an index-keyed lookup, then read
    back at indices ``0..n-1`` once every task has finished.

    Args:
        items: Input sequence
        transform: Coroutine function applied to each item

    Returns:
        List where ``result[i]`` is ``await transform(items[i])``

    Raises:
        AggregateError: If any transform raises. Outstanding tasks are
            cancelled and no partial results are returned.
    """
    elements = list(items)
    if not elements:
        return []

    async def run(index: int, element: T) -> Tuple[int, U]:
        try:
            return index, await transform(element)
        except Exception as e:
            raise AggregateError(
                f"Transform failed for element {index} of {len(elements)}",
                details={"index": index, "error": str(e)},
            ) from e

    tasks = [
        asyncio.create_task(run(index, element))
        for index, element in enumerate(elements)
    ]
    lookup: Dict[int, U] = {}

    try:
        for completed in asyncio.as_completed(tasks):
            index, value = await completed
            lookup[index] = value
    except BaseException:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        # Let cancelled tasks unwind and collect every outcome before re-raising.
        await asyncio.gather(*tasks, return_exceptions=True)
        if pending:
            logger.debug(f"Cancelled {len(pending)} outstanding tasks")
        raise

    return [lookup[index] for index in range(len(elements))]
