"""
Sequence Module
Drains lists of awaitables one at a time or in fixed-size batches.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Iterable, List, Optional, TypeVar

from koolkit import conf

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


async def _resolve(item: Any) -> Any:
    """Await an awaitable, call-then-await a callable, or pass a value through."""
    if callable(item) and not inspect.isawaitable(item):
        item = item()
    if inspect.isawaitable(item):
        return await item
    return item


def async_sequentializer() -> Callable[[Iterable[Any]], Awaitable[List[Any]]]:
    """
    Create a runner that resolves a list of tasks strictly in sequence.

    Each entry may be an awaitable, a function (sync or async, called with
    no arguments) or a plain value. An entry is only started once the
    previous one has finished. If one fails, the exception propagates and
    the remaining entries are not started.

    Returns:
        callable: Coroutine function taking the list and returning the
            results in input order

    Example:
        >>> run = async_sequentializer()
        >>> await run([fetch_a, fetch_b, 42])
        ['a', 'b', 42]
    """
    async def run(items: Iterable[Any]) -> List[Any]:
        results = []
        for index, item in enumerate(items):
            results.append(await _resolve(item))
            logger.debug(f"Sequential task #{index} done")
        return results

    return run


async def parallel(
    items: Iterable[T],
    fn: Callable[[T], Awaitable[R]],
    threads: Optional[int] = None
) -> List[R]:
    """
    Process items in chunks with at most `threads` tasks running at once.

    Each chunk is awaited as a whole before the next one starts, so a slow
    task holds back its whole chunk.

    Args:
        items: Values to process. Not modified.
        fn: Coroutine function applied to every value
        threads: Chunk size (default: conf.default_parallel_threads)

    Returns:
        list: fn results, in input order

    Raises:
        ValueError: If threads is lower than 1

    Example:
        >>> await parallel(range(20), fetch_square, 5)
    """
    if threads is None:
        threads = conf.default_parallel_threads
    if threads < 1:
        raise ValueError(f"threads must be at least 1, got {threads}")

    pending = list(items)
    results = []

    for start in range(0, len(pending), threads):
        chunk = pending[start:start + threads]
        results.extend(await asyncio.gather(*(fn(item) for item in chunk)))
        logger.debug(f"Processed chunk {start // threads + 1} ({len(chunk)} items)")

    return results
