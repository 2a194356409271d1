"""
Timing Module
Coroutines that pause the current task.
"""

import asyncio


async def wait_for_time(ms: float) -> None:
    """
    Wait the given amount of time between tasks.

    Args:
        ms: Delay in milliseconds
    """
    await asyncio.sleep(ms / 1000)


async def wait_forever() -> None:
    """
    Suspend the current task forever without blocking the event loop.

    Other tasks keep running; the only way out is cancelling the task.
    Useful while debugging.
    """
    await asyncio.get_running_loop().create_future()
