"""
Polling Module
"""

import asyncio
import inspect
import logging
from typing import Any, Callable, Optional

from koolkit import conf
from koolkit.core.exceptions import PollTimeoutError

logger = logging.getLogger(__name__)


async def poll(
    fn: Callable[[], Any],
    timeout: Optional[float] = None,
    interval: Optional[float] = None
) -> Any:
    """
    Call fn repeatedly until it returns a truthy value.

    Args:
        fn: Condition to check. May be a coroutine function.
        timeout: Give up after this many milliseconds; None or 0 means
            conf.default_poll_timeout_ms
        interval: Milliseconds between two checks (default: conf.default_poll_interval_ms)

    Returns:
        Any: The first truthy value returned by fn

    Raises:
        PollTimeoutError: If fn is still falsy once the timeout has elapsed

    Example:
        >>> await poll(lambda: lightbox.width > 0, 2000, 150)
    """
    timeout = timeout or conf.default_poll_timeout_ms
    interval = conf.default_poll_interval_ms if interval is None else interval

    loop = asyncio.get_running_loop()
    end_time = loop.time() + timeout / 1000
    attempts = 0

    while True:
        attempts += 1
        result = fn()
        if inspect.isawaitable(result):
            result = await result

        if result:
            logger.debug(f"Poll condition met after {attempts} attempt(s)")
            return result

        if loop.time() >= end_time:
            logger.debug(f"Poll gave up after {attempts} attempt(s)")
            raise PollTimeoutError(fn, timeout)

        await asyncio.sleep(interval / 1000)
