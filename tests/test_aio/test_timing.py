"""
Tests for koolkit/aio/timing.py
"""

import asyncio
import time

import pytest
from koolkit.aio.timing import wait_for_time, wait_forever


class TestWaitForTime:
    """Test millisecond sleeps."""

    def test_waits_at_least_given_time(self):
        start = time.monotonic()
        asyncio.run(wait_for_time(50))
        assert time.monotonic() - start >= 0.045

    def test_zero(self):
        assert asyncio.run(wait_for_time(0)) is None


class TestWaitForever:
    """Test the never-completing coroutine."""

    def test_never_completes(self):
        async def main():
            await asyncio.wait_for(wait_forever(), timeout=0.05)

        with pytest.raises(asyncio.TimeoutError):
            asyncio.run(main())

    def test_other_tasks_keep_running(self):
        async def main():
            blocker = asyncio.create_task(wait_forever())
            await asyncio.sleep(0.01)
            done = blocker.done()
            blocker.cancel()
            return done

        assert asyncio.run(main()) is False
