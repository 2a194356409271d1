"""
Animation Frames Module
Invokes a callback once per frame on the running event loop.
"""

import asyncio
import logging
from typing import Callable, Optional

from koolkit import conf

logger = logging.getLogger(__name__)


class AnimationFrameRecorder:
    """
    Calls a callback once per frame while running.

    Scheduling uses loop.call_later, so the recorder must be started from
    code running inside an event loop.
    """

    def __init__(self, callback: Callable[[], object], interval: Optional[float] = None):
        """
        Args:
            callback: Called with no arguments on each frame
            interval: Seconds between frames (default: conf.default_frame_interval)
        """
        self.callback = callback
        self.interval = conf.default_frame_interval if interval is None else interval
        self.running = False
        self._handle: Optional[asyncio.TimerHandle] = None

    def start(self) -> None:
        if self.running:
            return
        self._run()
        self.running = True
        logger.debug(f"Recording frames every {self.interval:.4f}s")

    def stop(self) -> None:
        if not self.running:
            return
        self.running = False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logger.debug("Stopped recording frames")

    def _run(self) -> None:
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.interval, self._frame)

    def _frame(self) -> None:
        self.callback()
        if self.running:
            self._run()


def record_animation_frames(
    callback: Callable[[], object],
    auto_start: bool = True,
    interval: Optional[float] = None
) -> AnimationFrameRecorder:
    """
    Invoke the provided callback on each animation frame.

    Args:
        callback: Called with no arguments on each frame
        auto_start: Start recording right away (requires a running event loop).
            If False, call start() on the returned recorder.
        interval: Seconds between frames (default: conf.default_frame_interval)

    Returns:
        AnimationFrameRecorder: Recorder exposing start() and stop()

    Example:
        >>> recorder = record_animation_frames(lambda: print("frame"))
        >>> recorder.stop()
        >>> recorder.start()
    """
    recorder = AnimationFrameRecorder(callback, interval)
    if auto_start:
        recorder.start()
    return recorder
