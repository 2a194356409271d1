"""
Async Module
Provides coroutine helpers for waiting, polling, and draining task lists.
"""

from .timing import wait_for_time, wait_forever
from .polling import poll
from .sequence import async_sequentializer, parallel
from .frames import AnimationFrameRecorder, record_animation_frames

__all__ = [
    # Timing
    'wait_for_time',
    'wait_forever',
    # Polling
    'poll',
    # Sequence
    'async_sequentializer',
    'parallel',
    # Frames
    'AnimationFrameRecorder',
    'record_animation_frames',
]
