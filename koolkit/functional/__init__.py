"""
Functional Module
Provides function wrappers, composition, lazy attributes, and event helpers.
"""

from .once import once
from .compose import pipe, pipe_async_functions, rearg, when
from .lazy import lazy_get
from .events import Event, EventTarget, until
from .benchmark import most_performant

__all__ = [
    # Once
    'once',
    # Composition
    'pipe',
    'pipe_async_functions',
    'rearg',
    'when',
    # Lazy
    'lazy_get',
    # Events
    'Event',
    'EventTarget',
    'until',
    # Benchmark
    'most_performant',
]
