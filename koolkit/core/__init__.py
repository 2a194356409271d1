"""
Core Module
Provides the exception types shared by every koolkit helper.
"""

from .exceptions import (
    KoolkitError,
    PollTimeoutError,
    ClipboardError,
    ClipboardUnavailableError,
    DataURIError,
    UnknownEasingError
)

__all__ = [
    'KoolkitError',
    'PollTimeoutError',
    'ClipboardError',
    'ClipboardUnavailableError',
    'DataURIError',
    'UnknownEasingError',
]
