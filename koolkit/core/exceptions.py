"""
Core Exceptions Module
Defines custom exceptions for the koolkit helpers.
"""


class KoolkitError(Exception):
    """
    Base class for every error raised by koolkit.
    """
    pass


class PollTimeoutError(KoolkitError, TimeoutError):
    """
    Exception raised when a polled condition is not met before the timeout.
    """

    def __init__(self, fn=None, timeout_ms: float = None):
        """
        Initialize the PollTimeoutError.

        Args:
            fn: The polled callable
            timeout_ms: The timeout that elapsed, in milliseconds
        """
        self.fn = fn
        self.timeout_ms = timeout_ms
        super().__init__(f"timed out for {fn!r} after {timeout_ms} ms")


class ClipboardError(KoolkitError):
    """
    Exception raised when text could not be copied to the clipboard.
    """
    pass


class ClipboardUnavailableError(ClipboardError):
    """
    Exception raised when no clipboard program is installed.
    """
    pass


class DataURIError(KoolkitError, ValueError):
    """
    Exception raised when a data URI cannot be parsed or decoded.
    """
    pass


class UnknownEasingError(KoolkitError, KeyError):
    """
    Exception raised when an easing curve name is not registered.
    """
    pass
