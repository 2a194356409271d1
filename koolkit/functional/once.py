"""
Once Module
"""

import functools
from typing import Any, Callable


def once(fn: Callable) -> Callable:
    """
    Ensure a function can only be called once.

    The first call runs fn and remembers its result; every later call
    returns that same result without running fn again. If the first call
    raises, the next call tries fn again.

    Args:
        fn: Function to guard

    Returns:
        callable: Guarded function

    Example:
        >>> fire = once(lambda: print("Fired!"))
        >>> fire()
        Fired!
        >>> fire()
    """
    called = False
    result = None

    @functools.wraps(fn)
    def wrapper(*args, **kwargs) -> Any:
        nonlocal called, result
        if not called:
            # a call that raises leaves the guard open for a retry
            result = fn(*args, **kwargs)
            called = True
        return result

    return wrapper
