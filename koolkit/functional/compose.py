"""
Composition Module
Helpers that build new functions out of existing ones.
"""

import inspect
from typing import Any, Callable, Sequence


def pipe(*fns: Callable) -> Callable[[Any], Any]:
    """
    Compose functions from left to right.

    Example:
        >>> pipe(lambda x: x + 1, lambda x: x * 2)(3)
        8
    """
    def piped(x: Any) -> Any:
        for fn in fns:
            x = fn(x)
        return x

    return piped


def pipe_async_functions(*fns: Callable) -> Callable:
    """
    Compose functions from left to right, awaiting any step that returns
    an awaitable before passing its result on.

    Args:
        *fns: Sync or async functions, each taking one argument

    Returns:
        callable: Coroutine function taking the initial argument

    Example:
        >>> total = pipe_async_functions(lambda x: x + 1, async_double)
        >>> await total(5)
        12
    """
    async def piped(arg: Any) -> Any:
        value = arg
        for fn in fns:
            value = fn(value)
            if inspect.isawaitable(value):
                value = await value
        return value

    return piped


def rearg(fn: Callable, indexes: Sequence[int]) -> Callable:
    """
    Create a function that calls fn with its arguments rearranged.

    Argument i of the call to fn is argument indexes[i] of the call to the
    returned function; an index past the given arguments passes None.

    Example:
        >>> rearg(lambda a, b, c: [a, b, c], [2, 0, 1])('b', 'c', 'a')
        ['a', 'b', 'c']
    """
    def rearranged(*args: Any) -> Any:
        return fn(*[args[i] if i < len(args) else None for i in indexes])

    return rearranged


def when(pred: Callable[[Any], Any], when_true: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Create a function that applies when_true to its argument only if pred
    holds for it, and otherwise returns the argument unchanged.

    Example:
        >>> double_even = when(lambda x: x % 2 == 0, lambda x: x * 2)
        >>> double_even(2), double_even(1)
        (4, 1)
    """
    def apply(x: Any) -> Any:
        return when_true(x) if pred(x) else x

    return apply
