"""
Type Names Module
Reports a short, language-neutral tag for the type of a value.
"""

import datetime
import inspect
import numbers
import re
from collections.abc import Mapping, Set

import regex

_pattern_types = (re.Pattern, type(regex.compile('')))

data_types = ('Number', 'String', 'Boolean', 'Object', 'Array', 'Function')


def get_type_of(obj) -> str:
    """
    Get the type of a value as a tag name.

    Args:
        obj: Any value

    Returns:
        str: One of "Null", "Boolean", "Number", "String", "Bytes", "Array",
            "Object", "Set", "RegExp", "Date", "Error", "AsyncFunction",
            "GeneratorFunction", "Function", "Class", or the class name
            of the value for anything else

    Example:
        >>> get_type_of("hello world")
        'String'
        >>> get_type_of([])
        'Array'
    """
    if obj is None:
        return 'Null'
    # bool is a subclass of int, check it first
    if isinstance(obj, bool):
        return 'Boolean'
    if isinstance(obj, numbers.Number):
        return 'Number'
    if isinstance(obj, str):
        return 'String'
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return 'Bytes'
    if isinstance(obj, (list, tuple)):
        return 'Array'
    if isinstance(obj, Mapping):
        return 'Object'
    if isinstance(obj, Set):
        return 'Set'
    if isinstance(obj, _pattern_types):
        return 'RegExp'
    if isinstance(obj, (datetime.date, datetime.time)):
        return 'Date'
    if isinstance(obj, BaseException):
        return 'Error'
    if inspect.isclass(obj):
        return 'Class'
    if inspect.iscoroutinefunction(obj) or inspect.isasyncgenfunction(obj):
        return 'AsyncFunction'
    if inspect.isgeneratorfunction(obj):
        return 'GeneratorFunction'
    if callable(obj):
        return 'Function'
    return type(obj).__name__


def is_data_type(type_name: str, data) -> bool:
    """
    Check whether a value has the given basic data type.

    Args:
        type_name: One of 'Number', 'String', 'Boolean', 'Object', 'Array', 'Function'
        data: Value to check

    Returns:
        bool: True if get_type_of(data) is type_name

    Raises:
        ValueError: If type_name is not a supported data type
    """
    if type_name not in data_types:
        raise ValueError(f"Unsupported data type: {type_name!r} (expected one of {', '.join(data_types)})")
    return get_type_of(data) == type_name
