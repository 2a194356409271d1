"""
Lookup Module
Deep value retrieval from nested mappings, sequences and objects.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Iterable, Union


def get_value(obj: Any, key: Any) -> Any:
    """
    Read a single key from a mapping, sequence or plain object.

    Mappings are indexed by key, sequences (other than strings) by integer
    position, anything else by attribute name. Negative indexes are not
    counted from the end; they read as missing.

    Args:
        obj: Container to read from
        key: Key, index or attribute name

    Returns:
        Any: The value, or None if it does not exist
    """
    if obj is None:
        return None

    if isinstance(obj, Mapping):
        if key in obj:
            return obj[key]
        # "a.0.b" style paths give string segments for integer keys
        if isinstance(key, str) and key.lstrip('-').isdigit():
            return obj.get(int(key))
        return None

    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        try:
            index = int(key)
        except (ValueError, TypeError):
            return None
        if 0 <= index < len(obj):
            return obj[index]
        return None

    if isinstance(key, str):
        return getattr(obj, key, None)
    return None


def get_in(obj: Any, path: Union[str, Iterable]) -> Any:
    """
    Retrieve a value from a deeply nested structure.

    Args:
        obj: Nested dicts, lists or objects (any mix of them)
        path: List of keys, or a dot-separated string such as "a.b.0.c"

    Returns:
        Any: The value at the end of the path, or None if any segment is missing

    Example:
        >>> get_in({"a": {"b": [10, 20]}}, "a.b.1")
        20
        >>> get_in({"a": {}}, ["a", "missing", "c"]) is None
        True
    """
    segments = path.split('.') if isinstance(path, str) else list(path)

    value = obj
    for key in segments:
        if value is None:
            return None
        value = get_value(value, key)

    return value
