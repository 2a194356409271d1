"""
Grouping Module
Helpers that split, group, or extract values from collections.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, List, Union

from koolkit.data.lookup import get_value


def group_by(collection: Union[Iterable, Mapping], key: str) -> Dict[Any, List[Any]]:
    """
    Group the elements of a collection by the value of the given key.

    Args:
        collection: List, tuple or set of dicts/objects, or a mapping whose
            values are grouped
        key: The key (or attribute) to group by. Group values that cannot
            be hashed, such as lists, are keyed by their repr()

    Returns:
        dict: Group value -> list of elements, in first-seen order

    Example:
        >>> group_by([{"n": "a", "age": 20}, {"n": "b", "age": 20}], "age")
        {20: [{'n': 'a', 'age': 20}, {'n': 'b', 'age': 20}]}
    """
    values = collection.values() if isinstance(collection, Mapping) else collection

    groups = {}
    for value in values:
        group = get_value(value, key)
        try:
            hash(group)
        except TypeError:
            group = repr(group)
        groups.setdefault(group, []).append(value)

    return groups


def partition(predicate: Callable[[Any], Any]) -> Callable[[Iterable], List[List[Any]]]:
    """
    Build a function that splits a collection in two based on a predicate.

    Args:
        predicate: Called with each item

    Returns:
        callable: Takes an iterable and returns [falsy_items, truthy_items]

    Example:
        >>> partition(lambda n: n % 2 == 0)([1, 2, 3, 4, 5, 6])
        [[1, 3, 5], [2, 4, 6]]
    """
    def split(items: Iterable) -> List[List[Any]]:
        result = [[], []]
        for item in items:
            result[1 if predicate(item) else 0].append(item)
        return result

    return split


def pluck(objs: Iterable, key: str) -> List[Any]:
    """Extract the value of key from every dict or object (None where absent)."""
    return [get_value(obj, key) for obj in objs]


def count_occurrences(items: Iterable, value: Any) -> int:
    """
    Count how many items are equal to value.

    Example:
        >>> count_occurrences(["Yes", "Yes", "No"], "Yes")
        2
    """
    return sum(1 for item in items if item == value)
