"""
Ordering Module
In-place reordering helpers for lists.
"""

from typing import Any, List

from koolkit.data.lookup import get_value


def array_move(array: List[Any], old_index: int, new_index: int) -> List[Any]:
    """
    Move an item from one position in a list to another.

    The list is modified in place. If new_index is past the end of the list,
    the list is padded with None so that the item lands exactly at new_index.

    Args:
        array: List to move the item in
        old_index: Index of the item to move
        new_index: Index to move the item to

    Returns:
        list: The same list, reordered

    Example:
        >>> array_move([1, 2, 3, 4, 5], 1, 3)
        [1, 3, 4, 2, 5]
    """
    if new_index >= len(array):
        array.extend([None] * (new_index - len(array) + 1))

    array.insert(new_index, array.pop(old_index))

    return array


def sort_by(array: List[Any], key: str) -> List[Any]:
    """
    Sort a list of mappings or objects by one of their properties.

    The sort is stable and happens in place. Items that lack the key sort
    after all items that have it.

    Args:
        array: List of dicts or objects
        key: Property to sort by

    Returns:
        list: The same list, sorted ascending by key
    """
    def sort_key(item):
        value = get_value(item, key)
        return (value is None, value if value is not None else 0)

    array.sort(key=sort_key)
    return array
