"""
Statistics Module
"""

from typing import Optional, Sequence


def get_median_value(data: Sequence[float]) -> Optional[float]:
    """
    Get the median of a sequence of numbers.

    The input is left untouched; a sorted copy is used.

    Args:
        data: Numbers, in any order

    Returns:
        The middle value (mean of the two middle values for an even count),
        or None if data is empty
    """
    if not data:
        return None

    ordered = sorted(data)
    middle = len(ordered) // 2

    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return ordered[middle]
