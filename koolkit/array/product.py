"""
Product Module
Cartesian product of sequences.
"""

import itertools
from typing import Any, Iterable, List


def descartes(arrays: Iterable[Iterable] = ()) -> List[List[Any]]:
    """
    Compute the cartesian product of several sequences.

    Args:
        arrays: Sequences to combine

    Returns:
        list: Every combination as a list, first sequence varying slowest.
            An empty input yields a single empty combination.

    Example:
        >>> descartes([[1, 2], ["a", "b"]])
        [[1, 'a'], [1, 'b'], [2, 'a'], [2, 'b']]
    """
    return [list(combination) for combination in itertools.product(*arrays)]
