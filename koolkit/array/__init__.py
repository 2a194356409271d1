"""
Array Module
Provides list manipulation, grouping, and combination helpers.
"""

from .ordering import array_move, sort_by
from .grouping import group_by, partition, pluck, count_occurrences
from .product import descartes

__all__ = [
    # Ordering
    'array_move',
    'sort_by',
    # Grouping
    'group_by',
    'partition',
    'pluck',
    'count_occurrences',
    # Product
    'descartes',
]
