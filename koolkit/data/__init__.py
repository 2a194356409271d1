"""
Data Module
Provides nested value lookup and type inspection helpers.
"""

from .lookup import get_in, get_value
from .types import get_type_of, is_data_type

__all__ = [
    # Lookup
    'get_in',
    'get_value',
    # Types
    'get_type_of',
    'is_data_type',
]
