"""
Numeric Module
Provides prime generation, simple statistics, and easing curves.
"""

from .primes import generate_prime_numbers
from .stats import get_median_value
from . import easings
from .easings import EASINGS, get_easing

__all__ = [
    # Primes
    'generate_prime_numbers',
    # Stats
    'get_median_value',
    # Easings
    'easings',
    'EASINGS',
    'get_easing',
]
