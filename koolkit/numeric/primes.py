"""
Primes Module
Prime number generation.
"""

import math
from typing import List


def generate_prime_numbers(num: int) -> List[int]:
    """
    Generate all prime numbers up to and including num.

    Uses the Sieve of Eratosthenes: multiples of every candidate up to
    the square root of num are crossed out.

    Args:
        num: Upper bound (inclusive)

    Returns:
        list[int]: Primes in ascending order, empty if num < 2

    Example:
        >>> generate_prime_numbers(20)
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    if num < 2:
        return []

    is_prime = bytearray([1]) * (num + 1)
    is_prime[0] = is_prime[1] = 0

    for candidate in range(2, math.isqrt(num) + 1):
        if is_prime[candidate]:
            is_prime[candidate * candidate::candidate] = bytes(len(range(candidate * candidate, num + 1, candidate)))

    return [n for n, flag in enumerate(is_prime) if flag]
