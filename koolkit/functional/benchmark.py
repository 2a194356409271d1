"""
Benchmark Module
"""

import logging
import time
from typing import Callable, Optional, Sequence

from koolkit import conf

logger = logging.getLogger(__name__)


def most_performant(fns: Sequence[Callable[[], object]], iterations: Optional[int] = None) -> int:
    """
    Return the index of the function that executed the fastest.

    Args:
        fns: Functions to compare, each called without arguments
        iterations: How many times to run each function. More iterations give
            a more reliable result but take longer (default: conf.default_benchmark_iterations)

    Returns:
        int: Index of the fastest function in fns

    Raises:
        ValueError: If fns is empty
    """
    if not fns:
        raise ValueError("most_performant() needs at least one function")

    if iterations is None:
        iterations = conf.default_benchmark_iterations

    times = []
    for fn in fns:
        before = time.perf_counter()
        for _ in range(iterations):
            fn()
        times.append(time.perf_counter() - before)

    fastest = times.index(min(times))
    logger.debug(f"Benchmarked {len(fns)} functions x {iterations} iterations, fastest #{fastest} ({times[fastest]:.6f}s)")
    return fastest
