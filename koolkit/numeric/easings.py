"""
Easing Functions Module
Closed-form easing curves mapping progress t in [0, 1] to an eased value.

Elastic curves divide by (t), (t - 1) or (t - 0.5); at those points the
limit of the curve is returned.
"""

import math
from typing import Callable, Dict

from koolkit.core.exceptions import UnknownEasingError


def linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    t -= 1
    return t * t * t + 1


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return (t - 1) * (2 * t - 2) * (2 * t - 2) + 1


def ease_in_quart(t: float) -> float:
    return t * t * t * t


def ease_out_quart(t: float) -> float:
    t -= 1
    return 1 - t * t * t * t


def ease_in_out_quart(t: float) -> float:
    if t < 0.5:
        return 8 * t * t * t * t
    t -= 1
    return 1 - 8 * t * t * t * t


def ease_in_quint(t: float) -> float:
    return t * t * t * t * t


def ease_out_quint(t: float) -> float:
    t -= 1
    return 1 + t * t * t * t * t


def ease_in_out_quint(t: float) -> float:
    if t < 0.5:
        return 16 * t * t * t * t * t
    t -= 1
    return 1 + 16 * t * t * t * t * t


def ease_in_sine(t: float) -> float:
    return 1 + math.sin((math.pi / 2) * t - math.pi / 2)


def ease_out_sine(t: float) -> float:
    return math.sin((math.pi / 2) * t)


def ease_in_out_sine(t: float) -> float:
    return (1 + math.sin(math.pi * t - math.pi / 2)) / 2


def ease_in_elastic(t: float) -> float:
    if t == 0:
        return 0.0
    return (0.04 - 0.04 / t) * math.sin(25 * t) + 1


def ease_out_elastic(t: float) -> float:
    if t == 1:
        return 1.0
    return ((0.04 * t) / (t - 1)) * math.sin(25 * (t - 1))


def ease_in_out_elastic(t: float) -> float:
    t -= 0.5
    if t == 0:
        return 0.5
    if t < 0:
        return (0.02 + 0.01 / t) * math.sin(50 * t)
    return (0.02 - 0.01 / t) * math.sin(50 * t) + 1


EASINGS: Dict[str, Callable[[float], float]] = {
    'linear': linear,
    'ease_in_quad': ease_in_quad,
    'ease_out_quad': ease_out_quad,
    'ease_in_out_quad': ease_in_out_quad,
    'ease_in_cubic': ease_in_cubic,
    'ease_out_cubic': ease_out_cubic,
    'ease_in_out_cubic': ease_in_out_cubic,
    'ease_in_quart': ease_in_quart,
    'ease_out_quart': ease_out_quart,
    'ease_in_out_quart': ease_in_out_quart,
    'ease_in_quint': ease_in_quint,
    'ease_out_quint': ease_out_quint,
    'ease_in_out_quint': ease_in_out_quint,
    'ease_in_sine': ease_in_sine,
    'ease_out_sine': ease_out_sine,
    'ease_in_out_sine': ease_in_out_sine,
    'ease_in_elastic': ease_in_elastic,
    'ease_out_elastic': ease_out_elastic,
    'ease_in_out_elastic': ease_in_out_elastic,
}


def get_easing(name: str) -> Callable[[float], float]:
    """
    Look up an easing curve by name.

    Args:
        name: Curve name, e.g. 'ease_in_out_cubic'

    Returns:
        callable: The easing function

    Raises:
        UnknownEasingError: If no curve has that name
    """
    try:
        return EASINGS[name]
    except KeyError:
        raise UnknownEasingError(name) from None
