"""
Rounding helpers shared by the pricing and impact calculations.

Python's built-in round() rounds halves to even; every figure shown to
visitors rounds halves up instead, so 832.5 becomes 833.
"""
import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves rounded towards +infinity.

    Args:
        value: Number to round

    Returns:
        Rounded integer
    """
    return math.floor(value + 0.5)


def round_to_tenth(value: float) -> float:
    """
    Round to one decimal place, halves rounded up.

    Args:
        value: Number to round

    Returns:
        Value rounded to the nearest 0.1
    """
    return round_half_up(value * 10) / 10


def ceil_to_half(value: float) -> float:
    """
    Round up to the nearest multiple of 0.5.

    Args:
        value: Number to round

    Returns:
        Smallest multiple of 0.5 that is >= value
    """
    return math.ceil(value * 2) / 2
