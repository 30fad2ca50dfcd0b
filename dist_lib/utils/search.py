"""
Search utilities for ordered numeric data.

This module provides a "first element >= target" binary search over
monotonically non-decreasing sequences, used for inverse-CDF sampling.
"""

from typing import Callable, Sequence


def binary_search(f: Callable[[int], float], value: float, lower: int, upper: int) -> int:
    """
    Find the smallest index in [lower, upper] whose value reaches the target.

    The function f must be non-decreasing over [lower, upper]. If no index
    qualifies, upper is returned.

    Args:
        f: Index-addressable, non-decreasing function
        value: Target value
        lower: Lowest index to consider (inclusive)
        upper: Highest index to consider (inclusive)

    Returns:
        The smallest i in [lower, upper] with f(i) >= value

    Raises:
        ValueError: If lower > upper
    """
    if lower > upper:
        raise ValueError(f"Empty search range [{lower}, {upper}]")

    while lower < upper:
        middle = (lower + upper) // 2
        if value <= f(middle):
            upper = middle
        else:
            lower = middle + 1
    return lower


def binary_search_array(array: Sequence[float], value: float) -> int:
    """
    Binary search over a whole non-decreasing array.

    Args:
        array: Non-decreasing sequence (list or numpy array)
        value: Target value

    Returns:
        The smallest 0-based index i with array[i] >= value, or the last index
    """
    return binary_search(lambda i: array[i], value, 0, len(array) - 1)
