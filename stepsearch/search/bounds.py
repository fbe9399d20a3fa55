"""Theoretical comparison counts shown next to a run's statistics."""

from typing import Tuple
from stepsearch.search.registry import get_algorithm


def comparison_bounds(identifier: str, n: int) -> Tuple[int, int]:
    """
    Return the (min, max) number of comparisons an algorithm may need.

    Args:
        identifier: Registered algorithm key.
        n: Array length. An empty array gives (0, 0).

    Raises:
        UnknownAlgorithmError: If the identifier is not registered.
    """
    return get_algorithm(identifier).comparison_bounds(n)
