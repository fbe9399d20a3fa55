import random
import pytest


@pytest.fixture
def sorted_array():
    return [1, 3, 5, 7, 9, 11]


@pytest.fixture
def random_sorted_arrays():
    """Sorted arrays of varied lengths, duplicates included."""
    rng = random.Random(1234)
    arrays = [[], [4], [4, 4], [1, 2], [5, 5, 5, 5]]
    for length in (3, 7, 16, 25, 40, 100):
        arrays.append(sorted(rng.randint(1, 60) for _ in range(length)))
    return arrays
