"""Registry of the available search algorithms."""

from typing import Dict, List, Sequence
from stepsearch.search.base import (
    AlgorithmDescriptor,
    Number,
    SearchAlgorithm,
    SearchError,
    StepProducer,
)
from stepsearch.search.algorithms.linear import LinearSearch
from stepsearch.search.algorithms.binary import BinarySearch
from stepsearch.search.algorithms.jump import JumpSearch
from stepsearch.search.algorithms.interpolation import InterpolationSearch
from stepsearch.search.algorithms.exponential import ExponentialSearch


class UnknownAlgorithmError(SearchError, KeyError):
    """Raised when an identifier does not name a registered algorithm."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"Unknown search algorithm '{identifier}'. "
            f"Valid options: {', '.join(ALGORITHMS)}"
        )

    def __str__(self) -> str:
        return self.args[0]


# Insertion order is display order; the first entry is the default.
ALGORITHMS: Dict[str, SearchAlgorithm] = {
    algorithm.identifier: algorithm
    for algorithm in (
        LinearSearch(),
        BinarySearch(),
        JumpSearch(),
        InterpolationSearch(),
        ExponentialSearch(),
    )
}

DEFAULT_ALGORITHM = next(iter(ALGORITHMS))


def get_algorithm(identifier: str) -> SearchAlgorithm:
    """
    Look up a registered algorithm.

    Args:
        identifier: Algorithm key, compared case-insensitively.

    Raises:
        UnknownAlgorithmError: If no algorithm is registered under the key.
    """
    key = identifier.strip().lower() if identifier else ""
    try:
        return ALGORITHMS[key]
    except KeyError:
        raise UnknownAlgorithmError(identifier) from None


def list_algorithms() -> List[AlgorithmDescriptor]:
    return [algorithm.descriptor for algorithm in ALGORITHMS.values()]


def create_producer(identifier: str, array: Sequence[Number], target: Number) -> StepProducer:
    return get_algorithm(identifier).create_producer(array, target)
