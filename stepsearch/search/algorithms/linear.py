from typing import Sequence, Tuple
from stepsearch.search.base import (
    AlgorithmDescriptor,
    AlgorithmInfo,
    Number,
    SearchAlgorithm,
    SearchStep,
    StepProducer,
)


class LinearSearchProducer(StepProducer):
    """
    Sequential scan over the array, one comparison per index.

    Performance characteristics:
        - Time complexity: O(n) where n is the number of elements
        - Best case: 1 comparison when the target sits at index 0
        - Worst case: n comparisons when the target is absent or last

    Args:
        array (Sequence[Number]): Values to scan, sorted or not.
        target (Number): Value to look for.

    Attributes:
        position (int): Next index to inspect.

    Example:
        >>> producer = LinearSearchProducer([4, 2, 7], 2)
        >>> [step.comparing_indices for step in producer]
        [(0,), (1,), ()]
        >>> producer.get_stats()["comparisons"]
        2
    """

    def __init__(self, array: Sequence[Number], target: Number):
        super().__init__(array, target)
        self.position = 0

    def _advance(self) -> SearchStep:
        if self.position >= len(self.snapshot):
            return self._not_found()

        index = self.position
        self.position += 1
        return self._compare(index)


class LinearSearch(SearchAlgorithm):
    descriptor = AlgorithmDescriptor(
        identifier="linear",
        display_name="Linear Search",
        explanation=AlgorithmInfo(
            how="Checks each element in the array sequentially until the target is found or the end is reached.",
            pros="Simple, works on unsorted arrays.",
            cons="Slow for large arrays (O(n)).",
        ),
    )

    def create_producer(self, array: Sequence[Number], target: Number) -> LinearSearchProducer:
        return LinearSearchProducer(array, target)

    def comparison_bounds(self, n: int) -> Tuple[int, int]:
        if n <= 0:
            return 0, 0
        return 1, n
