import math
from typing import Sequence, Tuple
from stepsearch.search.base import (
    AlgorithmDescriptor,
    AlgorithmInfo,
    Number,
    SearchAlgorithm,
    SearchStep,
    StepProducer,
)


class BinarySearchProducer(StepProducer):
    """
    Binary Search step producer.

    Halves the candidate interval `[left, right]` around its middle element
    on every resume. The array must be sorted ascending; this is not checked,
    and unsorted input gives unreliable (but terminating) results.

    Attributes:
        left (int): Lower bound of the interval still in play.
        right (int): Upper bound of the interval still in play.
    """

    def __init__(self, array: Sequence[Number], target: Number) -> None:
        """
        Initialize the BinarySearchProducer instance.

        Args:
            array (Sequence[Number]): Sorted values to search.
            target (Number): Value to look for.
        """
        super().__init__(array, target)
        self.left = 0
        self.right = len(self.snapshot) - 1

    def _advance(self) -> SearchStep:
        return self._bisect()

    def _bisect(self) -> SearchStep:
        """
        Compare the middle of `[left, right]` and narrow the interval.

        Returns:
            SearchStep: A comparison-step at the midpoint, or the terminal
            NotFound step once the interval is empty.
        """
        if self.left > self.right:
            return self._not_found()

        mid = (self.left + self.right) // 2
        step = self._compare(mid)
        value = self.snapshot[mid]
        if value < self.target:
            self.left = mid + 1
        elif value > self.target:
            self.right = mid - 1
        return step


class BinarySearch(SearchAlgorithm):
    descriptor = AlgorithmDescriptor(
        identifier="binary",
        display_name="Binary Search",
        explanation=AlgorithmInfo(
            how="Repeatedly divides the sorted array in half, comparing the target to the middle element.",
            pros="Very fast (O(log n)), but requires sorted array.",
            cons="Only works on sorted arrays.",
        ),
    )

    def create_producer(self, array: Sequence[Number], target: Number) -> BinarySearchProducer:
        return BinarySearchProducer(array, target)

    def comparison_bounds(self, n: int) -> Tuple[int, int]:
        if n <= 0:
            return 0, 0
        return 1, math.ceil(math.log2(n)) + 1
