import math
from typing import Sequence, Tuple
from stepsearch.search.base import (
    AlgorithmDescriptor,
    AlgorithmInfo,
    Number,
    SearchAlgorithm,
    SearchStep,
)
from stepsearch.search.algorithms.binary import BinarySearchProducer

FIRST_PHASE = "first"
DOUBLING_PHASE = "doubling"
BISECT_PHASE = "bisect"


class ExponentialSearchProducer(BinarySearchProducer):
    """
    Exponential Search step producer.

    Probes index 0, then doubles a probe index (1, 2, 4, 8, ...) while the
    probed value does not exceed the target, and finally bisects
    `[bound // 2, min(bound, n - 1)]` exactly like `BinarySearchProducer`.

    The index 0 probe is a regular comparison-step counted like any other,
    so a miss there already reports one comparison. Doubling probes only
    bracket the target, a hit is reported by the bisection phase.
    """

    def __init__(self, array: Sequence[Number], target: Number):
        super().__init__(array, target)
        self.bound = 1
        self.phase = FIRST_PHASE

    def _advance(self) -> SearchStep:
        n = len(self.snapshot)
        if self.phase == FIRST_PHASE:
            if n == 0:
                return self._not_found()
            self.phase = DOUBLING_PHASE
            return self._compare(0)

        if self.phase == DOUBLING_PHASE:
            if self.bound < n and self.snapshot[self.bound] <= self.target:
                probe = self.bound
                self.bound *= 2
                return self._compare(probe, detect_match=False)
            self.phase = BISECT_PHASE
            self.left = self.bound // 2
            self.right = min(self.bound, n - 1)

        return self._bisect()


class ExponentialSearch(SearchAlgorithm):
    descriptor = AlgorithmDescriptor(
        identifier="exponential",
        display_name="Exponential Search",
        explanation=AlgorithmInfo(
            how="Finds range by repeated doubling, then does binary search in that range.",
            pros="O(log n), good for unbounded/infinite lists.",
            cons="Requires sorted array.",
        ),
    )

    def create_producer(self, array: Sequence[Number], target: Number) -> ExponentialSearchProducer:
        return ExponentialSearchProducer(array, target)

    def comparison_bounds(self, n: int) -> Tuple[int, int]:
        if n <= 0:
            return 0, 0
        return 1, math.ceil(math.log2(n)) + 1
